"""Selector resolution module - resolves gene set selection tokens to selectors."""

from .selector_resolver import (
    SelectorResolver,
    parse_token,
    resolve_selectors,
    split_selection_tokens,
)

__all__ = ["SelectorResolver", "parse_token", "resolve_selectors", "split_selection_tokens"]
