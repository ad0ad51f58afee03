"""Gene set selector resolution.

Turns user selection tokens into the ``fullFilePath#geneSetName`` selectors
Chip2Chip expects:
- ``fileName#geneSetName`` picks a gene set from one of the submitted files
- ``geneSetName`` is accepted only when exactly one file was submitted

Whether the named gene sets exist is left to Chip2Chip.
"""

import logging
from typing import Sequence

from ..core.exceptions import (
    DuplicateFileNameError,
    FileMismatchError,
    MalformedTokenError,
    UnknownFileNameError,
)
from ..core.models import BareSelector, QualifiedSelector, Selector
from ..core.types import SELECTOR_SEPARATOR

logger = logging.getLogger(__name__)


def base_name(path: str) -> str:
    """File name with any leading directories stripped (either separator)."""
    return path.replace("\\", "/").rsplit("/", 1)[-1]


def split_token(token: str) -> list[str]:
    """Split a token on '#', discarding trailing empty parts."""
    if SELECTOR_SEPARATOR not in token:
        return [token]
    parts = token.split(SELECTOR_SEPARATOR)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def parse_token(token: str) -> Selector:
    """
    Parse a selection token into a bare or qualified selector.

    Raises:
        MalformedTokenError: If the token does not have one or two parts
    """
    parts = split_token(token)
    if len(parts) == 1:
        return BareSelector(gene_set_name=parts[0])
    if len(parts) == 2:
        return QualifiedSelector(file_name=parts[0], gene_set_name=parts[1])
    raise MalformedTokenError(token)


class SelectorResolver:
    """Resolves selection tokens against the submitted gene set database files."""

    def __init__(self, database_files: Sequence[str]):
        self.database_files = list(database_files)
        self._paths: dict[str, str] | None = None

    @property
    def paths_by_name(self) -> dict[str, str]:
        """Base name -> full path for every database file."""
        if self._paths is None:
            self._paths = self._build_name_map(self.database_files)
        return self._paths

    @staticmethod
    def _build_name_map(database_files: Sequence[str]) -> dict[str, str]:
        paths: dict[str, str] = {}
        for path in database_files:
            name = base_name(path)
            if name in paths:
                raise DuplicateFileNameError(name)
            logger.debug(f"Adding base name '{name}' with full path '{path}'")
            paths[name] = path
        return paths

    def resolve(self, selection_tokens: Sequence[str]) -> list[str]:
        """
        Resolve selection tokens to full selectors, preserving order.

        Args:
            selection_tokens: Tokens in ``geneSetName`` or ``fileName#geneSetName`` form

        Returns:
            Selectors in ``fullFilePath#geneSetName`` form

        Raises:
            SelectionError: On the first token (or file list) that does not validate
        """
        # No files at all means an earlier stage already failed and reported it
        if not self.database_files:
            return []

        paths = self.paths_by_name
        if len(paths) == 1:
            ((lone_name, lone_path),) = paths.items()
            return [self._resolve_single(token, lone_name, lone_path) for token in selection_tokens]
        return [self._resolve_multiple(token, paths) for token in selection_tokens]

    @staticmethod
    def _resolve_single(token: str, lone_name: str, lone_path: str) -> str:
        match parse_token(token):
            case BareSelector(gene_set_name=gene_set):
                return f"{lone_path}{SELECTOR_SEPARATOR}{gene_set}"
            case QualifiedSelector(file_name=file_name, gene_set_name=gene_set) if file_name == lone_name:
                return f"{lone_path}{SELECTOR_SEPARATOR}{gene_set}"
            case QualifiedSelector():
                raise FileMismatchError(token, lone_name)

    @staticmethod
    def _resolve_multiple(token: str, paths: dict[str, str]) -> str:
        match parse_token(token):
            case QualifiedSelector(file_name=file_name, gene_set_name=gene_set):
                if file_name not in paths:
                    raise UnknownFileNameError(file_name)
                return f"{paths[file_name]}{SELECTOR_SEPARATOR}{gene_set}"
            case BareSelector():
                raise MalformedTokenError(token)


def resolve_selectors(database_files: Sequence[str], selection_tokens: Sequence[str]) -> list[str]:
    """Resolve selection tokens against database files (see SelectorResolver)."""
    return SelectorResolver(database_files).resolve(selection_tokens)


def split_selection_tokens(value: str | None, delimiter: str) -> list[str]:
    """
    Split the selected gene sets parameter on a literal delimiter.

    A blank value means no selection. Trailing empty tokens are dropped.
    """
    if not value or not value.strip():
        return []
    tokens = value.split(delimiter)
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens
