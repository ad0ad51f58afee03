"""Staging of job input files into the hidden working directory.

Chip2Chip treats '#' and '@' in file paths as syntax, so inputs carrying
those characters are copied under a sanitized name before being passed on.
"""

import logging
import shutil
from pathlib import Path

from ..core.exceptions import ParameterError, StagingError
from ..core.types import BAD_FILE_NAME_CHARS
from ..resolution.selector_resolver import base_name

logger = logging.getLogger(__name__)


def needs_sanitizing(path: str) -> bool:
    """Check if a path contains characters Chip2Chip cannot accept."""
    return any(c in path for c in BAD_FILE_NAME_CHARS)


def sanitized_name(path: str) -> str:
    """Base name of ``path`` with '#' and '@' replaced by underscores."""
    name = base_name(path)
    for c in BAD_FILE_NAME_CHARS:
        name = name.replace(c, "_")
    return name


def copy_file_without_bad_chars(path: str, working_dir: Path) -> str:
    """
    Return a path to ``path``'s content that Chip2Chip can accept.

    Clean paths are returned unchanged. Otherwise the file is copied into
    ``working_dir`` under its sanitized base name, which also drops any
    offending characters in the directory part.

    Raises:
        StagingError: If the copy fails
    """
    if not needs_sanitizing(path):
        return path

    destination = working_dir / sanitized_name(path)
    logger.info(f"Copying file '{path}' to '{destination.name}'")
    try:
        working_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(path, destination)
    except OSError as e:
        raise StagingError(path, destination.name, str(e)) from e
    return str(destination)


def read_database_list(list_file: str) -> list[str]:
    """
    Read a gene set database list file (one path per line).

    Blank lines are skipped.

    Raises:
        ParameterError: If the list file cannot be read
    """
    try:
        with open(list_file, "r") as f:
            return [line.rstrip("\r\n") for line in f if line.strip()]
    except OSError as e:
        raise ParameterError("gene.sets.database", f"Cannot read Gene Sets Database list '{list_file}': {e}") from e
