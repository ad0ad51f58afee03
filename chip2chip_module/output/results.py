"""Packaging of Chip2Chip results into the job directory.

After the tool finishes, its report sits in the hidden analysis directory.
The job directory should end up holding the optional results zip, the
output files and the uploaded inputs, and nothing else.
"""

import logging
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from ..core.exceptions import PackagingError

logger = logging.getLogger(__name__)


def copy_zip_to_job_if_present(analysis_dir: Path, zip_name: str, job_dir: Path) -> Path | None:
    """
    Move the report zip from ``analysis_dir`` to ``job_dir/zip_name``.

    Returns:
        Destination path, or None if there was no zip to move

    Raises:
        PackagingError: If more than one zip was created
    """
    if not analysis_dir.exists():
        return None

    zips = sorted(p for p in analysis_dir.glob("*.zip") if p.is_file())
    if not zips:
        return None
    if len(zips) > 1:
        raise PackagingError(
            "Internal Error: multiple ZIP files created",
            {"zips": [p.name for p in zips]},
        )

    destination = job_dir / zip_name
    try:
        shutil.move(str(zips[0]), str(destination))
    except OSError as e:
        logger.error(f"Internal error moving result ZIP: {e}")
        return None
    return destination


def delete_empty_directories(directory: Path) -> list[Path]:
    """Delete empty directories directly under ``directory`` (not recursive)."""
    deleted = []
    if not directory.is_dir():
        return deleted
    for child in sorted(directory.iterdir()):
        if child.is_dir() and not any(child.iterdir()):
            child.rmdir()
            deleted.append(child)
            logger.debug(f"Removed empty directory {child}")
    return deleted


def collect_results(analysis_dir: Path, job_dir: Path, create_zip: bool, zip_name: str) -> None:
    """Relocate the zip (if requested) and flatten the analysis output into the job dir."""
    if not analysis_dir.exists():
        return
    try:
        if create_zip:
            copy_zip_to_job_if_present(analysis_dir, zip_name, job_dir)
    finally:
        try:
            shutil.copytree(analysis_dir, job_dir, dirs_exist_ok=True)
        except (OSError, shutil.Error) as e:
            logger.error(f"Error during clean-up: {e}")


@contextmanager
def packaged_results(
    job_dir: Path,
    analysis_dir: Path,
    create_zip: bool,
    zip_name: str,
) -> Iterator[Path]:
    """
    Create ``analysis_dir`` and package its content into ``job_dir`` on exit.

    Packaging runs however the block exits, including on SystemExit.
    Packaging errors are logged and never replace the block's own outcome.
    Empty directory removal runs even if collecting results fails.

    Yields:
        The analysis directory the tool should write to
    """
    analysis_dir.mkdir(parents=True, exist_ok=True)
    try:
        yield analysis_dir
    finally:
        try:
            collect_results(analysis_dir, job_dir, create_zip, zip_name)
        except PackagingError as e:
            logger.error(f"Error during clean-up: {e.message}")
        finally:
            # Chip2Chip leaves behind an empty directory named after the date
            delete_empty_directories(job_dir)
