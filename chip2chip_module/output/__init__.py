"""Output module - parameter file writing and result packaging."""

from .param_file import ParamFileWriter
from .results import (
    collect_results,
    copy_zip_to_job_if_present,
    delete_empty_directories,
    packaged_results,
)

__all__ = [
    "ParamFileWriter",
    "collect_results",
    "copy_zip_to_job_if_present",
    "delete_empty_directories",
    "packaged_results",
]
