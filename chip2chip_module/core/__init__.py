"""Core module - data models, types, configuration, and exceptions."""

from .models import (
    BareSelector,
    QualifiedSelector,
    Selector,
    JobParameters,
    Chip2ChipParameters,
    ParameterCheckResult,
)
from .types import GeneSetMatrixFormat
from .config import ToolConfig
from .exceptions import (
    Chip2ChipError,
    ParameterError,
    SelectionError,
    DuplicateFileNameError,
    MalformedTokenError,
    FileMismatchError,
    UnknownFileNameError,
    StagingError,
    ToolExecutionError,
    PackagingError,
    ConfigurationError,
    JobParametersError,
)

__all__ = [
    # Models
    "BareSelector",
    "QualifiedSelector",
    "Selector",
    "JobParameters",
    "Chip2ChipParameters",
    "ParameterCheckResult",
    # Types
    "GeneSetMatrixFormat",
    # Config
    "ToolConfig",
    # Exceptions
    "Chip2ChipError",
    "ParameterError",
    "SelectionError",
    "DuplicateFileNameError",
    "MalformedTokenError",
    "FileMismatchError",
    "UnknownFileNameError",
    "StagingError",
    "ToolExecutionError",
    "PackagingError",
    "ConfigurationError",
    "JobParametersError",
]
