"""Custom exceptions for the Chip2Chip module wrapper."""


class Chip2ChipError(Exception):
    """Base exception for all Chip2Chip wrapper errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ParameterError(Chip2ChipError):
    """Raised when a job parameter is missing or invalid."""

    def __init__(self, parameter: str, message: str):
        super().__init__(message, {"parameter": parameter})
        self.parameter = parameter


class SelectionError(Chip2ChipError):
    """Raised when gene set selectors cannot be resolved."""


class DuplicateFileNameError(SelectionError):
    """Raised when two gene set database files share a base name."""

    def __init__(self, file_name: str):
        message = (
            f"Duplicated file name '{file_name}' found in submitted Gene Set files.  "
            "This is not allowed with selected.gene.sets."
        )
        super().__init__(message, {"file_name": file_name})
        self.file_name = file_name


class MalformedTokenError(SelectionError):
    """Raised when a selection token has the wrong number of '#' parts."""

    def __init__(self, token: str):
        message = (
            f"Gene Set selection specifier '{token}' is not valid. Each selection must be a "
            "file name + '#' + gene set name, e.g. my_file1.gmt#selected_gene_set1. The selector "
            "can be shortened to selected_gene_set1 when there is only one Gene Set file."
        )
        super().__init__(message, {"token": token})
        self.token = token


class FileMismatchError(SelectionError):
    """Raised when a qualified token names a file other than the lone database file."""

    def __init__(self, token: str, file_name: str):
        message = (
            f"Gene Set selection specifier '{token}' is not valid; Specified file name must "
            f"match lone file '{file_name}' supplied as the Gene Set database."
        )
        super().__init__(message, {"token": token, "file_name": file_name})
        self.token = token
        self.file_name = file_name


class UnknownFileNameError(SelectionError):
    """Raised when a qualified token names a file that was not submitted."""

    def __init__(self, file_name: str):
        message = f"Selected file name '{file_name}' not found in submitted Gene Set files."
        super().__init__(message, {"file_name": file_name})
        self.file_name = file_name


class StagingError(Chip2ChipError):
    """Raised when an input file cannot be staged into the working directory."""

    def __init__(self, source: str, destination: str, reason: str):
        message = f"An error occurred trying to copy '{source}' to '{destination}': {reason}"
        super().__init__(message, {"source": source, "destination": destination})
        self.source = source
        self.destination = destination


class ToolExecutionError(Chip2ChipError):
    """Raised when the external Chip2Chip tool cannot be launched."""


class PackagingError(Chip2ChipError):
    """Raised when tool results cannot be packaged into the job directory."""


class ConfigurationError(Chip2ChipError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key


class JobParametersError(Chip2ChipError):
    """Raised once all parameter checks have run and at least one failed."""

    def __init__(self, errors: list[str]):
        message = "There were one or more errors with the job parameters.  Please check stderr.txt for details."
        super().__init__(message, {"errors": errors})
        self.errors = errors
