"""Type definitions and enums for the Chip2Chip module wrapper."""

from enum import Enum


class GeneSetMatrixFormat(str, Enum):
    """Output formats for the converted gene set matrix."""

    GMX = "gmx"
    GMT = "gmt"

    @classmethod
    def from_param(cls, value: str | None) -> "GeneSetMatrixFormat":
        """Anything other than 'gmx' (case-insensitive) selects GMT."""
        if value is not None and value.lower() == cls.GMX.value:
            return cls.GMX
        return cls.GMT

    @property
    def tool_token(self) -> str:
        """Format name as understood by Chip2Chip."""
        tokens = {
            self.GMX: "GeneSetMatrix[gmx]",
            self.GMT: "GeneSetMatrix_Transposed[gmt]",
        }
        return tokens[self]


# Characters that Chip2Chip treats as syntax inside file paths
SELECTOR_SEPARATOR = "#"
BAD_FILE_NAME_CHARS = "#@"

DEFAULT_DELIMITER = ","
REPORT_LABEL = "my_analysis"
