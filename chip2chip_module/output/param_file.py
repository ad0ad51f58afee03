"""Parameter file writer for Chip2Chip.

The file is a sequence of ``name<TAB>value`` lines, each followed by a blank
line.
"""

import io
import logging
from pathlib import Path

from ..core.models import Chip2ChipParameters

logger = logging.getLogger(__name__)


class ParamFileWriter:
    """Renders Chip2ChipParameters as a Chip2Chip parameter file."""

    def format(self, params: Chip2ChipParameters) -> str:
        """Format the parameters as parameter file text."""
        buffer = io.StringIO()
        for name, value in params.entries():
            buffer.write(f"{name}\t{value}\n\n")
        return buffer.getvalue()

    def format_to_file(self, params: Chip2ChipParameters, filepath: Path) -> Path:
        """Write the parameter file, echoing each entry to the log."""
        logger.info("Parameters passing to Chip2Chip:")
        for name, value in params.entries():
            logger.info(f"{name}\t{value}")

        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w") as f:
            f.write(self.format(params))
        return filepath
