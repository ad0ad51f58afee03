"""Pydantic data models for the Chip2Chip module wrapper.

All models are immutable (frozen) after creation; a job's parameters are
built once and consumed once.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from .types import DEFAULT_DELIMITER, REPORT_LABEL, GeneSetMatrixFormat


class BareSelector(BaseModel):
    """A selection token naming only a gene set (single-file shorthand)."""

    kind: Literal["bare"] = "bare"
    gene_set_name: str

    model_config = {"frozen": True}


class QualifiedSelector(BaseModel):
    """A selection token of the form fileName#geneSetName."""

    kind: Literal["qualified"] = "qualified"
    file_name: str
    gene_set_name: str

    model_config = {"frozen": True}


Selector = BareSelector | QualifiedSelector


class JobParameters(BaseModel):
    """Raw job parameters as supplied by the GenePattern run task page."""

    chip: str | None = None
    gmx: str | None = None  # path of a file listing one database path per line
    genesetmatrix_format: str | None = None
    show_etiology: str | None = None
    selected_gene_sets: str | None = None
    alt_delim: str | None = None
    create_zip: bool = False
    dev_mode: bool = False

    model_config = {"frozen": True}


class Chip2ChipParameters(BaseModel):
    """Validated parameters, ready to be written to the tool's parameter file."""

    gene_sets_selector: str
    chip_target: str
    out: Path
    rpt_label: str = REPORT_LABEL
    matrix_format: GeneSetMatrixFormat = GeneSetMatrixFormat.GMT
    zip_report: bool = False
    alt_delim: str | None = None
    show_etiology: str | None = None
    gui: bool = False

    model_config = {"frozen": True}

    @property
    def delimiter(self) -> str:
        """Delimiter used to join gene set selectors."""
        return self.alt_delim or DEFAULT_DELIMITER

    def entries(self) -> list[tuple[str, str]]:
        """Parameter file entries, in the order Chip2Chip expects them."""
        entries = [
            ("gmx", self.gene_sets_selector),
            ("chip_target", self.chip_target),
            ("out", str(self.out)),
            ("rpt_label", self.rpt_label),
            ("genesetmatrix_format", self.matrix_format.tool_token),
            ("zip_report", str(self.zip_report).lower()),
        ]
        if self.alt_delim:
            entries.append(("altDelim", self.alt_delim))
        if self.show_etiology is not None:
            entries.append(("show_etiology", self.show_etiology))
        entries.append(("gui", str(self.gui).lower()))
        return entries


class ParameterCheckResult(BaseModel):
    """Outcome of processing job parameters.

    ``parameters`` is only set when ``errors`` is empty.
    """

    parameters: Chip2ChipParameters | None = None
    errors: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        """True when every parameter check passed."""
        return not self.errors and self.parameters is not None
