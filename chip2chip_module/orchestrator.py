"""Main orchestrator for a Chip2Chip job.

Checks the job parameters, writes the Chip2Chip parameter file, runs the
tool and packages its results into the job directory.
"""

import logging
from pathlib import Path

from .core.config import ToolConfig
from .core.exceptions import (
    Chip2ChipError,
    JobParametersError,
    SelectionError,
)
from .core.models import Chip2ChipParameters, JobParameters, ParameterCheckResult
from .core.types import DEFAULT_DELIMITER, GeneSetMatrixFormat
from .output.param_file import ParamFileWriter
from .output.results import packaged_results
from .resolution.selector_resolver import resolve_selectors, split_selection_tokens
from .runner import run_chip2chip
from .staging.file_staging import copy_file_without_bad_chars, read_database_list

logger = logging.getLogger(__name__)


class Chip2ChipOrchestrator:
    """Orchestrates a complete Chip2Chip job."""

    def __init__(self, config: ToolConfig | None = None, job_dir: Path | str | None = None):
        """
        Initialize the orchestrator.

        Args:
            config: Tool configuration (loaded from the environment if not provided)
            job_dir: Job directory receiving the results (default: current directory)
        """
        self.config = config or ToolConfig.load()
        self.job_dir = Path(job_dir) if job_dir else Path.cwd()

        # Hidden from GenePattern and the file system listing
        self.working_dir = self.job_dir / self.config.working_dir_name
        self.analysis_dir = self.working_dir / self.config.analysis_dir_name
        self.param_file = self.working_dir / self.config.param_file_name

        self.param_writer = ParamFileWriter()
        self._errors: list[str] = []

    def _add_error(self, message: str) -> None:
        """Record a parameter problem and keep checking."""
        logger.error(message)
        self._errors.append(message)

    def _stage_chip(self, chip: str | None) -> str | None:
        if not chip or not chip.strip():
            self._add_error("Required parameter 'chip.platform.file' not found")
            return None
        try:
            return copy_file_without_bad_chars(chip, self.working_dir)
        except Chip2ChipError as e:
            self._add_error(e.message)
            return None

    def _load_databases(self, gmx: str | None) -> list[str]:
        if not gmx or not gmx.strip():
            self._add_error(
                "No Gene Sets Databases files were specified. "
                "Please provide one or more values to the 'gene.sets.database' parameter."
            )
            return []

        try:
            database_files = read_database_list(gmx)
        except Chip2ChipError as e:
            self._add_error(e.message)
            return []

        staged = []
        for path in database_files:
            try:
                staged.append(copy_file_without_bad_chars(path, self.working_dir))
            except Chip2ChipError as e:
                # Keep the original name so the remaining checks can still run
                self._add_error(e.message)
                staged.append(path)
        return staged

    def _check_delimiter(self, alt_delim: str | None) -> tuple[str, str | None]:
        """Returns the delimiter to use and the alt delimiter to pass on, if any."""
        if not alt_delim or not alt_delim.strip():
            return DEFAULT_DELIMITER, None
        if len(alt_delim) > 1:
            self._add_error(
                f"Invalid alt.delim '{alt_delim}' specified. "
                "This must be only a single character and no whitespace."
            )
            return DEFAULT_DELIMITER, None
        return alt_delim, alt_delim

    def _select_gene_sets(self, database_files: list[str], tokens: list[str]) -> list[str]:
        if not tokens:
            return database_files
        try:
            return resolve_selectors(database_files, tokens)
        except SelectionError as e:
            self._add_error("There was a problem processing the 'gene.set.selector' parameter")
            self._add_error(e.message)
            return []

    def check_parameters(self, job: JobParameters) -> ParameterCheckResult:
        """
        Run every parameter check, collecting all problems.

        Args:
            job: Raw job parameters

        Returns:
            ParameterCheckResult holding either the validated parameters or
            every error found
        """
        self._errors = []

        matrix_format = GeneSetMatrixFormat.from_param(job.genesetmatrix_format)
        chip_target = self._stage_chip(job.chip)
        database_files = self._load_databases(job.gmx)
        delimiter, alt_delim = self._check_delimiter(job.alt_delim)
        tokens = split_selection_tokens(job.selected_gene_sets, delimiter)
        selection = self._select_gene_sets(database_files, tokens)

        if self._errors:
            return ParameterCheckResult(errors=list(self._errors))

        parameters = Chip2ChipParameters(
            gene_sets_selector=delimiter.join(selection),
            chip_target=chip_target,
            out=self.analysis_dir,
            matrix_format=matrix_format,
            zip_report=job.create_zip,
            alt_delim=alt_delim,
            show_etiology=job.show_etiology,
        )
        return ParameterCheckResult(parameters=parameters)

    def write_param_file(self, parameters: Chip2ChipParameters) -> Path:
        """Write the Chip2Chip parameter file into the working directory."""
        try:
            return self.param_writer.format_to_file(parameters, self.param_file)
        except OSError as e:
            raise Chip2ChipError(f"Error creating parameter file: {e}", {"path": str(self.param_file)}) from e

    def run(self, job: JobParameters) -> int:
        """
        Run a complete job.

        Results are packaged into the job directory however the run ends.

        Args:
            job: Raw job parameters

        Returns:
            Chip2Chip's exit status

        Raises:
            JobParametersError: If any parameter check failed (the tool is not run)
            ToolExecutionError: If the tool cannot be launched
        """
        with packaged_results(
            self.job_dir,
            self.analysis_dir,
            create_zip=job.create_zip,
            zip_name=self.config.results_zip_name,
        ):
            result = self.check_parameters(job)
            if not result.ok:
                raise JobParametersError(result.errors)

            param_file = self.write_param_file(result.parameters)
            logger.info(f"Running Chip2Chip for job in {self.job_dir}")
            return run_chip2chip(self.config, param_file, cwd=self.job_dir, dev_mode=job.dev_mode)
