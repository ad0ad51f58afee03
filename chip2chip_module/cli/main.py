"""CLI entry point for the Chip2Chip GenePattern module.

Usage:
    chip2chip run -chip HG_U133A.chip -gmx gmx_files.txt
    chip2chip run -chip HG_U133A.chip -gmx gmx_files.txt -selected_gene_sets "c2.gmt#SET_A,c2.gmt#SET_B"
    chip2chip run -chip HG_U133A.chip -gmx gmx_files.txt -genesetmatrix_format gmx -create_zip true
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..core.config import ToolConfig
from ..core.exceptions import Chip2ChipError, JobParametersError
from ..core.models import JobParameters
from ..orchestrator import Chip2ChipOrchestrator

# Initialize app
app = typer.Typer(
    name="chip2chip",
    help="GenePattern wrapper for the GSEA Chip2Chip tool",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def is_true(value: Optional[str]) -> bool:
    """GenePattern passes booleans as strings; only 'true' (any case) is true."""
    return value is not None and value.lower() == "true"


@app.command()
def run(
    chip: Optional[str] = typer.Option(
        None,
        "--chip", "-chip",
        help="Chip platform file for the target platform",
    ),
    gmx: Optional[str] = typer.Option(
        None,
        "--gmx", "-gmx",
        help="File listing the Gene Sets Database files (one path per line)",
    ),
    genesetmatrix_format: Optional[str] = typer.Option(
        None,
        "--genesetmatrix-format", "-genesetmatrix_format",
        help="Output format: gmx or gmt",
    ),
    show_etiology: Optional[str] = typer.Option(
        None,
        "--show-etiology", "-show_etiology",
        help="Passed through to Chip2Chip",
    ),
    selected_gene_sets: Optional[str] = typer.Option(
        None,
        "--selected-gene-sets", "-selected_gene_sets",
        help="Delimited gene set selectors (fileName#geneSetName or geneSetName)",
    ),
    alt_delim: Optional[str] = typer.Option(
        None,
        "--alt-delim", "-altDelim",
        help="Single-character delimiter replacing the comma",
    ),
    create_zip: Optional[str] = typer.Option(
        None,
        "--create-zip", "-create_zip",
        help="'true' to package the report as a zip",
    ),
    dev_mode: Optional[str] = typer.Option(
        None,
        "--dev-mode", "-dev_mode",
        help="'true' to enable developer settings",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to YAML tool config file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Run Chip2Chip for a GenePattern job in the current directory.

    Examples:
        chip2chip run -chip HG_U133A.chip -gmx gmx_files.txt
        chip2chip run -chip HG_U133A.chip -gmx gmx_files.txt -selected_gene_sets SET_A
    """
    setup_logging(verbose)

    job = JobParameters(
        chip=chip,
        gmx=gmx,
        genesetmatrix_format=genesetmatrix_format,
        show_etiology=show_etiology,
        selected_gene_sets=selected_gene_sets,
        alt_delim=alt_delim,
        create_zip=is_true(create_zip),
        dev_mode=is_true(dev_mode),
    )

    try:
        tool_config = ToolConfig.load(config_file=config)
        orchestrator = Chip2ChipOrchestrator(config=tool_config, job_dir=Path.cwd())
        status = orchestrator.run(job)

    except JobParametersError as e:
        console.print(e.message, markup=False, soft_wrap=True)
        raise typer.Exit(1)

    except Chip2ChipError as e:
        err_console.print(f"[red]Error: {e.message}[/]")
        if verbose:
            err_console.print_exception()
        raise typer.Exit(1)

    raise typer.Exit(status)


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__
    console.print(f"Chip2Chip module wrapper v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
