"""Pytest configuration and fixtures for Chip2Chip module wrapper tests."""

from pathlib import Path

import pytest

from chip2chip_module.core.config import ToolConfig
from chip2chip_module.core.models import JobParameters


@pytest.fixture
def job_dir(tmp_path: Path) -> Path:
    """Empty GenePattern job directory."""
    path = tmp_path / "job"
    path.mkdir()
    return path


@pytest.fixture
def uploads_dir(tmp_path: Path) -> Path:
    """Directory standing in for GenePattern's uploaded input files."""
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def chip_file(uploads_dir: Path) -> Path:
    """Sample chip platform file."""
    path = uploads_dir / "HG_U133A.chip"
    path.write_text("Probe Set ID\tGene Symbol\tGene Title\n1007_s_at\tDDR1\tdiscoidin domain receptor\n")
    return path


@pytest.fixture
def gmt_files(uploads_dir: Path) -> list[Path]:
    """Two sample gene set database files with distinct base names."""
    c2 = uploads_dir / "c2.gmt"
    c2.write_text("SET_A\tna\t1007_s_at\t1053_at\nSET_B\tna\t117_at\n")
    h = uploads_dir / "h.gmt"
    h.write_text("HALLMARK_X\tna\t121_at\n")
    return [c2, h]


@pytest.fixture
def write_db_list(uploads_dir: Path):
    """Write a gene set database list file for the given paths."""

    def _write(paths: list, name: str = "gmx_files.txt") -> Path:
        list_file = uploads_dir / name
        list_file.write_text("".join(f"{p}\n" for p in paths))
        return list_file

    return _write


@pytest.fixture
def tool_config(tmp_path: Path) -> ToolConfig:
    """Tool config pointing at a placeholder GSEA jar."""
    jar = tmp_path / "gsea.jar"
    jar.write_bytes(b"PK")
    return ToolConfig(java_executable="java", gsea_jar=str(jar))


@pytest.fixture
def sample_job(chip_file: Path, gmt_files: list[Path], write_db_list) -> JobParameters:
    """Job parameters selecting one gene set from each file."""
    return JobParameters(
        chip=str(chip_file),
        gmx=str(write_db_list(gmt_files)),
        genesetmatrix_format="gmt",
        selected_gene_sets="c2.gmt#SET_A,h.gmt#HALLMARK_X",
    )
