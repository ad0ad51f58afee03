"""Launches the external Chip2Chip tool from the GSEA distribution."""

import logging
import shutil
import subprocess
from pathlib import Path

from .core.config import ToolConfig
from .core.exceptions import ToolExecutionError

logger = logging.getLogger(__name__)


def build_system_properties(dev_mode: bool) -> dict[str, str]:
    """JVM system properties controlling the GSEA code.

    Debugging and directory creation are always off. Dev mode disables the
    update check; otherwise the check is tagged as coming from the modules.
    """
    props = {"debug": "false", "mkdir": "false"}
    if dev_mode:
        props["DMAKE_GSEA_UPDATE_CHECK"] = "false"
    else:
        props["DMAKE_GSEA_UPDATE_CHECK"] = "true"
        props["UPDATE_CHECK_EXTRA_PROJECT_INFO"] = "GP_MODULES"
    return props


def build_command(config: ToolConfig, param_file: Path, dev_mode: bool = False) -> list[str]:
    """Build the java command line running Chip2Chip on ``param_file``."""
    if not config.gsea_jar:
        raise ToolExecutionError(
            "GSEA jar not configured; set CHIP2CHIP_GSEA_JAR or gsea_jar in the config file"
        )

    cmd = [config.java_executable, *config.jvm_options]
    cmd.extend(f"-D{name}={value}" for name, value in build_system_properties(dev_mode).items())
    cmd.extend(["-cp", config.gsea_jar, config.main_class, "-param_file", str(param_file)])
    return cmd


def _validate(config: ToolConfig) -> None:
    if not shutil.which(config.java_executable):
        raise ToolExecutionError(
            f"Executable {config.java_executable!r} not found on PATH",
            {"java_executable": config.java_executable},
        )
    if not config.has_gsea_jar():
        raise ToolExecutionError(
            f"GSEA jar not found: {config.gsea_jar!r}",
            {"gsea_jar": config.gsea_jar},
        )


def run_chip2chip(config: ToolConfig, param_file: Path, cwd: Path, dev_mode: bool = False) -> int:
    """
    Run Chip2Chip and wait for it to finish.

    The tool inherits this process's stdout and stderr so its messages land
    in the job's log files.

    Returns:
        The tool's exit status

    Raises:
        ToolExecutionError: If the tool cannot be launched
    """
    _validate(config)
    cmd = build_command(config, param_file, dev_mode)
    logger.debug(f"Running: {' '.join(cmd)}")

    try:
        completed = subprocess.run(cmd, cwd=cwd, check=False)
    except OSError as e:
        raise ToolExecutionError(f"Failed to launch Chip2Chip: {e}") from e

    if completed.returncode != 0:
        logger.error(f"Chip2Chip exited with status {completed.returncode}")
    return completed.returncode
