"""Configuration for launching the Chip2Chip tool.

Loads configuration from environment variables, an optional .env file and an
optional YAML file. The resulting ToolConfig is passed explicitly to the
orchestrator; nothing here is process-global.
"""

import os
import shlex
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError


@dataclass
class ToolConfig:
    """Runtime configuration for the external tool and the job layout."""

    # JVM used to launch the GSEA distribution
    java_executable: str = "java"

    # GSEA jar containing xtools.chip2chip.Chip2Chip
    gsea_jar: Optional[str] = None

    main_class: str = "xtools.chip2chip.Chip2Chip"

    # Extra JVM flags, e.g. ["-Xmx4g"]
    jvm_options: list[str] = field(default_factory=list)

    # Hidden working directory (relative to the job directory)
    working_dir_name: str = ".tmp_gsea"
    analysis_dir_name: str = "analysis"
    param_file_name: str = "chip2chip_param_file.txt"
    results_zip_name: str = "chip2chip_results.zip"

    @classmethod
    def from_env(cls) -> "ToolConfig":
        """Load configuration from environment variables."""
        return cls(
            java_executable=os.getenv("CHIP2CHIP_JAVA", "java"),
            gsea_jar=os.getenv("CHIP2CHIP_GSEA_JAR"),
            jvm_options=shlex.split(os.getenv("CHIP2CHIP_JVM_OPTS", "")),
        )

    @classmethod
    def load(
        cls,
        env_file: Optional[Path] = None,
        config_file: Optional[Path] = None,
    ) -> "ToolConfig":
        """
        Load configuration from a .env file, the environment and a YAML file.

        Args:
            env_file: Optional path to .env file. If not provided,
                      looks for .env in the current directory.
            config_file: Optional YAML file; its keys override the environment.

        Returns:
            ToolConfig instance with loaded values

        Raises:
            ConfigurationError: If the YAML file is unreadable or has unknown keys
        """
        if env_file:
            load_dotenv(env_file)
        else:
            env_path = Path.cwd() / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        config = cls.from_env()
        if config_file:
            config = config.merged(cls._read_yaml(config_file))
        return config

    @staticmethod
    def _read_yaml(config_file: Path) -> dict[str, Any]:
        try:
            with open(config_file, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(str(config_file), f"cannot read config file: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(str(config_file), "config file must contain a mapping")
        return data

    def merged(self, overrides: dict[str, Any]) -> "ToolConfig":
        """Return a copy with the given keys replaced."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigurationError(unknown[0], "unknown configuration key")

        values = {name: getattr(self, name) for name in known}
        values.update(overrides)
        if isinstance(values["jvm_options"], str):
            values["jvm_options"] = shlex.split(values["jvm_options"])
        return ToolConfig(**values)

    def has_gsea_jar(self) -> bool:
        """Check if the GSEA jar is configured and present."""
        return bool(self.gsea_jar) and Path(self.gsea_jar).is_file()
