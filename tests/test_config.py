"""Tests for tool configuration loading."""

from pathlib import Path

import pytest

from chip2chip_module.core.config import ToolConfig
from chip2chip_module.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so values loaded from .env files are undone after each test
    for name in ("CHIP2CHIP_JAVA", "CHIP2CHIP_GSEA_JAR", "CHIP2CHIP_JVM_OPTS"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestToolConfig:
    """Tests for ToolConfig."""

    def test_defaults(self):
        config = ToolConfig.from_env()
        assert config.java_executable == "java"
        assert config.gsea_jar is None
        assert config.jvm_options == []
        assert config.working_dir_name == ".tmp_gsea"
        assert config.results_zip_name == "chip2chip_results.zip"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CHIP2CHIP_JAVA", "/opt/jdk/bin/java")
        monkeypatch.setenv("CHIP2CHIP_GSEA_JAR", "/opt/gsea/gsea.jar")
        monkeypatch.setenv("CHIP2CHIP_JVM_OPTS", "-Xmx4g -Djava.awt.headless=true")

        config = ToolConfig.from_env()

        assert config.java_executable == "/opt/jdk/bin/java"
        assert config.gsea_jar == "/opt/gsea/gsea.jar"
        assert config.jvm_options == ["-Xmx4g", "-Djava.awt.headless=true"]

    def test_yaml_overrides_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("CHIP2CHIP_GSEA_JAR", "/opt/gsea/gsea.jar")
        config_file = tmp_path / "chip2chip.yaml"
        config_file.write_text("gsea_jar: /srv/gsea-4.3.jar\njvm_options: -Xmx8g\n")

        config = ToolConfig.load(env_file=tmp_path / "absent.env", config_file=config_file)

        assert config.gsea_jar == "/srv/gsea-4.3.jar"
        assert config.jvm_options == ["-Xmx8g"]

    def test_env_file(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("CHIP2CHIP_GSEA_JAR=/from/dotenv.jar\n")

        config = ToolConfig.load(env_file=env_file)

        assert config.gsea_jar == "/from/dotenv.jar"

    def test_unknown_yaml_key(self, tmp_path: Path):
        config_file = tmp_path / "chip2chip.yaml"
        config_file.write_text("gsea_jarr: /srv/gsea.jar\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ToolConfig.load(env_file=tmp_path / "absent.env", config_file=config_file)
        assert exc_info.value.config_key == "gsea_jarr"

    def test_yaml_must_be_mapping(self, tmp_path: Path):
        config_file = tmp_path / "chip2chip.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            ToolConfig.load(env_file=tmp_path / "absent.env", config_file=config_file)

    def test_has_gsea_jar(self, tool_config: ToolConfig):
        assert tool_config.has_gsea_jar()
        assert not ToolConfig(gsea_jar="/nowhere/gsea.jar").has_gsea_jar()
