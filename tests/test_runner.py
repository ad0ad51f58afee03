"""Tests for launching the Chip2Chip tool."""

import subprocess
from pathlib import Path

import pytest

from chip2chip_module import runner
from chip2chip_module.core.config import ToolConfig
from chip2chip_module.core.exceptions import ToolExecutionError
from chip2chip_module.runner import build_command, build_system_properties, run_chip2chip


class TestBuildCommand:
    """Tests for java command construction."""

    def test_command_layout(self, tool_config: ToolConfig):
        tool_config.jvm_options = ["-Xmx2g"]
        cmd = build_command(tool_config, Path("/job/.tmp_gsea/chip2chip_param_file.txt"))

        assert cmd[:2] == ["java", "-Xmx2g"]
        assert "-Ddebug=false" in cmd
        assert "-Dmkdir=false" in cmd
        assert cmd[-5:] == [
            "-cp",
            tool_config.gsea_jar,
            "xtools.chip2chip.Chip2Chip",
            "-param_file",
            "/job/.tmp_gsea/chip2chip_param_file.txt",
        ]

    def test_missing_jar_config(self):
        with pytest.raises(ToolExecutionError):
            build_command(ToolConfig(gsea_jar=None), Path("p.txt"))


class TestSystemProperties:
    """Tests for the JVM properties replacing global toggles."""

    def test_dev_mode_disables_update_check(self):
        props = build_system_properties(dev_mode=True)
        assert props["DMAKE_GSEA_UPDATE_CHECK"] == "false"
        assert "UPDATE_CHECK_EXTRA_PROJECT_INFO" not in props

    def test_normal_mode_tags_update_check(self):
        props = build_system_properties(dev_mode=False)
        assert props["DMAKE_GSEA_UPDATE_CHECK"] == "true"
        assert props["UPDATE_CHECK_EXTRA_PROJECT_INFO"] == "GP_MODULES"
        assert props["debug"] == "false"
        assert props["mkdir"] == "false"


class TestRunChip2Chip:
    """Tests for running the tool."""

    def test_returns_exit_status(self, tool_config: ToolConfig, job_dir: Path, monkeypatch):
        calls = []

        def fake_run(cmd, cwd, check):
            calls.append((cmd, cwd))
            return subprocess.CompletedProcess(cmd, 3)

        monkeypatch.setattr(runner.shutil, "which", lambda exe: "/usr/bin/java")
        monkeypatch.setattr(runner.subprocess, "run", fake_run)

        status = run_chip2chip(tool_config, job_dir / "p.txt", cwd=job_dir, dev_mode=True)

        assert status == 3
        assert calls[0][1] == job_dir
        assert "-DDMAKE_GSEA_UPDATE_CHECK=false" in calls[0][0]

    def test_missing_java(self, tool_config: ToolConfig, job_dir: Path, monkeypatch):
        monkeypatch.setattr(runner.shutil, "which", lambda exe: None)
        with pytest.raises(ToolExecutionError):
            run_chip2chip(tool_config, job_dir / "p.txt", cwd=job_dir)

    def test_missing_jar_file(self, job_dir: Path, monkeypatch):
        monkeypatch.setattr(runner.shutil, "which", lambda exe: "/usr/bin/java")
        config = ToolConfig(gsea_jar=str(job_dir / "missing.jar"))
        with pytest.raises(ToolExecutionError):
            run_chip2chip(config, job_dir / "p.txt", cwd=job_dir)
