"""CLI tests for the jeez entry point."""

import os
import subprocess
import sys

import pytest
from click.testing import CliRunner

from jeez.cli import main


@pytest.mark.unit
class TestCliHelp:

    def test_help_exits_zero(self):
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "scaffold" in result.output.lower()

    def test_rejects_positional_arguments(self):
        result = CliRunner().invoke(main, ["demo"])
        assert result.exit_code != 0


@pytest.mark.unit
class TestCliInteractiveRun:

    def test_minimal_project_from_stdin(self):
        runner = CliRunner()
        with runner.isolated_filesystem() as cwd:
            result = runner.invoke(main, input="\ndemo\nn\nn\n1\n2\nn\n")

            assert result.exit_code == 0, result.output
            assert os.listdir(os.path.join(cwd, "demo")) == ["frontend"]
            assert os.listdir(os.path.join(cwd, "demo", "frontend")) == []
            assert not os.path.exists(os.path.join(cwd, "demo", ".git"))
            assert "Project setup is ready" in result.output

    def test_closed_input_exits_zero(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(main, input="")
            assert result.exit_code == 0
            assert "Input closed" in result.output

    def test_project_creation_failure_exits_one(self, monkeypatch):
        def refuse(*_args):
            raise PermissionError("read-only file system")

        runner = CliRunner()
        with runner.isolated_filesystem():
            monkeypatch.setattr("jeez.workspace.os.mkdir", refuse)
            result = runner.invoke(main, input="\ndemo\n")
            assert result.exit_code == 1
            assert "Error while creating project" in result.output


@pytest.mark.integration
class TestCliWithoutGit:

    def test_minimal_project_runs_when_git_is_not_on_path(self, tmp_path):
        empty_bin = tmp_path / "bin"
        empty_bin.mkdir()
        env = {"PATH": str(empty_bin), "PYTHONPATH": os.pathsep.join(sys.path)}

        result = subprocess.run(
            [sys.executable, "-c", "from jeez.cli import main; main()"],
            input="\ndemo\nn\nn\n1\n2\nn\n",
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
        )

        assert result.returncode == 0, result.stderr
        assert os.path.isdir(tmp_path / "demo" / "frontend")
        assert "Project setup is ready" in result.stdout
