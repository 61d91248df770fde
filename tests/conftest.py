"""Shared fixtures for jeez tests."""

import io
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(__file__))

from jeez.prompts import PromptConfig
from jeez.session import Session, StepContext
from jeez.workspace import Workspace


class ScriptedInput:
    """Input function that replays answers and records the prompts shown."""

    def __init__(self, answers):
        self._answers = iter(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError() from None


def scripted_prompts(*answers):
    """Create a PromptConfig that answers prompts in order."""
    return PromptConfig(input_fn=ScriptedInput(answers), output=io.StringIO())


def make_context(workspace, *answers, runner=None, project_name="myapp", **flags):
    """Build a StepContext with scripted answers and captured output."""
    return StepContext(
        session=Session(project_name=project_name, **flags),
        workspace=workspace,
        runner=runner,
        prompt_config=scripted_prompts(*answers),
        output=io.StringIO(),
        error_output=io.StringIO(),
    )


@pytest.fixture
def project_root(tmp_path, monkeypatch):
    """A project directory named myapp with the cursor inside it."""
    root = tmp_path / "myapp"
    root.mkdir()
    monkeypatch.chdir(root)
    return Workspace(str(root))


@pytest.fixture
def git_identity(tmp_path, monkeypatch):
    """Isolate git from the user's config and give commits an author."""
    global_config = tmp_path / "gitconfig"
    global_config.write_text("")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for prefix in ("GIT_AUTHOR", "GIT_COMMITTER"):
        monkeypatch.setenv(f"{prefix}_NAME", "Test")
        monkeypatch.setenv(f"{prefix}_EMAIL", "test@test.com")


def assert_cursor_at_root(workspace):
    assert os.path.realpath(os.getcwd()) == os.path.realpath(workspace.root)
