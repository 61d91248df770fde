"""Tests for the frontend (Vite) setup step."""

import os

import pytest

from conftest import assert_cursor_at_root, make_context
from fake_command_runner import FakeCommandRunner
from jeez.steps.frontend import setup_frontend


@pytest.fixture
def with_frontend(project_root):
    project_root.make_directory("frontend")
    return project_root


def _package_json(workspace):
    with open(workspace.path("frontend", "package.json")) as f:
        return f.read()


@pytest.mark.unit
class TestSetupFrontendVite:

    def test_creates_vite_app_inside_frontend(self, with_frontend):
        runner = FakeCommandRunner.with_tool_side_effects()
        outcome = setup_frontend(make_context(with_frontend, "1", "n", "n", runner=runner))
        assert outcome.is_success
        assert runner.commands == [
            ("npm", "create", "vite@latest", "."),
            ("npm", "install"),
        ]
        frontend_dir = os.path.realpath(with_frontend.path("frontend"))
        for cwd, _ in runner.calls:
            assert os.path.realpath(cwd) == frontend_dir
        assert_cursor_at_root(with_frontend)

    def test_adds_dev_script(self, with_frontend):
        runner = FakeCommandRunner.with_tool_side_effects()
        setup_frontend(make_context(with_frontend, "1", "n", "n", runner=runner))
        assert '"scripts": {\n    "dev": "vite",' in _package_json(with_frontend)

    def test_tailwind_and_storybook_when_accepted(self, with_frontend):
        runner = FakeCommandRunner.with_tool_side_effects()
        outcome = setup_frontend(make_context(with_frontend, "1", "y", "", runner=runner))
        assert outcome.is_success
        assert runner.commands[2:] == [
            ("npm", "install", "-D", "tailwindcss", "postcss", "autoprefixer"),
            ("npx", "tailwindcss", "init", "-p"),
            ("npx", "storybook", "init"),
        ]

    def test_missing_package_json_only_warns(self, with_frontend):
        runner = FakeCommandRunner()
        ctx = make_context(with_frontend, "1", "n", "n", runner=runner)
        outcome = setup_frontend(ctx)
        assert outcome.is_success
        assert "Warning: Failed to add" in ctx.error_output.getvalue()

    def test_install_failure_restores_cursor(self, with_frontend):
        runner = FakeCommandRunner.with_tool_side_effects()
        runner.fail_on("npm", "install")
        ctx = make_context(with_frontend, "1", runner=runner)
        outcome = setup_frontend(ctx)
        assert outcome.is_failure
        assert "failed to execute npm" in outcome.reason
        assert_cursor_at_root(with_frontend)

    def test_tailwind_failure_restores_cursor(self, with_frontend):
        runner = FakeCommandRunner.with_tool_side_effects()
        runner.fail_on("npx", "tailwindcss", "init", "-p")
        outcome = setup_frontend(make_context(with_frontend, "1", "y", runner=runner))
        assert outcome.is_failure
        assert ("npx", "storybook", "init") not in runner.commands
        assert_cursor_at_root(with_frontend)

    def test_missing_frontend_directory_fails(self, project_root):
        runner = FakeCommandRunner()
        outcome = setup_frontend(make_context(project_root, "1", runner=runner))
        assert outcome.is_failure
        assert "changing to directory frontend" in outcome.reason
        assert runner.calls == []
        assert_cursor_at_root(project_root)


@pytest.mark.unit
class TestSetupFrontendSkip:

    def test_skip_leaves_frontend_empty(self, with_frontend):
        runner = FakeCommandRunner()
        outcome = setup_frontend(make_context(with_frontend, "2", runner=runner))
        assert outcome.is_skipped
        assert runner.calls == []
        assert os.listdir(with_frontend.path("frontend")) == []
        assert_cursor_at_root(with_frontend)

    def test_out_of_range_choice_reprompts(self, with_frontend):
        ctx = make_context(with_frontend, "3", "vite", "2", runner=FakeCommandRunner())
        assert setup_frontend(ctx).is_skipped
        assert len(ctx.prompt_config.input_fn.prompts) == 3
