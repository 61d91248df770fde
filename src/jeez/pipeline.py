"""Scaffolding pipeline: runs the steps in order and reports their outcomes."""

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

from jeez.process import CommandRunner
from jeez.prompts import PromptConfig
from jeez.session import StepContext
from jeez.steps.backend import setup_backend
from jeez.steps.bun import init_bun
from jeez.steps.database import setup_database
from jeez.steps.env_file import create_env_file
from jeez.steps.frontend import setup_frontend
from jeez.steps.layout import choose_layout
from jeez.steps.orm import setup_orm
from jeez.steps.project import create_project, farewell, welcome
from jeez.steps.source_control import init_git, push_remote


def _frontend_selected(session):
    return session.frontend_selected


def _backend_selected(session):
    return session.backend_selected


@dataclass(frozen=True)
class PipelineStep:
    """One stage of the pipeline.

    action completes the sentence "Error while <action>"; gate, when set,
    decides from the session whether the step runs at all.
    """

    action: str
    run: Callable
    gate: Optional[Callable] = None


PIPELINE_STEPS = (
    PipelineStep("initializing Bun", init_bun),
    PipelineStep("initializing git repository", init_git),
    PipelineStep("creating project directories", choose_layout),
    PipelineStep("setting up frontend", setup_frontend, _frontend_selected),
    PipelineStep("setting up backend", setup_backend, _backend_selected),
    PipelineStep("setting up database", setup_database, _backend_selected),
    PipelineStep("setting up ORM", setup_orm, _backend_selected),
    PipelineStep("creating .env.local file", create_env_file, _backend_selected),
    PipelineStep("setting up Git remote", push_remote),
)


@dataclass
class PipelineDeps:
    """Injectable dependencies for the pipeline."""

    prompt_config: PromptConfig = field(default_factory=PromptConfig)
    runner: object = None
    output: TextIO = None
    error_output: TextIO = None

    def __post_init__(self):
        if self.runner is None:
            self.runner = CommandRunner()
        if self.output is None:
            self.output = sys.stdout
        if self.error_output is None:
            self.error_output = sys.stderr


class Pipeline:

    def __init__(self, *, deps=None, steps=PIPELINE_STEPS):
        self._deps = deps if deps is not None else PipelineDeps()
        self._steps = steps
        self.outcomes = []

    def run(self):
        """Run every step and return the Session.

        Raises:
            ProjectCreationError: If the project root cannot be established.
        """
        try:
            return self._run_steps()
        except KeyboardInterrupt:
            print("", file=self._deps.error_output)
            print("Setup interrupted.", file=self._deps.error_output)
            sys.exit(130)

    def _run_steps(self):
        deps = self._deps
        welcome(deps.prompt_config, deps.output)
        session, workspace = create_project(deps.prompt_config)
        print(f"Project root: {workspace.root}", file=deps.output)

        ctx = StepContext(
            session=session,
            workspace=workspace,
            runner=deps.runner,
            prompt_config=deps.prompt_config,
            output=deps.output,
            error_output=deps.error_output,
        )
        for step in self._steps:
            if step.gate is not None and not step.gate(session):
                continue
            outcome = step.run(ctx)
            self.outcomes.append((step.action, outcome))
            self._report(step, outcome)

        self._print_failure_summary()
        farewell(deps.output)
        return session

    def _report(self, step, outcome):
        if outcome.is_failure:
            print(f"Error while {step.action}: {outcome.reason}", file=self._deps.error_output)
        elif outcome.is_skipped and outcome.reason:
            print(outcome.reason, file=self._deps.error_output)

    def _print_failure_summary(self):
        failed = [action for action, outcome in self.outcomes if outcome.is_failure]
        if not failed:
            return
        output = self._deps.error_output
        print("", file=output)
        print("Some steps did not complete; finish them by hand:", file=output)
        for action in failed:
            print(f"  - {action}", file=output)
