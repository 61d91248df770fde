"""Session state shared between pipeline steps."""

import sys
from dataclasses import dataclass, field
from typing import TextIO

from jeez.prompts import PromptConfig


@dataclass
class Session:
    """What the user decided so far. The project name never changes after step 2."""

    project_name: str
    frontend_selected: bool = False
    backend_selected: bool = False
    bun_initialized: bool = False

    @property
    def database_name(self) -> str:
        return f"{self.project_name}_db"


@dataclass
class StepContext:
    """Everything a step needs: the session, the workspace and injected I/O."""

    session: Session
    workspace: object
    runner: object
    prompt_config: PromptConfig = field(default_factory=PromptConfig)
    output: TextIO = None
    error_output: TextIO = None

    def __post_init__(self):
        if self.output is None:
            self.output = sys.stdout
        if self.error_output is None:
            self.error_output = sys.stderr

    def say(self, message=""):
        print(message, file=self.output)

    def warn(self, message):
        print(message, file=self.error_output)
