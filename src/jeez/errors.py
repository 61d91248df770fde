"""Errors raised while scaffolding a project."""


class ScaffoldError(Exception):
    """Base exception for scaffolding failures.

    The message names the action that failed so the user can finish it by hand.
    """


class CommandError(ScaffoldError):
    """An external program could not be started or exited non-zero."""

    def __init__(self, program, cause):
        self.program = program
        self.cause = cause
        super().__init__(f"failed to execute {program}: {cause}")


class WorkspaceError(ScaffoldError):
    """A filesystem operation inside the project failed."""

    def __init__(self, action, cause):
        self.action = action
        self.cause = cause
        super().__init__(f"{action}: {cause}")


class ProjectCreationError(WorkspaceError):
    """The project root could not be created or entered."""
