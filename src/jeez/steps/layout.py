"""Layout selection: frontend, backend or both."""

from jeez.errors import ScaffoldError
from jeez.outcome import StepOutcome
from jeez.prompts import ask_choice

FRONTEND = "Frontend"
BACKEND = "Backend"
FULLSTACK = "Fullstack"

LAYOUT_OPTIONS = [FRONTEND, BACKEND, FULLSTACK]

_LAYOUT_DIRECTORIES = {
    FRONTEND: ("frontend",),
    BACKEND: ("backend",),
    FULLSTACK: ("frontend", "backend"),
}


def choose_layout(ctx):
    """Ask which subprojects to create, record the choice and create them."""
    choice = ask_choice(
        "What kind of project are you building?", LAYOUT_OPTIONS,
        config=ctx.prompt_config,
    )
    directories = _LAYOUT_DIRECTORIES[LAYOUT_OPTIONS[choice - 1]]
    ctx.session.frontend_selected = "frontend" in directories
    ctx.session.backend_selected = "backend" in directories

    ctx.say("Setting up project directories...")
    try:
        for directory in directories:
            ctx.workspace.make_directory(directory)
    except ScaffoldError as exc:
        return StepOutcome.failed(exc)

    ctx.say(f"Jeez! Created {', '.join(directories)}.")
    return StepOutcome.success()
