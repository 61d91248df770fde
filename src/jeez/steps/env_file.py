"""Environment file: backend/.env.local pointing at the compose database."""

from jeez.errors import ScaffoldError
from jeez.outcome import StepOutcome
from jeez.prompts import ask_yes_no
from jeez.steps.backend import DEFAULT_PORT
from jeez.steps.database import database_settings
from jeez.template_renderer import render_template

ENV_FILE = "backend/.env.local"


def create_env_file(ctx):
    if not ask_yes_no(
        "Do you want to create an .env.local file for database configuration?",
        config=ctx.prompt_config,
    ):
        ctx.say("Skipping .env.local setup.")
        return StepOutcome.skipped()

    if not ctx.workspace.exists("backend"):
        return StepOutcome.skipped("Backend directory does not exist. Skipping .env.local setup.")

    content = render_template(
        "env.local.j2", default_port=DEFAULT_PORT, **database_settings(ctx.session),
    )
    try:
        ctx.workspace.write_file(ENV_FILE, content)
    except ScaffoldError as exc:
        return StepOutcome.failed(exc)

    ctx.say("Jeez! .env.local file created.")
    return StepOutcome.success()
