"""ORM setup: Prisma inside backend/."""

from jeez.errors import ScaffoldError
from jeez.outcome import StepOutcome
from jeez.prompts import ask_yes_no
from jeez.template_renderer import render_template

BACKEND_MISSING = "Backend directory does not exist. Skipping ORM setup."


def setup_orm(ctx):
    if not ask_yes_no("Do you want to set up an ORM (Prisma)?", config=ctx.prompt_config):
        ctx.say("Skipping ORM setup.")
        return StepOutcome.skipped()

    if not ctx.workspace.exists("backend"):
        return StepOutcome.skipped(BACKEND_MISSING)

    try:
        with ctx.workspace.descend("backend"):
            ctx.say("Setting up Prisma...")
            ctx.runner.run("npx", "prisma", "init")
            ctx.runner.run("npm", "install", "@prisma/client")
            ctx.workspace.write_file(
                "backend/prisma/schema.prisma", render_template("schema.prisma.j2"),
            )
            ctx.runner.run("npx", "prisma", "generate")
    except ScaffoldError as exc:
        return StepOutcome.failed(exc)

    ctx.say("Jeez! ORM setup complete.")
    return StepOutcome.success()
