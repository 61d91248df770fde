"""Optional Bun initialization in the project root."""

from jeez.errors import ScaffoldError
from jeez.outcome import StepOutcome
from jeez.prompts import ask_yes_no


def init_bun(ctx):
    if not ask_yes_no("Do you want to initialize the project with Bun?", config=ctx.prompt_config):
        ctx.say("Skipping Bun initialization.")
        return StepOutcome.skipped()

    ctx.say("Initializing Bun...")
    try:
        ctx.runner.run("bun", "init")
    except ScaffoldError as exc:
        return StepOutcome.failed(exc)

    ctx.session.bun_initialized = True
    ctx.say("Jeez! Bun initialized.")
    return StepOutcome.success()
