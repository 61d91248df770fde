"""Frontend setup: a Vite app with optional TailwindCSS and Storybook."""

from jeez.errors import ScaffoldError
from jeez.outcome import StepOutcome
from jeez.prompts import ask_choice, ask_yes_no
from jeez.steps.package_scripts import add_script_or_warn

VITE = "Vite"
SKIP = "Skip"

FRONTEND_OPTIONS = [VITE, SKIP]

TAILWIND_PACKAGES = ["tailwindcss", "postcss", "autoprefixer"]


def setup_frontend(ctx):
    choice = ask_choice(
        "Choose your frontend setup:", FRONTEND_OPTIONS, config=ctx.prompt_config,
    )
    if FRONTEND_OPTIONS[choice - 1] == SKIP:
        ctx.say("Skipping frontend setup.")
        return StepOutcome.skipped()

    try:
        with ctx.workspace.descend("frontend"):
            _create_vite_app(ctx)
            _offer_tailwind(ctx)
            _offer_storybook(ctx)
    except ScaffoldError as exc:
        return StepOutcome.failed(exc)

    ctx.say("Jeez! Frontend setup complete.")
    return StepOutcome.success()


def _create_vite_app(ctx):
    ctx.say("Creating Vite app...")
    ctx.runner.run("npm", "create", "vite@latest", ".")
    ctx.runner.run("npm", "install")
    add_script_or_warn(ctx, "frontend", '"dev": "vite"')


def _offer_tailwind(ctx):
    if not ask_yes_no("Do you want to add TailwindCSS?", config=ctx.prompt_config):
        return
    ctx.runner.run("npm", "install", "-D", *TAILWIND_PACKAGES)
    ctx.runner.run("npx", "tailwindcss", "init", "-p")
    ctx.say("Jeez! TailwindCSS added.")


def _offer_storybook(ctx):
    if not ask_yes_no("Do you want to add Storybook?", config=ctx.prompt_config):
        return
    ctx.runner.run("npx", "storybook", "init")
    ctx.say("Jeez! Storybook added.")
