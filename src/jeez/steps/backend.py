"""Backend setup: an Express + TypeScript server."""

from jeez.errors import ScaffoldError
from jeez.outcome import StepOutcome
from jeez.prompts import ask_choice
from jeez.steps.package_scripts import add_script_or_warn
from jeez.template_renderer import render_template

EXPRESS_TYPESCRIPT = "Express + TypeScript"
SKIP = "Skip"

BACKEND_OPTIONS = [EXPRESS_TYPESCRIPT, SKIP]

BACKEND_PACKAGES = [
    "express",
    "typescript",
    "@types/express",
    "ts-node",
    "nodemon",
    "cors",
    "@types/cors",
    "dotenv",
]

DEFAULT_PORT = 3000

BACKEND_SCRIPTS = ['"start": "nodemon src/server.ts"', '"build": "tsc"']


def setup_backend(ctx):
    choice = ask_choice(
        "Choose your backend setup:", BACKEND_OPTIONS, config=ctx.prompt_config,
    )
    if BACKEND_OPTIONS[choice - 1] == SKIP:
        ctx.say("Skipping backend setup.")
        return StepOutcome.skipped()

    try:
        with ctx.workspace.descend("backend"):
            _create_express_app(ctx)
    except ScaffoldError as exc:
        return StepOutcome.failed(exc)

    ctx.say("Jeez! Backend setup complete.")
    return StepOutcome.success()


def _create_express_app(ctx):
    workspace = ctx.workspace
    ctx.say("Creating Express + TypeScript app...")
    ctx.runner.run("npm", "init", "-y")
    ctx.runner.run("npm", "install", *BACKEND_PACKAGES)

    workspace.write_file("backend/tsconfig.json", render_template("tsconfig.json.j2"))
    workspace.make_directory("backend/src")
    workspace.write_file(
        "backend/src/server.ts",
        render_template("server.ts.j2", default_port=DEFAULT_PORT),
    )
    for script in BACKEND_SCRIPTS:
        add_script_or_warn(ctx, "backend", script)
