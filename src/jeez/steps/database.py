"""Database setup: a PostgreSQL docker-compose.yml inside backend/."""

from jeez.errors import ScaffoldError
from jeez.outcome import StepOutcome
from jeez.prompts import ask_yes_no
from jeez.template_renderer import render_template

DB_USER = "postgres"
DB_PASSWORD = "postgres"
DB_HOST_PORT = 10001


def database_settings(session):
    """Template variables shared by docker-compose.yml and .env.local."""
    return {
        "db_user": DB_USER,
        "db_password": DB_PASSWORD,
        "host_port": DB_HOST_PORT,
        "database_name": session.database_name,
    }


def setup_database(ctx):
    try:
        with ctx.workspace.descend("backend"):
            if not ask_yes_no(
                "Do you want to set up a database (PostgreSQL with Docker Compose)?",
                config=ctx.prompt_config,
            ):
                ctx.say("Skipping database setup.")
                return StepOutcome.skipped()
            content = render_template("docker-compose.yml.j2", **database_settings(ctx.session))
            ctx.workspace.write_file("backend/docker-compose.yml", content)
    except ScaffoldError as exc:
        return StepOutcome.failed(exc)

    ctx.say("Jeez! Database setup complete.")
    return StepOutcome.success()
