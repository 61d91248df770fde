"""Git steps: repository initialization and pushing to a remote."""

import shutil

from jeez.errors import CommandError, ScaffoldError
from jeez.outcome import StepOutcome
from jeez.prompts import ask_non_empty, ask_yes_no, is_valid_url

DEFAULT_BRANCH = "main"
REMOTE_NAME = "origin"
SKIP_ANSWER = "skip"


def has_repository(path) -> bool:
    """Return True if *path* itself (not a parent) holds a git repository.

    GitPython refuses to import without a git executable, so it is loaded
    here and a missing git means there is no repository to push.
    """
    if shutil.which("git") is None:
        return False
    from git import Repo
    from git.exc import InvalidGitRepositoryError, NoSuchPathError

    try:
        Repo(path)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False
    return True


def init_git(ctx):
    """Initialize a repository with a README.md and an initial commit."""
    if not ask_yes_no("Do you want to initialize a git repository?", config=ctx.prompt_config):
        ctx.say("Skipping git initialization.")
        return StepOutcome.skipped()

    name = ctx.session.project_name
    ctx.say("Initializing git repo...")
    try:
        ctx.runner.run("git", "init")
        ctx.workspace.write_file("README.md", f"# {name}")
        ctx.runner.run("git", "add", "README.md")
        ctx.runner.run("git", "commit", "-m", f"Initial commit for {name}")
    except ScaffoldError as exc:
        return StepOutcome.failed(exc)

    ctx.say("Jeez! Git repository initialized successfully.")
    return StepOutcome.success()


def _add_remote(ctx):
    """Ask for a URL until `git remote add` succeeds.

    Returns:
        True once the remote is added, False if the user typed 'skip'.
    """
    prompt = "Enter the remote repo URL: "
    skip_allowed = False
    while True:
        url = ask_non_empty(prompt, config=ctx.prompt_config)
        if skip_allowed and url.lower() == SKIP_ANSWER:
            return False
        if not is_valid_url(url):
            ctx.warn(f"'{url}' does not look like a repository URL (http, https or git). Please try again.")
            continue
        try:
            ctx.runner.run("git", "remote", "add", REMOTE_NAME, url)
            return True
        except CommandError as exc:
            ctx.warn(f"Failed to add remote {REMOTE_NAME}: {exc}")
            prompt = f"Enter another remote repo URL (or type '{SKIP_ANSWER}' to abandon): "
            skip_allowed = True


def push_remote(ctx):
    """Add the origin remote, rename the branch to main and push it."""
    if not ask_yes_no("Do you want to set up a remote Git repository?", config=ctx.prompt_config):
        ctx.say("Skipping remote Git setup.")
        return StepOutcome.skipped()

    if not has_repository(ctx.workspace.root):
        return StepOutcome.skipped(
            "Git repository is not initialized. Skipping remote Git setup."
        )

    if not _add_remote(ctx):
        ctx.say("Skipping remote Git setup.")
        return StepOutcome.skipped()

    try:
        ctx.runner.run("git", "branch", "-M", DEFAULT_BRANCH)
        ctx.runner.run("git", "push", "-u", REMOTE_NAME, DEFAULT_BRANCH)
    except ScaffoldError as exc:
        return StepOutcome.failed(exc)

    ctx.say("Jeez! Git remote repo complete.")
    return StepOutcome.success()
