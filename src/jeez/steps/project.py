"""Opening and closing steps: welcome banner, project creation, farewell."""

import os

from jeez.prompts import ask_line, ask_non_empty
from jeez.session import Session
from jeez.workspace import create_project_root

BANNER = "================================================"


def _print_banner(title, output):
    print("", file=output)
    print(BANNER, file=output)
    print(f"  {title}", file=output)
    print(BANNER, file=output)
    print("", file=output)


def welcome(prompt_config, output):
    _print_banner("Welcome to Jeez!", output)
    ask_line("Press Enter to start setting up your project.", config=prompt_config)


def farewell(output):
    _print_banner("Jeeeez! Project setup is ready, let's rip some code!", output)


def _is_single_path_component(name):
    if name in (os.curdir, os.pardir) or "\x00" in name:
        return False
    separators = [os.sep] + ([os.altsep] if os.altsep else [])
    return not any(sep in name for sep in separators)


def prompt_project_name(prompt_config) -> str:
    """Ask for a project name until it names a new directory next to the cwd."""
    output = prompt_config.output
    while True:
        name = ask_non_empty("Enter project name: ", config=prompt_config)
        if not _is_single_path_component(name):
            print(
                f"'{name}' is not a valid directory name. Please choose a different name.",
                file=output,
            )
            continue
        if os.path.exists(name):
            print(
                f"A directory with the name '{name}' already exists. "
                "Please choose a different name.",
                file=output,
            )
            continue
        return name


def create_project(prompt_config):
    """Prompt for the project name, create its directory and move into it.

    Returns:
        (Session, Workspace) for the new project root.

    Raises:
        ProjectCreationError: If the project root cannot be established.
    """
    name = prompt_project_name(prompt_config)
    workspace = create_project_root(name)
    return Session(project_name=name), workspace
