"""Interactive prompt primitives: free text, yes/no, numbered menus."""

import re
import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

_URL_PATTERN = re.compile(r"(https?|git)://[^\s/$.?#].[^\s]*")

_YES = ("", "y", "yes")
_NO = ("n", "no")


@dataclass
class PromptConfig:
    """I/O configuration for prompts: how lines are read and where retries go."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def _read_line(prompt_text, config):
    try:
        return config.input_fn(prompt_text)
    except EOFError:
        print("", file=config.output)
        print("Input closed. Exiting.", file=config.output)
        sys.exit(0)


def ask_line(prompt, *, config=None):
    """Print *prompt*, read one line and return it stripped of whitespace."""
    if config is None:
        config = PromptConfig()
    return _read_line(prompt, config).strip()


def ask_non_empty(prompt, *, config=None):
    """Like ask_line, but re-prompt until the answer is not empty."""
    if config is None:
        config = PromptConfig()
    while True:
        answer = ask_line(prompt, config=config)
        if answer:
            return answer
        print("Jeez!! The answer cannot be empty. Please try again.", file=config.output)


def ask_yes_no(prompt, *, config=None):
    """Ask a yes/no question. An empty answer counts as yes.

    Args:
        prompt: Question text; " (y/n): " is appended.
        config: PromptConfig with input_fn and output stream (defaults apply).

    Returns:
        True for y/yes/empty, False for n/no.
    """
    if config is None:
        config = PromptConfig()
    prompt_text = f"{prompt} (y/n): "
    while True:
        answer = ask_line(prompt_text, config=config).lower()
        if answer in _YES:
            return True
        if answer in _NO:
            return False
        print("Invalid input. Please enter 'y' or 'n'.", file=config.output)


def _display_options(prompt, options, output):
    print("", file=output)
    print(prompt, file=output)
    for i, option in enumerate(options):
        print(f"  {i + 1}) {option}", file=output)
    print("", file=output)


def _parse_choice(raw_input, option_count):
    if raw_input.isdecimal() and 1 <= int(raw_input) <= option_count:
        return int(raw_input)
    return None


def ask_choice(prompt, options, *, config=None):
    """Display numbered options and return the user's selection.

    There is no default: the menu is shown once and the choice is re-asked
    until the answer is an integer between 1 and len(options).

    Returns:
        1-based index of the selected option.
    """
    if config is None:
        config = PromptConfig()

    _display_options(prompt, options, config.output)
    prompt_text = f"Enter your choice (1-{len(options)}): "

    while True:
        parsed = _parse_choice(ask_line(prompt_text, config=config), len(options))
        if parsed is not None:
            return parsed
        print(
            f"Invalid choice. Please enter a number between 1 and {len(options)}.",
            file=config.output,
        )


def is_valid_url(url: str) -> bool:
    """Permissive shape check for http(s) and git remote URLs."""
    return _URL_PATTERN.fullmatch(url) is not None
