"""Run external tools (git, npm, npx, bun) in the current working directory."""

import subprocess

from jeez.errors import CommandError


class CommandRunner:
    """Runs a program with the parent's stdin, stdout and stderr.

    Output is never captured so interactive tools (editors, package-manager
    prompts) keep working. Every failure surfaces as CommandError.
    """

    def run(self, program, *args):
        cmd = [program] + list(args)
        try:
            result = subprocess.run(cmd)
        except OSError as exc:
            raise CommandError(program, exc) from exc
        if result.returncode != 0:
            raise CommandError(program, f"exit status {result.returncode}")
        return result
