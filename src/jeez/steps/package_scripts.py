"""Shared helper for inserting npm scripts after a generator has run."""

from jeez.errors import WorkspaceError


def add_script_or_warn(ctx, directory, script):
    """Insert a package.json script; a failed insertion only warns."""
    try:
        updated = ctx.workspace.add_package_script(directory, script)
    except WorkspaceError as exc:
        ctx.warn(f"Warning: Failed to add {script} to package.json: {exc}")
        return
    if not updated:
        ctx.warn(f'Warning: No "scripts" map found in {directory}/package.json; add {script} by hand.')
