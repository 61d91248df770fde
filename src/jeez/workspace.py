"""Workspace: the project root and the cursor (process cwd) inside it."""

import os
from contextlib import contextmanager

from jeez.errors import ProjectCreationError, WorkspaceError

DIRECTORY_MODE = 0o755
FILE_MODE = 0o644

_SCRIPTS_STANZA = '"scripts": {'


def create_project_root(name: str) -> "Workspace":
    """Create the project directory in the current directory and enter it.

    Raises:
        ProjectCreationError: If the directory cannot be created or entered.
    """
    try:
        os.mkdir(name, DIRECTORY_MODE)
    except OSError as exc:
        raise ProjectCreationError("creating project directory", exc) from exc
    try:
        os.chdir(name)
    except OSError as exc:
        raise ProjectCreationError("changing to project directory", exc) from exc
    return Workspace(os.getcwd())


class Workspace:
    """Filesystem helper rooted at the project directory.

    Relative paths are resolved against the project root, never against the
    current cursor, so helpers behave the same inside and outside descend().
    """

    def __init__(self, root: str):
        self._root = os.path.abspath(root)

    @property
    def root(self) -> str:
        return self._root

    def path(self, *parts) -> str:
        return os.path.join(self._root, *parts)

    def exists(self, *parts) -> bool:
        return os.path.exists(self.path(*parts))

    def make_directory(self, name: str) -> str:
        target = self.path(name)
        try:
            os.mkdir(target, DIRECTORY_MODE)
        except OSError as exc:
            raise WorkspaceError(f"creating directory {name}", exc) from exc
        return target

    def change_directory(self, name: str) -> None:
        try:
            os.chdir(self.path(name))
        except OSError as exc:
            raise WorkspaceError(f"changing to directory {name}", exc) from exc

    @contextmanager
    def descend(self, name: str):
        """Enter <root>/<name> and return the cursor to the root on exit."""
        self.change_directory(name)
        try:
            yield self.path(name)
        finally:
            os.chdir(self._root)

    def write_file(self, name: str, content: str, mode: int = FILE_MODE) -> str:
        """Create or truncate a file. The containing directory must exist."""
        target = self.path(name)
        try:
            with open(target, "w", encoding="utf-8") as f:
                f.write(content)
            os.chmod(target, mode)
        except OSError as exc:
            raise WorkspaceError(f"writing {name}", exc) from exc
        return target

    def add_package_script(self, directory: str, script: str) -> bool:
        """Insert a JSON fragment at the top of the "scripts" map of package.json.

        The edit is textual: the first '"scripts": {' is replaced by itself
        followed by a new line holding *script* and a trailing comma.

        Args:
            directory: Directory holding package.json, relative to the root.
            script: A JSON key/value fragment such as '"dev": "vite"'.

        Returns:
            True if the file was updated, False if it has no scripts stanza.

        Raises:
            WorkspaceError: If package.json is missing or cannot be rewritten.
        """
        package_json = os.path.join(directory, "package.json")
        target = self.path(package_json)
        if not os.path.isfile(target):
            raise WorkspaceError(
                f"updating {package_json}", f"package.json does not exist in {directory}",
            )
        try:
            with open(target, encoding="utf-8") as f:
                content = f.read()
        except OSError as exc:
            raise WorkspaceError(f"reading {package_json}", exc) from exc

        if _SCRIPTS_STANZA not in content:
            return False

        updated = content.replace(_SCRIPTS_STANZA, f"{_SCRIPTS_STANZA}\n    {script},", 1)
        self.write_file(package_json, updated)
        return True
