"""
Project root discovery.

Settings and widget configurations are looked up relative to the project
root, found by searching upward for marker files.
"""

from pathlib import Path

# Markers that indicate a project root, in order of priority
PROJECT_ROOT_MARKERS = [
    ".nextdeck",  # Widget configuration directory
    ".nextdeck.json",  # Project settings file
    ".git",  # Git repository
]


def find_project_root(start: Path | None = None) -> Path | None:
    """
    Find the project root directory by searching upward for marker files.

    Args:
        start: Directory to start searching from. Defaults to current working directory.

    Returns:
        Path to the project root directory, or None if not found.

    Example:
        >>> find_project_root(Path("/project/deep/nested/dir"))
        PosixPath('/project')
    """
    if start is None:
        start = Path.cwd()

    for directory in (start.resolve(), *start.resolve().parents):
        if any((directory / marker).exists() for marker in PROJECT_ROOT_MARKERS):
            return directory

    return None


def get_project_dir(start: Path | None = None) -> Path:
    """Project root if one is found, otherwise the start directory itself."""
    if start is None:
        start = Path.cwd()
    return find_project_root(start) or start
