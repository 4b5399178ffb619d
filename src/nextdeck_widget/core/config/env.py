"""Environment file loading.

Settings can be overridden with NEXTDECK_* variables, which may also live
in .env files:

    OS environment > project .env / .env.local > user ~/.config/nextdeck/.env

Values from a .env file never replace a variable that was already exported
when the process started.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


def read_env_file(path: Path) -> dict[str, str]:
    """Parse a .env file, skipping keys without a value. Missing files are empty."""
    if not path.is_file():
        return {}
    return {str(k): str(v) for k, v in dotenv_values(path).items() if k and v is not None}


def user_env_files() -> list[Path]:
    """Default user-level env files."""
    xdg_home = Path(os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config")))
    return [xdg_home / "nextdeck" / ".env"]


def project_env_files(project_dir: Path) -> list[Path]:
    """Default project-level env files, later files winning."""
    return [project_dir / ".env", project_dir / ".env.local"]


def load_layered_env(
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> dict[str, str]:
    """Load user and project .env files into os.environ.

    Args:
        project_dir: base directory for project env files (defaults to cwd)
        user_env_paths: explicit user env file paths
        project_env_paths: explicit project env file paths

    Returns:
        The variables that were set by this call
    """
    if project_dir is None:
        project_dir = Path.cwd()

    layers = [
        list(user_env_paths) if user_env_paths is not None else user_env_files(),
        list(project_env_paths)
        if project_env_paths is not None
        else project_env_files(project_dir),
    ]

    protected = set(os.environ)
    applied: dict[str, str] = {}
    for paths in layers:
        for path in paths:
            for key, value in read_env_file(Path(path)).items():
                if key in protected:
                    continue
                os.environ[key] = value
                applied[key] = value

    if applied:
        logger.debug(f"Loaded {len(applied)} variable(s) from env files")
    return applied
