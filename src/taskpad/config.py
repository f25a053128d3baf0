"""Startup configuration: where the todo and backup files live.

Everything here is resolved once, before any command runs, and handed to
the store as a frozen `Config`.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .models import BACKUP_FILENAME, TODO_FILENAME

ENV_TODO_DIR = "TASKPAD"
ENV_BACKUP_DIR = "TASKPAD_BACKUP"
ENV_LOG_LEVEL = "TASKPAD_LOG_LEVEL"
ENV_COLOR = "TASKPAD_COLOR"

FALLBACK_HOME = Path("/tmp")

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


@dataclass(frozen=True)
class Config:
    todo_path: Path
    backup_path: Path
    local_path: Path
    backed_up: bool
    log_level: str = "WARNING"
    color: bool = False


def _home_dir() -> Path:
    try:
        return Path.home()
    except RuntimeError:
        return FALLBACK_HOME


def _env_dir(environ: Mapping[str, str], name: str) -> Optional[Path]:
    """Return the directory named by env var `name`, or None if unset or not a dir."""
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    path = Path(raw).expanduser()
    return path if path.is_dir() else None


def _env_color(environ: Mapping[str, str], isatty: bool) -> bool:
    if environ.get("NO_COLOR"):
        return False
    raw = (environ.get(ENV_COLOR) or "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return isatty


def resolve_todo_path(cwd: Path, environ: Mapping[str, str], home: Path) -> Path:
    local = cwd / TODO_FILENAME
    if local.exists():
        return local
    directory = _env_dir(environ, ENV_TODO_DIR)
    return (directory or home) / TODO_FILENAME


def resolve_backup_path(environ: Mapping[str, str], home: Path) -> Path:
    directory = _env_dir(environ, ENV_BACKUP_DIR)
    return (directory or home) / BACKUP_FILENAME


def load_config(
    cwd: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
    isatty: Optional[bool] = None,
) -> Config:
    """Build the process configuration.

    Todo file: `./.tpad` if present, else `.tpad` in $TASKPAD when that is a
    directory, else `~/.tpad`. Backup file: `.tpad.bak` in $TASKPAD_BACKUP
    when that is a directory, else `~/.tpad.bak`.
    """
    cwd = Path.cwd() if cwd is None else Path(cwd)
    environ = os.environ if environ is None else environ
    home = _home_dir() if home is None else Path(home)
    if isatty is None:
        isatty = sys.stdout.isatty()

    backup_path = resolve_backup_path(environ, home)
    return Config(
        todo_path=resolve_todo_path(cwd, environ, home),
        backup_path=backup_path,
        local_path=cwd / TODO_FILENAME,
        backed_up=backup_path.exists(),
        log_level=(environ.get(ENV_LOG_LEVEL) or "WARNING").strip().upper(),
        color=_env_color(environ, isatty),
    )
