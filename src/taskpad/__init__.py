"""taskpad - a plain-text command-line todo list."""

__version__ = "1.0.0"

from .models import Task, OPEN_PREFIX, DONE_PREFIX
from .config import Config, load_config
from .errors import (
    TaskpadError,
    UsageError,
    MissingArgumentError,
    InvalidIndexError,
    EmptyListError,
    StorageError,
)
from .storage import TaskStore, parse_indices

__all__ = [
    "Task",
    "OPEN_PREFIX",
    "DONE_PREFIX",
    "Config",
    "load_config",
    "TaskpadError",
    "UsageError",
    "MissingArgumentError",
    "InvalidIndexError",
    "EmptyListError",
    "StorageError",
    "TaskStore",
    "parse_indices",
]
