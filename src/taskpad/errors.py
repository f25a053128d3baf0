"""Exceptions raised by the task store and handled by the CLI."""


class TaskpadError(Exception):
    """Base class for every error the CLI turns into exit code 1."""

    silent = False


class UsageError(TaskpadError):
    pass


class MissingArgumentError(UsageError):
    def __init__(self, command: str):
        super().__init__(f"tpad {command} takes at least one argument!")
        self.command = command


class InvalidIndexError(UsageError):
    def __init__(self, token: str):
        super().__init__(f"{token} is not a valid index!")
        self.token = token


class EmptyListError(TaskpadError):
    """The list has no lines. Reported by exit status only."""

    silent = True

    def __init__(self) -> None:
        super().__init__("no tasks")


class StorageError(TaskpadError):
    """A todo or backup file could not be opened, read, written or copied."""
