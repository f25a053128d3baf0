"""File I/O for taskpad todo lists."""

import logging
import re
import shutil
from typing import Iterator, List, Sequence, Set, Tuple

from .config import Config
from .errors import (
    EmptyListError,
    InvalidIndexError,
    MissingArgumentError,
    StorageError,
)
from .models import DONE_PREFIX, Task

logger = logging.getLogger(__name__)

INDEX_RE = re.compile(r"\+?[0-9]+")
REMOVE_DONE = "done"
DONE_MARKER = DONE_PREFIX.rstrip()


def split_lines(content: str) -> List[str]:
    """Split on "\n" only, dropping one trailing "\r" per line.

    A lone "\r" inside a task stays part of its text.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_indices(tokens: Sequence[str]) -> List[int]:
    """Convert 1-based index tokens to 0-based positions.

    Every token is checked before anything is returned, so a bad token
    aborts the whole command before any mutation.
    """
    positions = []
    for token in tokens:
        stripped = token.strip()
        if not INDEX_RE.fullmatch(stripped) or int(stripped) < 1:
            raise InvalidIndexError(token)
        positions.append(int(stripped) - 1)
    return positions


class TaskStore:
    """Owns the todo list and its persistence.

    The file is read once by `load()`; mutations rewrite it whole.
    """

    def __init__(self, config: Config):
        self.config = config
        self.todo_path = config.todo_path
        self.backup_path = config.backup_path
        self.backed_up = config.backed_up
        self.lines: List[str] = []

    def load(self) -> "TaskStore":
        """Open (creating if needed) and read the todo file."""
        try:
            with open(self.todo_path, "a+", encoding="utf-8", newline="") as f:
                f.seek(0)
                self.lines = split_lines(f.read())
        except OSError as exc:
            raise StorageError(f"failed to open todo file {self.todo_path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise StorageError(f"failed to read todo file {self.todo_path}: {exc}") from exc
        logger.debug("Loaded %d line(s) from %s", len(self.lines), self.todo_path)
        return self

    def init(self) -> bool:
        """Create an empty `.tpad` in the working directory; False if it exists."""
        path = self.config.local_path
        if path.exists():
            return False
        try:
            with open(path, "x", encoding="utf-8"):
                pass
        except FileExistsError:
            return False
        except OSError as exc:
            raise StorageError(f"failed to create {path}: {exc}") from exc
        logger.info("Created %s", path)
        return True

    def add(self, texts: Sequence[str]) -> int:
        """Append one open task per text straight to the file."""
        if not texts:
            raise MissingArgumentError("add")
        new_lines = [Task(text=text).to_line() for text in texts]
        try:
            with open(self.todo_path, "a", encoding="utf-8", newline="") as f:
                for line in new_lines:
                    f.write(f"{line}\n")
        except OSError as exc:
            raise StorageError(f"failed to write {self.todo_path}: {exc}") from exc
        self.lines.extend(new_lines)
        return len(new_lines)

    def entries(self) -> Iterator[Tuple[int, Task]]:
        """Yield (1-based index, task) for every displayable line."""
        self._require_tasks()
        return self._iter_entries()

    def _iter_entries(self) -> Iterator[Tuple[int, Task]]:
        for i, line in enumerate(self.lines, start=1):
            task = Task.from_line(line)
            if task is not None:
                yield i, task

    def done(self, tokens: Sequence[str]) -> List[int]:
        return self._set_status(tokens, done=True, command="done")

    def undo(self, tokens: Sequence[str]) -> List[int]:
        return self._set_status(tokens, done=False, command="undo")

    def _set_status(self, tokens: Sequence[str], done: bool, command: str) -> List[int]:
        if not tokens:
            raise MissingArgumentError(command)
        self._require_tasks()
        positions = parse_indices(tokens)

        changed = []
        for pos in positions:
            if pos >= len(self.lines):
                logger.debug("Index %d out of range, skipped", pos + 1)
                continue
            task = Task.from_line(self.lines[pos])
            if task is None:
                logger.warning("Line %d is not a task, skipped", pos + 1)
                continue
            task.done = done
            self.lines[pos] = task.to_line()
            changed.append(pos + 1)

        self._write_lines()
        return changed

    def remove(self, tokens: Sequence[str]) -> int:
        """Drop the selected lines; `done` alone selects every finished task."""
        if not tokens:
            raise MissingArgumentError("rm")
        self._require_tasks()

        if len(tokens) == 1 and tokens[0] == REMOVE_DONE:
            selected: Set[int] = {
                pos for pos, line in enumerate(self.lines) if self._is_done(line)
            }
        else:
            selected = {pos for pos in parse_indices(tokens) if pos < len(self.lines)}

        self.lines = [line for pos, line in enumerate(self.lines) if pos not in selected]
        self._write_lines()
        return len(selected)

    @staticmethod
    def _is_done(line: str) -> bool:
        return line.startswith(DONE_MARKER)

    def reset(self) -> None:
        """Copy the todo file to the backup slot, then empty it."""
        self._require_tasks()
        try:
            shutil.copyfile(self.todo_path, self.backup_path)
        except OSError as exc:
            raise StorageError(f"failed to back up to {self.backup_path}: {exc}") from exc
        self.lines = []
        self._write_lines()
        logger.info("Backed up %s to %s and cleared it", self.todo_path, self.backup_path)

    def restore(self) -> bool:
        """Copy the backup over the todo file.

        With no backup at startup, an empty backup file is created instead
        and nothing is restored.
        """
        if not self.backed_up:
            try:
                with open(self.backup_path, "w", encoding="utf-8"):
                    pass
            except OSError as exc:
                raise StorageError(f"failed to create the backup file {self.backup_path}: {exc}") from exc
            logger.info("No backup to restore; created empty %s", self.backup_path)
            return False
        try:
            shutil.copyfile(self.backup_path, self.todo_path)
        except OSError as exc:
            raise StorageError(f"failed to restore from {self.backup_path}: {exc}") from exc
        logger.info("Restored %s from %s", self.todo_path, self.backup_path)
        return True

    def _require_tasks(self) -> None:
        if not self.lines:
            raise EmptyListError()

    def _write_lines(self) -> None:
        """Rewrite the file from in-memory state."""
        try:
            with open(self.todo_path, "w", encoding="utf-8", newline="") as f:
                for line in self.lines:
                    f.write(f"{line}\n")
        except OSError as exc:
            raise StorageError(f"failed to write {self.todo_path}: {exc}") from exc
