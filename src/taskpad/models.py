"""Data models and constants for taskpad."""

from dataclasses import dataclass
from typing import Optional

TODO_FILENAME = ".tpad"
BACKUP_FILENAME = ".tpad.bak"

OPEN_PREFIX = "[ ] "
DONE_PREFIX = "[*] "
PREFIX_LEN = 4


@dataclass
class Task:
    """A single todo line: status prefix plus description."""

    text: str
    done: bool = False

    @property
    def prefix(self) -> str:
        return DONE_PREFIX if self.done else OPEN_PREFIX

    def to_line(self) -> str:
        return f"{self.prefix}{self.text}"

    @classmethod
    def from_line(cls, line: str) -> Optional["Task"]:
        """Parse a stored line.

        Lines no longer than the prefix are not tasks and yield None.
        A line without a recognised prefix is read as an open task
        carrying the whole line as its text.
        """
        if len(line) <= PREFIX_LEN:
            return None
        head, text = line[:PREFIX_LEN], line[PREFIX_LEN:]
        if head == DONE_PREFIX:
            return cls(text=text, done=True)
        if head == OPEN_PREFIX:
            return cls(text=text, done=False)
        return cls(text=line, done=False)
