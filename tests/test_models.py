# tests/test_models.py

import pytest

from taskpad.models import Task


def test_task_to_line_uses_status_prefix() -> None:
    assert Task(text="a").to_line() == "[ ] a"
    assert Task(text="b", done=True).to_line() == "[*] b"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("[ ] buy milk", Task(text="buy milk", done=False)),
        ("[*] buy milk", Task(text="buy milk", done=True)),
        ("[ ]  spaced", Task(text=" spaced", done=False)),
        ("loose note", Task(text="loose note", done=False)),
    ],
)
def test_task_from_line(line, expected) -> None:
    assert Task.from_line(line) == expected


@pytest.mark.parametrize("line", ["", "   ", "[ ] ", "[*] ", "[*]"])
def test_short_lines_are_not_tasks(line) -> None:
    assert Task.from_line(line) is None
