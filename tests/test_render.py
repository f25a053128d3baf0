# tests/test_render.py

from colorama import Fore, Style

from taskpad.models import Task
from taskpad.render import STRIKETHROUGH, ColorRenderer, PlainRenderer, make_renderer


def test_plain_renderer_keeps_raw_prefix() -> None:
    r = PlainRenderer()
    assert r.render(1, Task(text="a")) == "[ ] 1. a"
    assert r.render(2, Task(text="b", done=True)) == "[*] 2. b"


def test_color_renderer_decorates_done_tasks_only() -> None:
    r = ColorRenderer()
    assert r.render(1, Task(text="a")) == "[ ] 1. a"
    out = r.render(2, Task(text="b", done=True))
    assert Fore.RED in out
    assert f"{Style.DIM}{STRIKETHROUGH}b" in out
    assert out.startswith("[")


def test_make_renderer() -> None:
    assert isinstance(make_renderer(False), PlainRenderer)
    assert isinstance(make_renderer(True), ColorRenderer)
