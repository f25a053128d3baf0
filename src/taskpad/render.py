"""List formatters: one line of output per task."""

from colorama import Fore, Style

from .models import Task

# SGR 9; colorama has no constant for it.
STRIKETHROUGH = "\x1b[9m"


class PlainRenderer:
    """Raw prefix, as stored in the file."""

    def render(self, index: int, task: Task) -> str:
        return f"{task.prefix}{index}. {task.text}"


class ColorRenderer:
    """Done tasks get a red marker and a dimmed, struck-through description."""

    def render(self, index: int, task: Task) -> str:
        if not task.done:
            return f"{task.prefix}{index}. {task.text}"
        marker = f"[{Fore.RED}*{Style.RESET_ALL}] "
        return f"{marker}{index}. {Style.DIM}{STRIKETHROUGH}{task.text}{Style.RESET_ALL}"


def make_renderer(color: bool):
    return ColorRenderer() if color else PlainRenderer()
