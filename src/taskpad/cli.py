"""taskpad command-line interface."""

import sys
from typing import Callable, Dict, List, Optional

from colorama import Fore, Style, just_fix_windows_console

from .config import Config, load_config
from .errors import TaskpadError
from .logging_setup import setup_logging
from .render import make_renderer
from .storage import TaskStore

HELP = """Usage: tpad [COMMAND] [ARGUMENTS]
Taskpad (tpad) is a small command-line todo list.

Example: tpad list

Available commands:
    - add [TASK/s]
        add one or more tasks
        Example: tpad add "write report" "call Sam"
    - init
        create a .tpad file in the current directory
        Example: tpad init
    - list
        list all tasks (the default when no command is given)
        Example: tpad list
    - done [INDEX/es]
        mark tasks as done
        Example: tpad done 2 4
    - undo [INDEX/es]
        mark tasks as not done
        Example: tpad undo 2 4
    - rm [INDEX/es]/[done]
        remove tasks
        Example: tpad rm 2
                 tpad rm done (removes every completed task)
    - reset
        back up the list, then delete all tasks
    - restore
        bring back the list saved by the last reset

Files:
    ./.tpad is used when present, otherwise .tpad in $TASKPAD (if it is a
    directory) or in your home directory. Backups go to .tpad.bak in
    $TASKPAD_BACKUP (if it is a directory) or in your home directory.
"""

HELP_COMMANDS = ("help", "--help", "-h")


def cmd_init(store: TaskStore, args: List[str]) -> None:
    if not store.init():
        print_error(".tpad file already exists!", store.config.color)


def cmd_add(store: TaskStore, args: List[str]) -> None:
    store.add(args)


def cmd_list(store: TaskStore, args: List[str]) -> None:
    renderer = make_renderer(store.config.color)
    lines = [renderer.render(i, task) for i, task in store.entries()]
    for line in lines:
        print(line)


def cmd_done(store: TaskStore, args: List[str]) -> None:
    store.done(args)


def cmd_undo(store: TaskStore, args: List[str]) -> None:
    store.undo(args)


def cmd_rm(store: TaskStore, args: List[str]) -> None:
    store.remove(args)


def cmd_reset(store: TaskStore, args: List[str]) -> None:
    store.reset()


def cmd_restore(store: TaskStore, args: List[str]) -> None:
    store.restore()


COMMANDS: Dict[str, Callable[[TaskStore, List[str]], None]] = {
    "init": cmd_init,
    "add": cmd_add,
    "list": cmd_list,
    "done": cmd_done,
    "undo": cmd_undo,
    "rm": cmd_rm,
    "reset": cmd_reset,
    "restore": cmd_restore,
}


def print_error(message: str, color: bool) -> None:
    if color:
        message = f"{Fore.RED}{message}{Style.RESET_ALL}"
    print(message, file=sys.stderr)


def run(config: Config, argv: List[str]) -> int:
    """Dispatch one command against the files named by `config`."""
    command, args = (argv[0], argv[1:]) if argv else ("list", [])
    func = COMMANDS.get(command)
    if command in HELP_COMMANDS or func is None:
        print(HELP)
        return 0

    try:
        store = TaskStore(config)
        if command != "init":
            store.load()
        func(store, args)
    except TaskpadError as exc:
        if not exc.silent:
            print_error(str(exc), config.color)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    just_fix_windows_console()
    config = load_config()
    setup_logging(config.log_level)
    return run(config, argv)


if __name__ == "__main__":
    sys.exit(main())
