# tests/conftest.py

import logging
from pathlib import Path

import pytest

from taskpad.config import Config, load_config
from taskpad.storage import TaskStore


@pytest.fixture()
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture()
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture()
def make_config(home: Path, workdir: Path):
    """
    Resolve a Config against tmp dirs only.

    The real environment is never consulted, so a developer's own
    ~/.tpad is never touched by the test run.
    """

    def _make(environ=None, color: bool = False) -> Config:
        env = dict(environ or {})
        if color:
            env["TASKPAD_COLOR"] = "1"
        return load_config(cwd=workdir, environ=env, home=home, isatty=False)

    return _make


@pytest.fixture()
def config(make_config) -> Config:
    return make_config()


@pytest.fixture()
def write_todo(config: Config):
    def _write(content: str) -> Path:
        config.todo_path.write_text(content, encoding="utf-8")
        return config.todo_path

    return _write


@pytest.fixture()
def load_store(config: Config):
    """Fresh store over the current file, like a new `tpad` process."""

    def _load() -> TaskStore:
        return TaskStore(config).load()

    return _load


@pytest.fixture(autouse=True)
def _reset_taskpad_logger():
    """Drop handlers `main()` installs so they never outlive capsys streams."""
    yield
    logger = logging.getLogger("taskpad")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
