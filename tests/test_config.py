# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from tasklist.cli.bootstrap import create_initial_state
from tasklist.config import Settings
from tasklist.logging_setup import setup_logging
from tasklist.tasks.task_models import IdMode, TokenId


def test_settings_defaults(monkeypatch) -> None:
    for var in ("APP_NAME", "LOG_LEVEL", "LOG_DIR", "LOG_TO_FILE", "ID_MODE", "PROMPT"):
        monkeypatch.delenv(f"TASKLIST_{var}", raising=False)

    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.log_level == "INFO"
    assert s.log_dir == Path(".local/tasklist")
    assert s.log_to_file is True
    assert s.id_mode == "numeric"
    assert s.prompt == "> "


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKLIST_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("TASKLIST_LOG_TO_FILE", "off")
    monkeypatch.setenv("TASKLIST_ID_MODE", "Token")
    monkeypatch.setenv("TASKLIST_PROMPT", "$ ")

    s = Settings.from_env()
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path
    assert s.log_to_file is False
    assert s.id_mode == "token"
    assert s.prompt == "$ "


def test_settings_unknown_choices_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("TASKLIST_LOG_LEVEL", "chatty")
    monkeypatch.setenv("TASKLIST_ID_MODE", "uuid")

    s = Settings.from_env()
    assert s.log_level == "INFO"
    assert s.id_mode == "numeric"


def test_bootstrap_uses_id_mode(settings) -> None:
    settings.id_mode = "token"
    state = create_initial_state(settings=settings)
    assert state.task_list.id_mode is IdMode.TOKEN

    state.task_list.add_project("p")
    assert isinstance(state.task_list.add_task("p", "x").id, TokenId)


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path, console_level=logging.WARNING)
        logging.getLogger("tasklist.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "tasklist.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)
