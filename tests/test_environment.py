from __future__ import annotations

import logging
from pathlib import Path

import pytest

from authsetup.environment import configure_logging, load_environment, resolve_project_dir


def test_load_environment_reads_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "GOOGLE_CLIENT_ID=from-file\n# comment\nGOOGLE_CALLBACK_URL='http://localhost:8000/auth/callback'\n",
        encoding="utf-8",
    )

    env = load_environment(tmp_path, environ={})

    assert env["GOOGLE_CLIENT_ID"] == "from-file"
    assert env["GOOGLE_CALLBACK_URL"] == "http://localhost:8000/auth/callback"


def test_process_environment_wins(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("GOOGLE_CLIENT_ID=from-file\n", encoding="utf-8")

    env = load_environment(tmp_path, environ={"GOOGLE_CLIENT_ID": "from-process"})

    assert env["GOOGLE_CLIENT_ID"] == "from-process"


def test_keys_without_values_are_skipped(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("GOOGLE_CLIENT_SECRET\n", encoding="utf-8")

    env = load_environment(tmp_path, environ={})

    assert "GOOGLE_CLIENT_SECRET" not in env


def test_missing_dotenv_uses_process_environment(tmp_path: Path) -> None:
    env = load_environment(tmp_path, environ={"GOOGLE_CLIENT_ID": "x"})
    assert env == {"GOOGLE_CLIENT_ID": "x"}


def test_resolve_project_dir_override(tmp_path: Path) -> None:
    assert resolve_project_dir({"AUTHSETUP_PROJECT_DIR": str(tmp_path)}) == tmp_path.resolve()


def test_resolve_project_dir_defaults_to_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    assert resolve_project_dir({}) == tmp_path.resolve()


def test_configure_logging_ignores_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging({"AUTHSETUP_LOG_LEVEL": "chatty"})
    configure_logging({"AUTHSETUP_LOG_LEVEL": "debug"})

    assert calls[0]["level"] == logging.WARNING
    assert calls[1]["level"] == logging.DEBUG


def test_dollar_references_are_not_expanded(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "GOOGLE_CLIENT_SECRET=ab${HOME}cd$x\n", encoding="utf-8"
    )

    env = load_environment(tmp_path, environ={"HOME": "/root"})

    assert env["GOOGLE_CLIENT_SECRET"] == "ab${HOME}cd$x"


def test_unreadable_project_dir_falls_back_to_process_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _denied(self: Path) -> bool:
        raise PermissionError("permission denied")

    monkeypatch.setattr(Path, "is_file", _denied)

    env = load_environment(tmp_path, environ={"GOOGLE_CLIENT_ID": "x"})

    assert env == {"GOOGLE_CLIENT_ID": "x"}


def test_overlong_project_dir_does_not_raise(tmp_path: Path) -> None:
    env = load_environment(tmp_path / ("x" * 300), environ={})
    assert env == {}
