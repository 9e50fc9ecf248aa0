from __future__ import annotations

from pathlib import Path

import pytest

from authsetup.models import SetupOutcome
from authsetup.scaffold import create_env_file

TEMPLATE = (
    b"# Google OAuth\r\n"
    b"GOOGLE_CLIENT_ID=your_google_client_id\n"
    b"GOOGLE_CLIENT_SECRET=your_google_client_secret\n"
    b"GOOGLE_CALLBACK_URL=http://localhost:8000/auth/callback\n"
    b"# caf\xc3\xa9\n"
)


def test_creates_env_from_template(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".env.template").write_bytes(TEMPLATE)

    outcome = create_env_file(tmp_path)

    assert outcome is SetupOutcome.CREATED
    assert (tmp_path / ".env").read_bytes() == TEMPLATE
    out = capsys.readouterr().out
    assert "✅ Created .env file from template" in out
    assert "GOOGLE_CLIENT_SECRET: Your Google OAuth Client Secret" in out
    assert "https://console.cloud.google.com/apis/credentials" in out
    assert "../GOOGLE_AUTH_SETUP.md" in out


def test_rerun_is_a_no_op(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".env.template").write_bytes(TEMPLATE)
    create_env_file(tmp_path)
    (tmp_path / ".env").write_text("GOOGLE_CLIENT_ID=edited\n", encoding="utf-8")
    capsys.readouterr()

    outcome = create_env_file(tmp_path)

    assert outcome is SetupOutcome.ALREADY_EXISTS
    assert (tmp_path / ".env").read_text(encoding="utf-8") == "GOOGLE_CLIENT_ID=edited\n"
    out = capsys.readouterr().out
    assert "already exists" in out
    assert "GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET, GOOGLE_CALLBACK_URL" in out


def test_missing_template(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    outcome = create_env_file(tmp_path)

    assert outcome is SetupOutcome.TEMPLATE_MISSING
    assert not (tmp_path / ".env").exists()
    assert "❌ .env.template file not found" in capsys.readouterr().out


def test_write_error_is_reported(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / ".env.template").write_bytes(TEMPLATE)

    def _fail(self: Path) -> bytes:
        raise PermissionError("permission denied")

    monkeypatch.setattr(Path, "read_bytes", _fail)

    outcome = create_env_file(tmp_path)

    assert outcome is SetupOutcome.ERROR
    assert not (tmp_path / ".env").exists()
    captured = capsys.readouterr()
    assert "❌ Error creating .env file: permission denied" in captured.err
    assert "Error creating" not in captured.out


def test_existence_check_error_is_reported(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def _denied(self: Path) -> bool:
        raise PermissionError("permission denied")

    monkeypatch.setattr(Path, "exists", _denied)

    outcome = create_env_file(tmp_path)

    assert outcome is SetupOutcome.ERROR
    assert "❌ Error creating .env file: permission denied" in capsys.readouterr().err


def test_overlong_project_dir_does_not_raise(tmp_path: Path) -> None:
    outcome = create_env_file(tmp_path / ("x" * 300))
    assert outcome in {SetupOutcome.ERROR, SetupOutcome.TEMPLATE_MISSING}
