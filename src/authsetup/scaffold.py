from __future__ import annotations

import logging
import sys
from pathlib import Path

from .models import SetupOutcome
from .output import sanitize_for_terminal
from .settings import (
    CALLBACK_URL_VAR,
    CLIENT_ID_VAR,
    CLIENT_SECRET_VAR,
    CREDENTIALS_CONSOLE_URL,
    DEFAULT_CALLBACK_URL,
    ENV_FILENAME,
    REQUIRED_VARS,
    SETUP_GUIDE_PATH,
    TEMPLATE_FILENAME,
)

logger = logging.getLogger(__name__)


def create_env_file(project_dir: Path) -> SetupOutcome:
    """Copy `.env.template` to `.env` unless `.env` is already present.

    Never raises for filesystem problems; they are reported and returned as
    :attr:`SetupOutcome.ERROR`.
    """
    env_path = project_dir / ENV_FILENAME
    template_path = project_dir / TEMPLATE_FILENAME

    print(f"Checking for {ENV_FILENAME} file at: {env_path}")
    print(f"Checking for {TEMPLATE_FILENAME} file at: {template_path}")

    try:
        env_exists = env_path.exists()
        template_exists = not env_exists and template_path.exists()
    except OSError as exc:
        return _report_error(env_path, exc)

    if env_exists:
        print(
            f"📋 {ENV_FILENAME} file already exists. "
            "Please manually update it with your Google OAuth credentials."
        )
        print(f"   Required variables: {', '.join(REQUIRED_VARS)}")
        return SetupOutcome.ALREADY_EXISTS

    if not template_exists:
        print(
            f"❌ {TEMPLATE_FILENAME} file not found. "
            "Please ensure you are in the correct directory."
        )
        return SetupOutcome.TEMPLATE_MISSING

    try:
        template_bytes = template_path.read_bytes()
        with env_path.open("xb") as handle:
            handle.write(template_bytes)
    except OSError as exc:
        return _report_error(env_path, exc)

    logger.info("created %s from %s (%d bytes)", env_path, template_path, len(template_bytes))
    print(f"✅ Created {ENV_FILENAME} file from template")
    print(f"📝 Please update the following variables in your {ENV_FILENAME} file:")
    print(f"   - {CLIENT_ID_VAR}: Your Google OAuth Client ID")
    print(f"   - {CLIENT_SECRET_VAR}: Your Google OAuth Client Secret")
    print(f"   - {CALLBACK_URL_VAR}: Usually {DEFAULT_CALLBACK_URL} for development")
    print("")
    print(f"🔗 Get these credentials from: {CREDENTIALS_CONSOLE_URL}")
    print(f"📖 For detailed setup instructions, see: {SETUP_GUIDE_PATH}")
    return SetupOutcome.CREATED


def _report_error(env_path: Path, exc: OSError) -> SetupOutcome:
    logger.warning("could not create %s: %s", env_path, exc)
    print(
        f"❌ Error creating {ENV_FILENAME} file: {sanitize_for_terminal(str(exc))}",
        file=sys.stderr,
    )
    return SetupOutcome.ERROR
