"""Fixed names and literals shared by the setup and validation tools."""

from __future__ import annotations

ENV_FILENAME = ".env"
TEMPLATE_FILENAME = ".env.template"
CONFIG_FILENAME = "medusa-config.ts"

CLIENT_ID_VAR = "GOOGLE_CLIENT_ID"
CLIENT_SECRET_VAR = "GOOGLE_CLIENT_SECRET"  # noqa: S105  # nosec B105
CALLBACK_URL_VAR = "GOOGLE_CALLBACK_URL"

REQUIRED_VARS: tuple[str, ...] = (CLIENT_ID_VAR, CLIENT_SECRET_VAR, CALLBACK_URL_VAR)

# Unanchored, case-sensitive substring matches.
PLACEHOLDER_SUBSTRINGS: tuple[str, ...] = ("your_", "_here")
PLACEHOLDER_VALUES: frozenset[str] = frozenset(
    {"your_google_client_id", "your_google_client_secret"}
)

CALLBACK_PATH = "/auth/callback"
AUTH_MODULE_ID = "@medusajs/medusa/auth-google"

CREDENTIALS_CONSOLE_URL = "https://console.cloud.google.com/apis/credentials"
SETUP_GUIDE_PATH = "../GOOGLE_AUTH_SETUP.md"
DEFAULT_CALLBACK_URL = "http://localhost:8000/auth/callback"

PROJECT_DIR_ENV = "AUTHSETUP_PROJECT_DIR"
LOG_LEVEL_ENV = "AUTHSETUP_LOG_LEVEL"
