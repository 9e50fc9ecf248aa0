from __future__ import annotations

import ipaddress
import logging
import re
import urllib.parse
from collections.abc import Mapping
from pathlib import Path

from .models import ValidationReport, ValidationResult
from .output import sanitize_for_terminal
from .redaction import redact
from .settings import (
    AUTH_MODULE_ID,
    CALLBACK_PATH,
    CALLBACK_URL_VAR,
    CONFIG_FILENAME,
    PLACEHOLDER_SUBSTRINGS,
    PLACEHOLDER_VALUES,
    REQUIRED_VARS,
)

logger = logging.getLogger(__name__)

_SCHEME_PREFIX_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):(.*)$", re.DOTALL)
_TAB_NEWLINE_RE = re.compile(r"[\t\n\r]")
_FORBIDDEN_HOST_RE = re.compile(r"[\x00-\x20\x7f#%/:<>?@\[\\\]^|]")
_NUMERIC_HOST_RE = re.compile(r"^[0-9.]+$")
_C0_AND_SPACE = "".join(chr(code) for code in range(0x21))
# Schemes that must carry a host, mirroring the WHATWG "special" schemes.
_HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


class InvalidUrlError(ValueError):
    pass


def is_placeholder(value: str) -> bool:
    return value in PLACEHOLDER_VALUES or any(token in value for token in PLACEHOLDER_SUBSTRINGS)


def parse_url(value: str) -> urllib.parse.SplitResult:
    """Parse an absolute URL the way a browser's URL parser would accept it.

    Surrounding whitespace is trimmed and tabs/newlines are dropped. For
    host-based schemes backslashes before the query act as path separators,
    slashes after the colon are optional, and the host must be a valid
    domain or IP address with an in-range port. Raises
    :class:`InvalidUrlError` when the value cannot be parsed.
    """
    cleaned = _TAB_NEWLINE_RE.sub("", value.strip(_C0_AND_SPACE))
    match = _SCHEME_PREFIX_RE.match(cleaned)
    if not match:
        raise InvalidUrlError("missing scheme")
    scheme, rest = match.group(1).lower(), match.group(2)

    if scheme not in _HOST_SCHEMES:
        try:
            return urllib.parse.urlsplit(cleaned)
        except ValueError as exc:
            raise InvalidUrlError(str(exc)) from exc

    cut = min(
        (index for index in (rest.find("?"), rest.find("#")) if index >= 0),
        default=len(rest),
    )
    authority_and_path = rest[:cut].replace("\\", "/").lstrip("/")
    try:
        parsed = urllib.parse.urlsplit(f"{scheme}://{authority_and_path}{rest[cut:]}")
    except ValueError as exc:
        raise InvalidUrlError(str(exc)) from exc

    _check_host(parsed.netloc.rpartition("@")[2])
    try:
        parsed.port
    except ValueError as exc:
        raise InvalidUrlError("invalid port") from exc
    if not parsed.path:
        parsed = parsed._replace(path="/")
    return parsed


def _check_host(hostinfo: str) -> None:
    if hostinfo.startswith("["):
        end = hostinfo.find("]")
        if end < 0:
            raise InvalidUrlError("unterminated ipv6 host")
        try:
            ipaddress.IPv6Address(hostinfo[1:end])
        except ValueError as exc:
            raise InvalidUrlError("invalid ipv6 host") from exc
        return

    host = hostinfo.partition(":")[0]
    if not host:
        raise InvalidUrlError("missing host")
    if _FORBIDDEN_HOST_RE.search(host):
        raise InvalidUrlError("forbidden host character")
    if _NUMERIC_HOST_RE.match(host):
        try:
            ipaddress.IPv4Address(host[:-1] if host.endswith(".") else host)
        except ValueError as exc:
            raise InvalidUrlError("invalid ipv4 host") from exc


def validate_environment_variables(env: Mapping[str, str]) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    for name in REQUIRED_VARS:
        value = env.get(name)
        logger.debug("checking %s", redact(f"{name}={value}"))
        if not value:
            results.append(
                ValidationResult(
                    success=False,
                    message=f"❌ Missing required environment variable: {name}",
                )
            )
        elif is_placeholder(value):
            results.append(
                ValidationResult(
                    success=False,
                    message=(
                        f"❌ Environment variable {name} contains placeholder value. "
                        "Please update with actual Google OAuth credentials."
                    ),
                )
            )
        else:
            results.append(ValidationResult(success=True, message=f"✅ {name} is configured"))
    return results


def validate_callback_url(env: Mapping[str, str]) -> ValidationResult:
    callback_url = env.get(CALLBACK_URL_VAR)
    if not callback_url:
        return ValidationResult(success=False, message=f"❌ {CALLBACK_URL_VAR} is not set")

    shown = sanitize_for_terminal(callback_url)
    try:
        parsed = parse_url(callback_url)
    except InvalidUrlError as exc:
        logger.debug("callback url rejected: %s", exc)
        return ValidationResult(
            success=False,
            message=f"❌ {CALLBACK_URL_VAR} is not a valid URL: {shown}",
        )

    if CALLBACK_PATH not in parsed.path:
        return ValidationResult(
            success=False,
            message=(
                f"❌ {CALLBACK_URL_VAR} should end with '{CALLBACK_PATH}', "
                f"got: {sanitize_for_terminal(parsed.path)}"
            ),
        )

    return ValidationResult(
        success=True,
        message=f"✅ {CALLBACK_URL_VAR} is properly formatted: {shown}",
    )


def check_config_file(project_dir: Path) -> ValidationResult:
    config_path = project_dir / CONFIG_FILENAME
    try:
        if not config_path.exists():
            return ValidationResult(success=False, message=f"❌ {CONFIG_FILENAME} file not found")
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("failed to read %s: %s", config_path, exc)
        return ValidationResult(
            success=False,
            message=f"❌ Error reading {CONFIG_FILENAME}: {sanitize_for_terminal(str(exc))}",
        )

    if AUTH_MODULE_ID in content:
        return ValidationResult(
            success=True,
            message=f"✅ Google Auth Module is configured in {CONFIG_FILENAME}",
        )
    return ValidationResult(
        success=False,
        message=f"❌ Google Auth Module not found in {CONFIG_FILENAME}",
    )


def run_validation(env: Mapping[str, str], project_dir: Path) -> ValidationReport:
    report = ValidationReport(
        environment=validate_environment_variables(env),
        callback=validate_callback_url(env),
        configuration=check_config_file(project_dir),
    )
    logger.info(
        "validation finished: %d check(s), %d failed",
        len(report.results),
        len(report.failures),
    )
    return report
