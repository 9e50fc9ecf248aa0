"""Project directory resolution, `.env` loading and logging setup."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from .settings import ENV_FILENAME, LOG_LEVEL_ENV, PROJECT_DIR_ENV

logger = logging.getLogger(__name__)


def resolve_project_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Return the directory holding `.env`, `.env.template` and the config file.

    Defaults to the current working directory; ``AUTHSETUP_PROJECT_DIR``
    overrides it.
    """
    source = os.environ if environ is None else environ
    override = source.get(PROJECT_DIR_ENV)
    if override:
        return Path(override).expanduser().resolve()
    return Path.cwd().resolve()


def load_environment(
    project_dir: Path,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Snapshot the process environment merged over the project's `.env` file.

    Variables already set in the process take precedence over the file, the
    same way ``load_dotenv`` behaves without ``override``. Keys declared
    without a value are skipped, and `${VAR}` references are kept literally.
    """
    env_path = project_dir / ENV_FILENAME
    snapshot: dict[str, str] = {}
    try:
        if env_path.is_file():
            file_values = dotenv_values(env_path, interpolate=False, encoding="utf-8")
        else:
            file_values = {}
            logger.debug("no %s found in %s", ENV_FILENAME, project_dir)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("could not load %s: %s", env_path, exc)
    else:
        snapshot.update({key: value for key, value in file_values.items() if value is not None})
        logger.debug("loaded %d variable(s) from %s", len(snapshot), env_path)

    snapshot.update(os.environ if environ is None else environ)
    return snapshot


def configure_logging(environ: Mapping[str, str] | None = None) -> None:
    source = os.environ if environ is None else environ
    level_name = source.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
