from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .checks import run_validation
from .environment import configure_logging, load_environment, resolve_project_dir
from .output import header, render_report, render_verdict
from .scaffold import create_env_file
from .settings import ENV_FILENAME, PROJECT_DIR_ENV, TEMPLATE_FILENAME


def setup_main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    parser = argparse.ArgumentParser(
        prog="authsetup-init",
        description=(
            f"Create {ENV_FILENAME} from {TEMPLATE_FILENAME} for Google OAuth. "
            f"Works in the current directory or ${PROJECT_DIR_ENV}."
        ),
    )
    parser.parse_args(args)
    configure_logging()

    print(header("🚀 Google Auth Setup Utility"))
    create_env_file(resolve_project_dir())
    print(
        f'\n🔍 Run "authsetup-validate" after updating your {ENV_FILENAME} file '
        "to validate the configuration."
    )
    return 0


def validate_main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    parser = argparse.ArgumentParser(
        prog="authsetup-validate",
        description=(
            "Check Google OAuth environment variables and the Medusa config. "
            "Exits 0 when every check passes, 1 otherwise."
        ),
    )
    parser.parse_args(args)
    configure_logging()

    project_dir = resolve_project_dir()
    env = load_environment(project_dir)

    print(header("🔍 Validating Google Auth Integration..."))
    report = run_validation(env, project_dir)
    print(render_report(report))
    print(render_verdict(report))
    return 0 if report.passed else 1
