__all__ = [
    "SetupOutcome",
    "ValidationReport",
    "ValidationResult",
    "check_config_file",
    "create_env_file",
    "run_validation",
    "validate_callback_url",
    "validate_environment_variables",
]

from .checks import (
    check_config_file,
    run_validation,
    validate_callback_url,
    validate_environment_variables,
)
from .models import SetupOutcome, ValidationReport, ValidationResult
from .scaffold import create_env_file
