from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ValidationResult:
    success: bool
    message: str


@dataclass(frozen=True)
class ValidationReport:
    environment: list[ValidationResult]
    callback: ValidationResult
    configuration: ValidationResult

    @property
    def results(self) -> list[ValidationResult]:
        return [*self.environment, self.callback, self.configuration]

    @property
    def failures(self) -> list[ValidationResult]:
        return [result for result in self.results if not result.success]

    @property
    def passed(self) -> bool:
        return not self.failures


class SetupOutcome(str, Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    TEMPLATE_MISSING = "template_missing"
    ERROR = "error"
