"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from dataclasses import dataclass


class DomainException(Exception):
    """Base class for all domain errors."""


@dataclass(frozen=True)
class FieldViolation:
    """A single field-level rule that a command failed."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationError(DomainException):
    """A business rule or invariant was violated.

    Carries every field-level violation found, not just the first one.
    """

    def __init__(
        self,
        message: str,
        violations: list[FieldViolation] | None = None,
    ) -> None:
        super().__init__(message)
        self.violations: list[FieldViolation] = list(violations or [])

    @classmethod
    def from_violations(cls, violations: list[FieldViolation]) -> ValidationError:
        details = "; ".join(str(v) for v in violations)
        return cls(f"Validation failed: {details}", violations)

    def fields(self) -> list[str]:
        return [v.field for v in self.violations]


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DependencyError(DomainException):
    """A repository, cache or publisher call failed."""
