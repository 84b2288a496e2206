# core/exceptions.py
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.services.scheduling.models import CycleReport


class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when data is invalid or violates constraints."""


class NotFoundError(DomainError):
    """Raised when an entity is not found."""


class BusinessRuleError(DomainError):
    """Raised when business rules are violated (e.g., circular dependencies)."""


class CycleDetectedError(BusinessRuleError):
    """Raised by strict scheduling when the dependency graph is not a DAG."""

    def __init__(self, report: "CycleReport", message: str | None = None):
        if message is None:
            message = "Cannot schedule project: circular dependency detected."
            if report.cycle_path:
                message = f"{message} Cycle path: {' -> '.join(report.cycle_path)}"
        super().__init__(message, code="SCHEDULE_CYCLE")
        self.report = report

    @property
    def unresolved_ids(self) -> list[str]:
        return list(self.report.unresolved_ids)
