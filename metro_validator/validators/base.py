"""Base classes for validation results."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity level of a validation issue."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    """A single finding about one entity."""

    severity: Severity
    category: str
    id: str
    message: str

    def __str__(self) -> str:
        return f"{self.severity.value.upper()}: [{self.category} {self.id}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "severity": self.severity.value,
            "category": self.category,
            "id": self.id,
            "message": self.message,
        }


class EntityCheck:
    """Collects the findings raised while checking a single entity."""

    def __init__(self, result: "ValidationResult", subject_id: str):
        self._result = result
        self.subject_id = subject_id
        self.error_count = 0
        self.warning_count = 0

    def error(self, message: str) -> None:
        """Record an error for this entity."""
        self.error_count += 1
        self._result.issues.append(
            ValidationIssue(Severity.ERROR, self._result.category, self.subject_id, message)
        )

    def warning(self, message: str) -> None:
        """Record a warning for this entity."""
        self.warning_count += 1
        self._result.issues.append(
            ValidationIssue(Severity.WARNING, self._result.category, self.subject_id, message)
        )


@dataclass
class ValidationResult:
    """Outcome of running one validator over its entities.

    ``passed`` and ``failed`` count entities, not issues: an entity with any
    error is failed exactly once, an entity with only warnings is passed.
    ``warnings`` counts the entities that raised at least one warning.
    """

    category: str
    passed: int = 0
    failed: int = 0
    warnings: int = 0
    issues: list[ValidationIssue] = field(default_factory=list)

    @contextmanager
    def check(self, subject_id: str) -> Iterator[EntityCheck]:
        """Check one entity; it is tallied when the block exits."""
        entity = EntityCheck(self, subject_id)
        yield entity
        if entity.error_count:
            self.failed += 1
        else:
            self.passed += 1
        if entity.warning_count:
            self.warnings += 1

    @property
    def total(self) -> int:
        """Number of entities checked (warnings do not count separately)."""
        return self.passed + self.failed

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error-level issues."""
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warning_issues(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return self.failed > 0

    @property
    def has_warnings(self) -> bool:
        return self.warnings > 0

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "category": self.category,
            "passed": self.passed,
            "failed": self.failed,
            "warnings": self.warnings,
        }
        if self.issues:
            data["issues"] = [issue.to_dict() for issue in self.issues]
        return data


class Status(str, Enum):
    """Overall status of a validation run."""

    PASS = "pass"
    PASS_WITH_WARNINGS = "pass_with_warnings"
    FAIL = "fail"


@dataclass
class ValidationReport:
    """Everything produced by one validation run."""

    database: str
    timestamp: str
    stats: dict[str, int]
    results: dict[str, ValidationResult]
    issues: list[ValidationIssue]
    status: Status

    @property
    def error_count(self) -> int:
        return sum(r.failed for r in self.results.values())

    @property
    def warning_count(self) -> int:
        return sum(r.warnings for r in self.results.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "database": self.database,
            "timestamp": self.timestamp,
            "stats": self.stats,
            "results": {name: r.to_dict() for name, r in self.results.items()},
            "issues": [issue.to_dict() for issue in self.issues],
            "status": self.status.value,
        }
