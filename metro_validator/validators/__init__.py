"""Validators for metro network integrity."""

from .base import Severity, Status, ValidationIssue, ValidationReport, ValidationResult
from .city import check_cities
from .connection import check_connections
from .interchange import check_interchanges
from .line import check_lines
from .station import check_stations
from .runner import (
    CATEGORY_ORDER,
    build_report,
    collect_issues,
    derive_status,
    run_validators,
    validate_database,
)

__all__ = [
    "Severity",
    "Status",
    "ValidationIssue",
    "ValidationReport",
    "ValidationResult",
    "check_cities",
    "check_connections",
    "check_interchanges",
    "check_lines",
    "check_stations",
    "CATEGORY_ORDER",
    "build_report",
    "collect_issues",
    "derive_status",
    "run_validators",
    "validate_database",
]
