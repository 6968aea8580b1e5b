"""Validation runner that orchestrates all validators."""

import logging
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from pathlib import Path

from ..config import DEFAULT_CONFIG, ValidationConfig
from ..schema.loader import load_snapshot
from ..schema.models import NetworkSnapshot
from .base import Status, ValidationIssue, ValidationReport, ValidationResult
from .city import check_cities
from .connection import check_connections
from .interchange import check_interchanges
from .line import check_lines
from .station import check_stations

logger = logging.getLogger(__name__)

CATEGORY_ORDER = ("city", "line", "station", "connection", "interchange")


def _validator_calls(
    snapshot: NetworkSnapshot, config: ValidationConfig
) -> dict[str, Callable[[], ValidationResult]]:
    """Bind each validator to the slice of the snapshot it needs."""
    return {
        "city": lambda: check_cities(snapshot.cities, config),
        "line": lambda: check_lines(snapshot.lines, snapshot.cities, snapshot.station_counts),
        "station": lambda: check_stations(snapshot.stations, snapshot.cities, config),
        "connection": lambda: check_connections(
            snapshot.connections,
            snapshot.stations,
            snapshot.lines,
            snapshot.line_stations,
            config,
        ),
        "interchange": lambda: check_interchanges(
            snapshot.stations, snapshot.lines_per_station
        ),
    }


def run_validators(
    snapshot: NetworkSnapshot,
    config: ValidationConfig | None = None,
    parallel: bool = False,
) -> dict[str, ValidationResult]:
    """Run all validators on a snapshot.

    The validators are independent of one another, so with ``parallel`` they
    run on a thread pool; the outcome is the same either way.

    Args:
        snapshot: The loaded network snapshot.
        config: Validation thresholds; defaults apply when omitted.
        parallel: Run the validators concurrently.

    Returns:
        One ValidationResult per category, keyed in CATEGORY_ORDER.
    """
    calls = _validator_calls(snapshot, config or DEFAULT_CONFIG)

    if parallel:
        with ThreadPoolExecutor(max_workers=len(calls)) as pool:
            futures = {name: pool.submit(call) for name, call in calls.items()}
            results = {name: futures[name].result() for name in CATEGORY_ORDER}
    else:
        results = {name: calls[name]() for name in CATEGORY_ORDER}

    for name, result in results.items():
        logger.debug(
            "%s: %d passed, %d failed, %d warnings",
            name,
            result.passed,
            result.failed,
            result.warnings,
        )
    return results


def derive_status(results: Mapping[str, ValidationResult]) -> Status:
    """Derive the overall status from per-category results."""
    if any(r.failed > 0 for r in results.values()):
        return Status.FAIL
    if any(r.warnings > 0 for r in results.values()):
        return Status.PASS_WITH_WARNINGS
    return Status.PASS


def collect_issues(results: Mapping[str, ValidationResult]) -> list[ValidationIssue]:
    """Flatten the issues of all categories in CATEGORY_ORDER."""
    issues: list[ValidationIssue] = []
    for name in CATEGORY_ORDER:
        if name in results:
            issues.extend(results[name].issues)
    return issues


def build_report(
    snapshot: NetworkSnapshot,
    database: str,
    config: ValidationConfig | None = None,
    parallel: bool = False,
) -> ValidationReport:
    """Validate a snapshot and assemble the aggregate report.

    Args:
        snapshot: The loaded network snapshot.
        database: Where the snapshot came from, echoed in the report.
        config: Validation thresholds.
        parallel: Run the validators concurrently.

    Returns:
        The ValidationReport for this run.
    """
    results = run_validators(snapshot, config, parallel=parallel)
    status = derive_status(results)

    report = ValidationReport(
        database=database,
        timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        stats=snapshot.stats.model_dump(),
        results=results,
        issues=collect_issues(results),
        status=status,
    )
    logger.info(
        "Validation of %s finished: %s (%d failed, %d warnings)",
        database,
        status.value,
        report.error_count,
        report.warning_count,
    )
    return report


def validate_database(
    path: str | Path, config: ValidationConfig | None = None
) -> ValidationReport:
    """Load and validate a snapshot file.

    Args:
        path: Path to a SQLite database or YAML snapshot.
        config: Validation thresholds.

    Returns:
        ValidationReport from all validators.

    Raises:
        SnapshotLoadError: If the snapshot cannot be loaded.
        SnapshotValidationError: If its records fail schema validation.
    """
    snapshot = load_snapshot(path)
    return build_report(snapshot, str(path), config)
