"""Output formatting for validation reports."""

import json
from typing import Literal

import click

from .. import __version__
from ..validators.base import Severity, Status, ValidationReport, ValidationResult
from ..validators.runner import CATEGORY_ORDER

RULE = "━" * 46

_STATUS_TEXT = {
    Status.PASS: ("PASS", "green"),
    Status.PASS_WITH_WARNINGS: ("PASS (with warnings)", "yellow"),
    Status.FAIL: ("FAIL", "red"),
}


def format_report(
    report: ValidationReport,
    format: Literal["text", "json"] = "text",
    verbose: bool = False,
) -> str:
    """Format a validation report for output.

    Args:
        report: The report to format.
        format: Output format ("text" or "json").
        verbose: In text mode, also list warnings.

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps(report.to_dict(), indent=2)
    return _format_text(report, verbose)


def format_error(message: str, format: Literal["text", "json"] = "text") -> str:
    """Format a fatal load error."""
    if format == "json":
        return json.dumps({"error": message}, indent=2)
    return f"{click.style('ERROR:', fg='red')} {message}"


def format_header() -> str:
    """The banner printed before a text-mode run."""
    return "\n".join([
        "",
        f"  {click.style('Metro Data Validator', bold=True)} {_dim('v' + __version__)}",
        _dim(f"  {RULE}"),
        "",
    ])


def _format_text(report: ValidationReport, verbose: bool) -> str:
    """Format report as human-readable text."""
    stats = report.stats
    lines: list[str] = [
        f"  {click.style('Database:', fg='cyan')} {report.database}",
        f"  {click.style('Stats:', fg='cyan')} Cities: {stats['cities']} | "
        f"Lines: {stats['lines']} | Stations: {stats['stations']} | "
        f"Connections: {stats['connections']}",
        "",
        _dim(f"  {RULE}"),
        "",
    ]

    for category in CATEGORY_ORDER:
        result = report.results.get(category)
        if result is None:
            continue
        lines.extend(_format_result(result, verbose))

    lines.append("")
    lines.append(_dim(f"  {RULE}"))
    lines.append("")

    lines.append(
        f"  {click.style('Summary:', bold=True)} "
        f"{report.error_count} errors, {report.warning_count} warnings"
    )
    text, color = _STATUS_TEXT[report.status]
    lines.append(f"  {click.style('Status:', bold=True)} {click.style(text, fg=color)}")

    return "\n".join(lines)


def _format_result(result: ValidationResult, verbose: bool) -> list[str]:
    """Format one category line plus its listed issues."""
    if result.failed > 0:
        icon = click.style("✗", fg="red")
    elif result.warnings > 0:
        icon = click.style("⚠", fg="yellow")
    else:
        icon = click.style("✓", fg="green")

    name = f"{result.category.capitalize():<12} Validations"
    counts = f"[{result.passed}/{result.total} passed]"
    if result.warnings > 0:
        counts = f"[{result.passed}/{result.total} passed, {result.warnings} warnings]"

    lines = [f"  {icon} {name} {_dim(counts)}"]

    # Errors are listed whenever the category failed, warnings only on request
    if verbose or result.failed > 0:
        for issue in result.issues:
            if issue.severity == Severity.ERROR:
                label = click.style("└─ ERROR:", fg="red")
            elif verbose:
                label = click.style("└─ WARNING:", fg="yellow")
            else:
                continue
            lines.append(f"      {label} {issue.id}: {issue.message}")

    return lines


def _dim(text: str) -> str:
    return click.style(text, dim=True)
