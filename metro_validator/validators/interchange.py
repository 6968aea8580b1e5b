"""Interchange validator."""

from collections.abc import Collection, Mapping

from ..schema.models import Station
from .base import ValidationResult


def check_interchanges(
    stations: list[Station], lines_per_station: Mapping[str, Collection[str]]
) -> ValidationResult:
    """Check that interchange flags agree with line membership.

    A station is an interchange when it is served by two or more distinct
    lines. A flagged station on fewer lines is an error, an unflagged one on
    two or more is a warning, and a station on no line is an orphan error
    whatever its flag says. A flagged orphan gets both errors.

    Args:
        stations: The station records.
        lines_per_station: Lines serving each station ID; missing means none.

    Returns:
        ValidationResult with category ``interchange``.
    """
    result = ValidationResult(category="interchange")

    for station in stations:
        line_count = len(set(lines_per_station.get(station.id, ())))

        with result.check(station.id) as check:
            if station.is_interchange and line_count < 2:
                check.error(f"Marked as interchange but only on {line_count} line(s)")

            if not station.is_interchange and line_count >= 2:
                check.warning(f"On {line_count} lines but not marked as interchange")

            if line_count == 0:
                check.error("Station is not assigned to any line (orphan)")

    return result
