"""Line validator."""

import re

from ..schema.models import City, Line
from .base import ValidationResult

HEX_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")

MIN_STATIONS_PER_LINE = 2


def check_lines(
    lines: list[Line], cities: list[City], station_counts: dict[str, int]
) -> ValidationResult:
    """Check line records.

    A line missing from ``station_counts`` has no stations at all and gets
    a different message from a line that has too few.

    Args:
        lines: The line records.
        cities: The city records, for reference checks.
        station_counts: Distinct station count per line ID.

    Returns:
        ValidationResult with category ``line``.
    """
    result = ValidationResult(category="line")
    seen: set[str] = set()
    city_ids = {city.id for city in cities}

    for line in lines:
        with result.check(line.id) as check:
            if line.id in seen:
                check.error("Duplicate line ID")
            seen.add(line.id)

            if line.city_id not in city_ids:
                check.error(f"CityID '{line.city_id}' does not exist")

            if not line.name.strip():
                check.error("Line name is empty")

            if not HEX_COLOR_RE.fullmatch(line.color):
                check.error(f"Invalid hex color '{line.color}' (expected format: #RRGGBB)")

            if line.display_order < 0:
                check.warning(f"Display order {line.display_order} is negative")

            if line.id not in station_counts:
                check.error("Line has no stations")
            elif station_counts[line.id] < MIN_STATIONS_PER_LINE:
                count = station_counts[line.id]
                check.error(
                    f"Line has only {count} station(s), minimum is {MIN_STATIONS_PER_LINE}"
                )

    return result
