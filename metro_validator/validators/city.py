"""City validator."""

from ..config import DEFAULT_CONFIG, ValidationConfig
from ..geo import latitude_in_domain, longitude_in_domain
from ..schema.errors import CoordinateParseError
from ..schema.models import City
from .base import ValidationResult


def check_cities(
    cities: list[City], config: ValidationConfig = DEFAULT_CONFIG
) -> ValidationResult:
    """Check city records.

    This validator checks:
    - City IDs are unique
    - The map center decodes and lies within the coordinate domain
    - The map center lies inside the service region (warning)
    - The timezone is a known one (warning)
    - Name and display name are not blank

    Args:
        cities: The city records.
        config: Validation thresholds.

    Returns:
        ValidationResult with category ``city``.
    """
    result = ValidationResult(category="city")
    seen: set[str] = set()

    for city in cities:
        with result.check(city.id) as check:
            if city.id in seen:
                check.error("Duplicate city ID")
            seen.add(city.id)

            try:
                center = city.parse_map_center()
            except CoordinateParseError as e:
                check.error(f"Invalid map_center JSON: {e}")
            else:
                if not latitude_in_domain(center.lat):
                    check.error(f"Latitude {center.lat:f} out of range [-90, 90]")
                if not longitude_in_domain(center.lng):
                    check.error(f"Longitude {center.lng:f} out of range [-180, 180]")
                if not config.region.contains(center.lat, center.lng):
                    check.warning(
                        f"Coordinates ({center.lat:.4f}, {center.lng:.4f}) appear to be "
                        f"outside {config.region.name}"
                    )

            if city.timezone not in config.valid_timezones:
                check.warning(f"Timezone '{city.timezone}' may not be valid")

            if not city.name.strip():
                check.error("City name is empty")

            if not city.display_name.strip():
                check.error("City display name is empty")

    return result
