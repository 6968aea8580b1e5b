"""Station validator."""

from ..config import DEFAULT_CONFIG, ValidationConfig
from ..geo import haversine_distance, latitude_in_domain, longitude_in_domain
from ..schema.errors import CoordinateParseError
from ..schema.models import City, Coordinate, Station
from .base import ValidationResult


def check_stations(
    stations: list[Station],
    cities: list[City],
    config: ValidationConfig = DEFAULT_CONFIG,
) -> ValidationResult:
    """Check station records.

    This validator checks:
    - Station IDs are unique
    - The city reference resolves
    - The name is not blank
    - Coordinates lie within the coordinate domain and the service region
    - The station is close enough to its city's center

    Cities whose map center does not decode, or decodes outside the
    coordinate domain, are left out of the distance check; the city
    validator already reports them.

    Args:
        stations: The station records.
        cities: The city records.
        config: Validation thresholds.

    Returns:
        ValidationResult with category ``station``.
    """
    result = ValidationResult(category="station")
    seen: set[str] = set()
    city_ids = {city.id for city in cities}

    centers: dict[str, Coordinate] = {}
    city_names: dict[str, str] = {}
    for city in cities:
        try:
            center = city.parse_map_center()
        except CoordinateParseError:
            continue
        if not (latitude_in_domain(center.lat) and longitude_in_domain(center.lng)):
            continue
        centers[city.id] = center
        city_names[city.id] = city.name

    for station in stations:
        with result.check(station.id) as check:
            if station.id in seen:
                check.error("Duplicate station ID")
            seen.add(station.id)

            if station.city_id not in city_ids:
                check.error(f"CityID '{station.city_id}' does not exist")

            if not station.name.strip():
                check.error("Station name is empty")

            in_domain = True
            if not latitude_in_domain(station.latitude):
                check.error(f"Latitude {station.latitude:f} out of range [-90, 90]")
                in_domain = False
            if not longitude_in_domain(station.longitude):
                check.error(f"Longitude {station.longitude:f} out of range [-180, 180]")
                in_domain = False

            if not config.region.contains(station.latitude, station.longitude):
                check.warning(
                    f"Coordinates ({station.latitude:.4f}, {station.longitude:.4f}) "
                    f"appear to be outside {config.region.name}"
                )

            center = centers.get(station.city_id)
            if center is None or not in_domain:
                continue

            distance = haversine_distance(
                station.latitude, station.longitude, center.lat, center.lng
            )
            city_name = city_names[station.city_id]
            if distance > config.max_station_distance_km:
                check.error(
                    f"Station is {distance:.1f} km from {city_name} city center "
                    f"(max {config.max_station_distance_km:g}km)"
                )
            elif distance > config.warn_station_distance_km:
                check.warning(f"Station is {distance:.1f} km from {city_name} city center")

    return result
