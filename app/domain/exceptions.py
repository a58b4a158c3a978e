"""Domain exceptions that represent business rule violations."""

from typing import Optional


class DomainException(Exception):
    """Base exception for all domain-related errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


# Geo Domain Exceptions
class GeoException(DomainException):
    """Base exception for geographical data errors."""


class CityNotFound(GeoException):
    """City not found in the system."""

    def __init__(self, city_code: str):
        super().__init__(
            f"City not found with code: {city_code}", "CITY_NOT_FOUND"
        )


class DistrictNotFound(GeoException):
    """District not found within the given city."""

    def __init__(self, district_code: str, city_code: str):
        super().__init__(
            f"District not found with code: {district_code} in city: {city_code}",
            "DISTRICT_NOT_FOUND",
        )


class StreetNotFound(GeoException):
    """Street not found within the given district."""

    def __init__(self, street_code: str, district_code: str, city_code: str):
        super().__init__(
            f"Street not found with code: {street_code} in district: "
            f"{district_code} of city: {city_code}",
            "STREET_NOT_FOUND",
        )


class DuplicateGeoEntity(GeoException):
    """Duplicate geographical entity."""

    def __init__(
        self,
        entity_type: str,
        field: str,
        value: str,
        scope: Optional[str] = None,
    ):
        message = f"{entity_type} with this {field} already exists: {value}"
        if scope:
            message = f"{message} in {scope}"
        super().__init__(message, "DUPLICATE_GEO_ENTITY")
        self.entity_type = entity_type
        self.field = field
        self.value = value

