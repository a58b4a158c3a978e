# Import order is important to avoid circular dependencies
from app.models.city_model import City
from app.models.district_model import District
from app.models.street_model import Street

__all__ = [
    "City",
    "District",
    "Street",
]
