import re
from datetime import datetime
from typing import Annotated, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel


def normalize_name(name):
    return re.sub(r"\s+", " ", name.strip()) if isinstance(name, str) else name


def normalize_code(code):
    return code.strip() if isinstance(code, str) else code


GeoName = Annotated[
    str,
    StringConstraints(min_length=1, max_length=100),
    BeforeValidator(normalize_name),
]
GeoCode = Annotated[
    str,
    StringConstraints(min_length=1, max_length=20),
    BeforeValidator(normalize_code),
]


class GeoModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class StreetSchema:
    class Create(GeoModel):
        street_name: GeoName
        street_code: GeoCode
        district_code: GeoCode
        city_code: GeoCode

    class Update(GeoModel):
        street_name: GeoName
        street_code: GeoCode

    class Out(GeoModel):
        street_id: int
        street_name: str
        street_code: str
        district_code: str
        city_code: str
        created_at: datetime
        updated_at: datetime


class DistrictSchema:
    class Create(GeoModel):
        district_name: GeoName
        district_code: GeoCode
        city_code: GeoCode

    class Update(GeoModel):
        district_name: GeoName
        district_code: GeoCode

    class Out(GeoModel):
        district_id: int
        district_code: str
        district_name: str
        city_code: str
        created_at: datetime
        updated_at: datetime
        streets: List[StreetSchema.Out] = []


class CitySchema:
    class Create(GeoModel):
        city_name: GeoName
        city_code: GeoCode

    # Updates replace both fields
    Update = Create

    class Out(GeoModel):
        city_id: int
        city_name: str
        city_code: str
        created_at: datetime
        updated_at: datetime
        districts: List[DistrictSchema.Out] = []
