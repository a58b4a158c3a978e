import unittest

from pydantic import ValidationError

from app.schemas.geo_schema import CitySchema, DistrictSchema, StreetSchema


class TestGeoSchemas(unittest.TestCase):
    def test_camel_case_input(self):
        payload = CitySchema.Create.model_validate(
            {"cityName": "Metropolis", "cityCode": "MET"}
        )
        self.assertEqual(payload.city_name, "Metropolis")
        self.assertEqual(payload.city_code, "MET")

    def test_names_are_normalized(self):
        payload = DistrictSchema.Create(
            district_name="  Old \t Town ", district_code=" OT ", city_code="MET"
        )
        self.assertEqual(payload.district_name, "Old Town")
        self.assertEqual(payload.district_code, "OT")

    def test_blank_and_oversized_values_rejected(self):
        with self.assertRaises(ValidationError):
            CitySchema.Create(city_name="   ", city_code="MET")
        with self.assertRaises(ValidationError):
            CitySchema.Create(city_name="Metropolis", city_code="X" * 21)

    def test_update_has_no_parent_fields(self):
        self.assertNotIn("city_code", StreetSchema.Update.model_fields)
        self.assertNotIn("district_code", StreetSchema.Update.model_fields)
        self.assertNotIn("city_code", DistrictSchema.Update.model_fields)

    def test_out_serializes_camel_case(self):
        out = StreetSchema.Out(
            street_id=1,
            street_name="Main Street",
            street_code="MAIN",
            district_code="DT",
            city_code="MET",
            created_at="2024-01-01T00:00:00Z",
            updated_at="2024-01-01T00:00:00Z",
        )
        dumped = out.model_dump(by_alias=True)
        self.assertEqual(dumped["streetCode"], "MAIN")
        self.assertEqual(dumped["districtCode"], "DT")
