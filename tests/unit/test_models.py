import datetime as dt
import unittest

from sqlalchemy import UniqueConstraint

from app.db.types import UTCDateTime
from app.models.city_model import City
from app.models.district_model import District
from app.models.street_model import Street


class TestCityModel(unittest.TestCase):
    def test_city_fields(self):
        city = City(city_name="Metropolis", city_code="MET")
        self.assertEqual(city.city_name, "Metropolis")
        self.assertEqual(city.city_code, "MET")
        self.assertEqual(city.districts, [])

    def test_city_constraints(self):
        columns = City.__table__.c
        self.assertTrue(columns.city_name.unique)
        self.assertTrue(columns.city_code.unique)
        self.assertFalse(columns.city_code.nullable)


class TestDistrictModel(unittest.TestCase):
    def test_city_code_follows_parent(self):
        city = City(city_name="Metropolis", city_code="MET")
        district = District(district_name="Downtown", district_code="DT", city=city)
        self.assertEqual(district.city_code, "MET")
        self.assertIn(district, city.districts)

    def test_scoped_unique_constraints(self):
        constraints = {
            tuple(c.name for c in uc.columns)
            for uc in District.__table__.constraints
            if isinstance(uc, UniqueConstraint)
        }
        self.assertIn(("district_name", "city_id"), constraints)
        self.assertIn(("district_code", "city_id"), constraints)


class TestStreetModel(unittest.TestCase):
    def test_parent_codes(self):
        city = City(city_name="Metropolis", city_code="MET")
        district = District(district_name="Downtown", district_code="DT", city=city)
        street = Street(street_name="Main Street", street_code="MAIN", district=district)
        self.assertEqual(street.district_code, "DT")
        self.assertEqual(street.city_code, "MET")

    def test_cascade_foreign_key(self):
        fk = next(iter(Street.__table__.c.district_id.foreign_keys))
        self.assertEqual(fk.ondelete, "CASCADE")


class TestUTCDateTime(unittest.TestCase):
    def setUp(self):
        self.column_type = UTCDateTime()

    def test_offsets_are_converted_to_utc(self):
        local = dt.datetime(2024, 1, 1, 12, tzinfo=dt.timezone(dt.timedelta(hours=2)))
        stored = self.column_type.process_bind_param(local, None)
        self.assertEqual(stored, dt.datetime(2024, 1, 1, 10, tzinfo=dt.timezone.utc))
        self.assertEqual(stored.utcoffset(), dt.timedelta(0))

    def test_naive_values_load_as_utc(self):
        loaded = self.column_type.process_result_value(dt.datetime(2024, 1, 1), None)
        self.assertEqual(loaded.tzinfo, dt.timezone.utc)

    def test_timestamp_columns_use_utc_type(self):
        for model in (City, District, Street):
            self.assertIsInstance(model.__table__.c.created_at.type, UTCDateTime)
            self.assertIsInstance(model.__table__.c.updated_at.type, UTCDateTime)
