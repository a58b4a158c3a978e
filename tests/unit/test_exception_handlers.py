import json
import unittest

from app.api.v1.exception_handlers import DomainExceptionHandler
from app.domain.exceptions import (
    CityNotFound,
    DistrictNotFound,
    DuplicateGeoEntity,
    GeoException,
    StreetNotFound,
)


class TestDomainExceptionHandler(unittest.TestCase):
    def test_not_found_maps_to_404(self):
        for exc in (
            CityNotFound("MET"),
            DistrictNotFound("DT", "MET"),
            StreetNotFound("MAIN", "DT", "MET"),
        ):
            self.assertEqual(DomainExceptionHandler.status_for(exc), 404)

    def test_conflict_maps_to_409(self):
        exc = DuplicateGeoEntity("City", "code", "MET")
        self.assertEqual(DomainExceptionHandler.status_for(exc), 409)

    def test_base_type_fallback(self):
        exc = GeoException("something odd", "GEO_ERROR")
        self.assertEqual(DomainExceptionHandler.status_for(exc), 400)

    def test_response_body(self):
        response = DomainExceptionHandler.handle_domain_exception(
            DuplicateGeoEntity("District", "name", "Downtown", "city MET")
        )
        body = json.loads(response.body)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(body["error_code"], "DUPLICATE_GEO_ENTITY")
        self.assertEqual(body["type"], "DuplicateGeoEntity")
        self.assertIn("Downtown", body["detail"])
        self.assertIn("city MET", body["detail"])
