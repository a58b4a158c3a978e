import datetime as dt
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import (
    apply_street_code_scope,
    enable_sqlite_foreign_keys,
    get_db,
)
from app.domain.unit_of_work import UnitOfWork
from app.main import app
from app.models.city_model import City
from app.models.district_model import District
from app.models.street_model import Street
from app.services.location_service import LocationService


# In-memory SQLite shared by every thread of the test client
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
)


class TickingClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: dt.datetime | None = None):
        self.current = start or dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc)

    def __call__(self) -> dt.datetime:
        self.current += dt.timedelta(seconds=1)
        return self.current


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    apply_street_code_scope(engine, "global")
    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory(db_session: Session) -> sessionmaker:
    """Opens further sessions on the test database, one per simulated request."""
    return TestingSessionLocal


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def service(db_session: Session, clock: TickingClock) -> LocationService:
    return LocationService(UnitOfWork(db_session), clock=clock)


@pytest.fixture
def district_scoped_service(
    db_session: Session, clock: TickingClock
) -> LocationService:
    apply_street_code_scope(engine, "district")
    return LocationService(
        UnitOfWork(db_session), clock=clock, street_code_scope="district"
    )


@pytest.fixture
def sample_city(db_session: Session) -> City:
    """Create a sample city for testing."""
    city = City(city_name="Metropolis", city_code="MET")
    db_session.add(city)
    db_session.commit()
    db_session.refresh(city)
    return city


@pytest.fixture
def sample_district(db_session: Session, sample_city: City) -> District:
    """Create a sample district for testing."""
    district = District(
        district_name="Downtown",
        district_code="DT",
        city_id=sample_city.city_id,
    )
    db_session.add(district)
    db_session.commit()
    db_session.refresh(district)
    return district


@pytest.fixture
def sample_street(db_session: Session, sample_district: District) -> Street:
    """Create a sample street for testing."""
    street = Street(
        street_name="Main Street",
        street_code="MAIN",
        district_id=sample_district.district_id,
    )
    db_session.add(street)
    db_session.commit()
    db_session.refresh(street)
    return street
