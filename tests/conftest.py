"""Shared fixtures: an in-memory SQLite garage with two sectors."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from garage.database import Base, create_tables
from garage.schemas.garage_layout import GarageLayout
from garage.services.garage_service import load_garage_layout

BASE_LAT = -23.561684
BASE_LNG = -46.655981

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def spot_coords(sector: str, index: int):
    """Spots sit 0.001° apart: ten times the GPS tolerance."""
    sector_offset = (ord(sector) - ord("A")) * 0.01
    return (round(BASE_LAT + sector_offset + index * 0.001, 6), BASE_LNG)


def make_layout():
    """Sector A: 10.00, 10 spots, capacity 10. Sector B: 12.00, 3 spots, capacity 2."""
    spots = []
    for sector, count in (("A", 10), ("B", 3)):
        for i in range(1, count + 1):
            lat, lng = spot_coords(sector, i)
            spots.append({"spot_id": f"{sector}{i:03d}", "sector": sector, "lat": lat, "lng": lng})
    return GarageLayout.model_validate({
        "sectors": [
            {"name": "A", "base_price": Decimal("10.00"), "max_capacity": 10},
            {"name": "B", "base_price": Decimal("12.00"), "max_capacity": 2},
        ],
        "spots": spots,
    })


@pytest.fixture
def db():
    create_tables(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def garage_db(db):
    load_garage_layout(db, make_layout())
    return db
