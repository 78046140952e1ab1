"""Tests for the garage layout bootstrap."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
import requests
from unittest.mock import MagicMock, patch
from decimal import Decimal

from conftest import make_layout
from garage.models.sector import GarageSector
from garage.models.spot import GarageSpot
from garage.services.garage_service import fetch_garage_layout, initialize_garage, load_garage_layout

PROVIDER_PAYLOAD = {
    "sectors": [{"name": "A", "base_price": 10.0, "max_capacity": 2}],
    "spots": [
        {"spot_id": "A001", "sector": "A", "lat": -23.561684, "lng": -46.655981},
        {"spot_id": "A002", "sector": "A", "lat": -23.561584, "lng": -46.655981},
    ],
}


def provider_response(payload=PROVIDER_PAYLOAD, status_code=200):
    resp = MagicMock(status_code=status_code)
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    return resp


class TestLoadGarageLayout:
    def test_stores_sectors_and_spots(self, db):
        assert load_garage_layout(db, make_layout()) is True
        assert db.query(GarageSector).count() == 2
        assert db.query(GarageSpot).count() == 13
        sector = db.query(GarageSector).filter(GarageSector.name == "A").one()
        assert sector.base_price == Decimal("10.00")
        assert sector.max_capacity == 10
        assert db.query(GarageSpot).filter(GarageSpot.is_occupied == True).count() == 0  # noqa: E712

    def test_second_load_is_skipped(self, db):
        load_garage_layout(db, make_layout())
        assert load_garage_layout(db, make_layout()) is False
        assert db.query(GarageSpot).count() == 13


class TestFetchGarageLayout:
    def test_parses_provider_payload(self):
        with patch("garage.services.garage_service.requests.get", return_value=provider_response()) as mock_get:
            layout = fetch_garage_layout("http://garage-sim:3000/")

        assert mock_get.call_args[0][0] == "http://garage-sim:3000/garage"
        assert layout.sectors[0].base_price == Decimal("10.0")
        assert [s.spot_id for s in layout.spots] == ["A001", "A002"]

    def test_http_error_raised(self):
        with patch("garage.services.garage_service.requests.get", return_value=provider_response(status_code=503)):
            with pytest.raises(requests.exceptions.HTTPError):
                fetch_garage_layout("http://garage-sim:3000")


class TestInitializeGarage:
    def test_fetches_and_loads(self, db):
        with patch("garage.services.garage_service.requests.get", return_value=provider_response()):
            assert initialize_garage(db) is True
        assert db.query(GarageSpot).count() == 2

    def test_skips_fetch_when_initialized(self, db):
        load_garage_layout(db, make_layout())
        with patch("garage.services.garage_service.requests.get") as mock_get:
            assert initialize_garage(db) is False
            mock_get.assert_not_called()

    def test_provider_unreachable_is_fatal(self, db):
        with patch("garage.services.garage_service.requests.get",
                   side_effect=requests.exceptions.ConnectionError("refused")):
            with pytest.raises(requests.exceptions.ConnectionError):
                initialize_garage(db)
        assert db.query(GarageSector).count() == 0
