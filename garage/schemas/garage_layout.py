# garage/schemas/garage_layout.py
from pydantic import BaseModel
from decimal import Decimal


class SectorIn(BaseModel):
    name: str
    base_price: Decimal
    max_capacity: int


class SpotIn(BaseModel):
    spot_id: str
    sector: str
    lat: float
    lng: float


class GarageLayout(BaseModel):
    """Payload of GET {GARAGE_API_URL}/garage."""
    sectors: list[SectorIn] = []
    spots: list[SpotIn] = []
