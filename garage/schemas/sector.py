# garage/schemas/sector.py
from pydantic import BaseModel
from decimal import Decimal


class SectorOut(BaseModel):
    name: str
    base_price: Decimal
    max_capacity: int
    occupied_spots: int
    occupancy_percent: float

    class Config:
        from_attributes = True
