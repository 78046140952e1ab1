# garage/models/spot.py
"""
Physical parking spots table.
One row per space, created at startup. is_occupied is the only mutable column,
toggled on PARKED (True) and EXIT (False).
"""

from sqlalchemy import Boolean, Column, Float, Integer, String
from garage.database import Base


class GarageSpot(Base):
    __tablename__ = "garage_spots"

    id = Column(Integer, primary_key=True, autoincrement=True)
    spot_id = Column(String(50), unique=True, nullable=False, index=True)
    sector_name = Column(String(50), nullable=False, index=True)  # garage_sectors.name
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)
    is_occupied = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<GarageSpot {self.spot_id} sector={self.sector_name} occupied={self.is_occupied}>"
