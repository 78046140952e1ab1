# garage/models/sector.py
"""
Garage sectors table.
Loaded once from the garage layout provider at startup; never modified afterwards.
Capacity is enforced per sector by the event processor on PARKED.
"""

from sqlalchemy import Column, Integer, String, Numeric
from garage.database import Base


class GarageSector(Base):
    __tablename__ = "garage_sectors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), unique=True, nullable=False, index=True)  # case-sensitive
    base_price = Column(Numeric(10, 2), nullable=False)
    max_capacity = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<GarageSector {self.name} price={self.base_price} cap={self.max_capacity}>"
