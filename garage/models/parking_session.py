# garage/models/parking_session.py
"""
Parking sessions table: one row per vehicle stay, ENTRY to EXIT.
Rows are never deleted; completed rows (exit_time set) feed the revenue query.
The partial unique index keeps at most one active (exit_time NULL) row per plate.
"""

from sqlalchemy import Column, DateTime, Float, Index, Integer, Numeric, String, text
from garage.database import Base


class ParkingSession(Base):
    __tablename__ = "parking_sessions"
    __table_args__ = (
        Index(
            "ux_parking_sessions_active_plate",
            "license_plate",
            unique=True,
            sqlite_where=text("exit_time IS NULL"),
            postgresql_where=text("exit_time IS NULL"),
        ),
        Index("ix_parking_sessions_sector_exit", "sector_name", "exit_time"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    license_plate = Column(String(50), nullable=False, index=True)
    entry_time = Column(DateTime, nullable=False)             # naive UTC
    exit_time = Column(DateTime)                              # set on EXIT
    sector_name = Column(String(50))                          # set on PARKED
    spot_id = Column(String(50))                              # set on PARKED
    lat = Column(Float)
    lng = Column(Float)
    applied_base_price = Column(Numeric(10, 2), default=0, nullable=False)
    final_price = Column(Numeric(10, 2))                      # set on EXIT

    @property
    def is_active(self) -> bool:
        return self.exit_time is None

    def __repr__(self):
        return f"<ParkingSession {self.id} plate={self.license_plate} active={self.is_active}>"
