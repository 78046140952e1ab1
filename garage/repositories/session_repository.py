# garage/repositories/session_repository.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from garage.models.parking_session import ParkingSession


class SessionRepository:
    def __init__(self, db: Session):
        self._db = db

    def get_active(self, license_plate: str, for_update: bool = False) -> Optional[ParkingSession]:
        """The session for this plate with no exit yet, if any."""
        q = self._db.query(ParkingSession).filter(
            ParkingSession.license_plate == license_plate,
            ParkingSession.exit_time == None,  # noqa: E711
        )
        if for_update:
            q = q.with_for_update()
        return q.first()

    def add(self, session: ParkingSession) -> None:
        self._db.add(session)
        # Flush so the active-plate unique index is checked inside this transaction
        self._db.flush()

    def sum_final_price(self, sector_name: str, start: datetime, end: datetime) -> Decimal:
        """Sum of final_price for sessions of a sector that exited within [start, end]."""
        total = (
            self._db.query(func.coalesce(func.sum(ParkingSession.final_price), 0))
            .filter(
                ParkingSession.sector_name == sector_name,
                ParkingSession.exit_time != None,  # noqa: E711
                ParkingSession.final_price != None,  # noqa: E711
                ParkingSession.exit_time >= start,
                ParkingSession.exit_time <= end,
            )
            .scalar()
        )
        return Decimal(str(total or 0))
