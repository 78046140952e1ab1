# garage/repositories/spot_repository.py
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from garage.models.spot import GarageSpot


class SpotRepository:
    def __init__(self, db: Session):
        self._db = db

    def get(self, spot_id: str, for_update: bool = False) -> Optional[GarageSpot]:
        q = self._db.query(GarageSpot).filter(GarageSpot.spot_id == spot_id)
        if for_update:
            q = q.with_for_update()
        return q.first()

    def find_free_near(self, lat: float, lng: float, tolerance: float) -> List[GarageSpot]:
        """
        Unoccupied spots with |Δlat| < tolerance and |Δlng| < tolerance.
        Rows are locked so two PARKED events cannot claim the same spot.
        """
        return (
            self._db.query(GarageSpot)
            .filter(
                GarageSpot.is_occupied == False,  # noqa: E712
                func.abs(GarageSpot.lat - lat) < tolerance,
                func.abs(GarageSpot.lng - lng) < tolerance,
            )
            .order_by(GarageSpot.spot_id)
            .with_for_update()
            .all()
        )

    def count_occupied(self, sector_name: str) -> int:
        return (
            self._db.query(func.count(GarageSpot.id))
            .filter(GarageSpot.sector_name == sector_name, GarageSpot.is_occupied == True)  # noqa: E712
            .scalar()
        ) or 0

    def add(self, spot: GarageSpot) -> None:
        self._db.add(spot)
