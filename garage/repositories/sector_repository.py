# garage/repositories/sector_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session

from garage.models.sector import GarageSector


class SectorRepository:
    """Sector lookups. Sectors are read-only once the layout is loaded."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, name: str, for_update: bool = False) -> Optional[GarageSector]:
        q = self._db.query(GarageSector).filter(GarageSector.name == name)
        if for_update:
            # held until commit: capacity checks on this sector run one at a time
            q = q.with_for_update()
        return q.first()

    def list_all(self) -> List[GarageSector]:
        return self._db.query(GarageSector).order_by(GarageSector.name).all()

    def exists_any(self) -> bool:
        return self._db.query(GarageSector.id).first() is not None

    def add(self, sector: GarageSector) -> None:
        self._db.add(sector)
