# garage/routers/sectors.py
"""Sector list with live occupancy: verifies the layout bootstrap."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from garage.database import get_db
from garage.repositories import SectorRepository, SpotRepository
from garage.schemas.sector import SectorOut

router = APIRouter()


def _to_out(sector, spots: SpotRepository) -> SectorOut:
    occupied = spots.count_occupied(sector.name)
    return SectorOut(
        name=sector.name,
        base_price=sector.base_price,
        max_capacity=sector.max_capacity,
        occupied_spots=occupied,
        occupancy_percent=round(occupied / sector.max_capacity * 100, 1) if sector.max_capacity else 0,
    )


@router.get("/sectors", response_model=list[SectorOut])
def list_sectors(db: Session = Depends(get_db)):
    spots = SpotRepository(db)
    return [_to_out(s, spots) for s in SectorRepository(db).list_all()]


@router.get("/sectors/{name}", response_model=SectorOut)
def get_sector(name: str, db: Session = Depends(get_db)):
    sector = SectorRepository(db).get(name)
    if not sector:
        raise HTTPException(status_code=404, detail=f"Sector '{name}' not found")
    return _to_out(sector, SpotRepository(db))
