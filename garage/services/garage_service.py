# garage/services/garage_service.py
"""
Garage layout bootstrap.
Fetches sectors + spots from the layout provider (GET {GARAGE_API_URL}/garage)
once at startup and stores them. Skipped if sectors are already in the DB.
A failed fetch is re-raised: the backend must not start without a layout.
"""

import requests
from sqlalchemy.orm import Session

from garage.config import settings
from garage.models.sector import GarageSector
from garage.models.spot import GarageSpot
from garage.repositories import SectorRepository, SpotRepository
from garage.schemas.garage_layout import GarageLayout
from garage.utils.logger import get_logger

logger = get_logger(__name__)


def fetch_garage_layout(base_url: str = None, timeout: int = None) -> GarageLayout:
    url = f"{(base_url or settings.GARAGE_API_URL).rstrip('/')}/garage"
    logger.info(f"Fetching garage configuration from {url}")
    resp = requests.get(url, timeout=timeout or settings.GARAGE_API_TIMEOUT_SECONDS)
    resp.raise_for_status()
    return GarageLayout.model_validate(resp.json())


def load_garage_layout(db: Session, layout: GarageLayout) -> bool:
    """Store the layout. Returns False (and writes nothing) if already initialised."""
    sectors = SectorRepository(db)
    spots = SpotRepository(db)

    if sectors.exists_any():
        logger.info("Garage already initialized, skipping")
        return False

    known = {s.name for s in layout.sectors}
    for sector in layout.sectors:
        sectors.add(GarageSector(
            name=sector.name,
            base_price=sector.base_price,
            max_capacity=sector.max_capacity,
        ))
    for spot in layout.spots:
        if spot.sector not in known:
            logger.warning(f"Spot {spot.spot_id} references unknown sector {spot.sector}")
        spots.add(GarageSpot(
            spot_id=spot.spot_id,
            sector_name=spot.sector,
            lat=spot.lat,
            lng=spot.lng,
            is_occupied=False,
        ))
    db.commit()

    logger.info(f"Garage initialized with {len(layout.sectors)} sectors and {len(layout.spots)} spots")
    return True


def initialize_garage(db: Session) -> bool:
    try:
        if SectorRepository(db).exists_any():
            logger.info("Garage already initialized, skipping")
            return False
        return load_garage_layout(db, fetch_garage_layout())
    except Exception as e:
        db.rollback()
        logger.error(f"Error initializing garage: {e}", exc_info=True)
        raise
