# garage/services/revenue_service.py
"""
Revenue per sector per UTC calendar day, over completed sessions only.
Read-only. DB errors propagate to the caller: there is no zero fallback for them.
"""

from datetime import date, datetime, time
from decimal import Decimal

from sqlalchemy.orm import Session

from garage.repositories import SessionRepository
from garage.services.pricing import CENTS
from garage.utils.logger import get_logger

logger = get_logger(__name__)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Inclusive [00:00:00, 23:59:59.999999] of a UTC day, as naive datetimes."""
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def calculate_revenue(sessions: SessionRepository, sector: str, day: date) -> Decimal:
    start, end = day_bounds(day)
    revenue = sessions.sum_final_price(sector, start, end).quantize(CENTS)
    logger.info(f"[REVENUE] Sector={sector} date={day.isoformat()} revenue={revenue}")
    return revenue


def revenue_for(db: Session, sector: str, day: date) -> Decimal:
    return calculate_revenue(SessionRepository(db), sector, day)
