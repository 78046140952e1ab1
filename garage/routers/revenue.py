# garage/routers/revenue.py
"""Revenue per sector and day, from completed sessions."""

from datetime import date
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from garage.database import get_db
from garage.schemas.revenue import RevenueOut
from garage.services.revenue_service import revenue_for

router = APIRouter()


@router.get("/revenue", response_model=RevenueOut, summary="Revenue of a sector on a date")
def get_revenue(sector: str, date: str, db: Session = Depends(get_db)):
    """
    sector: exact, case-sensitive sector name (e.g. "A")
    date  : YYYY-MM-DD, interpreted as a UTC calendar day
    Only sessions with a registered exit are counted.
    """
    try:
        day = _parse_date(date)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date format. Use YYYY-MM-DD")
    return RevenueOut(sector=sector, date=day, revenue=revenue_for(db, sector, day))


def _parse_date(value: str) -> date:
    return date.fromisoformat(value.strip())
