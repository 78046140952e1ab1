# garage/schemas/revenue.py
import datetime
from decimal import Decimal
from pydantic import BaseModel


class RevenueOut(BaseModel):
    sector: str
    date: datetime.date
    revenue: Decimal
