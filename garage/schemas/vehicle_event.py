# garage/schemas/vehicle_event.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class VehicleEventIn(BaseModel):
    """Raw webhook payload. Which optional fields are required depends on event_type."""
    license_plate: str
    event_type: str          # ENTRY | PARKED | EXIT
    entry_time: Optional[datetime] = None
    exit_time: Optional[datetime] = None
    lat: Optional[float] = None
    lng: Optional[float] = None


class WebhookResult(BaseModel):
    success: bool
    error: Optional[str] = None
