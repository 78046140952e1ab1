# garage/services/lifecycle_events.py
"""
Vehicle lifecycle events: one dataclass per transition, each carrying only the
fields that transition needs.

The webhook delivers a flat payload (VehicleEventIn) whose optional fields depend
on event_type; parse_vehicle_event() validates it and returns the matching variant.
All timestamps are normalised to naive UTC, which is how they are stored.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union

from garage.schemas.vehicle_event import VehicleEventIn
from garage.services.errors import InvalidEventError


@dataclass(frozen=True)
class EntryEvent:
    license_plate: str
    entry_time: datetime

    event_type = "ENTRY"


@dataclass(frozen=True)
class ParkedEvent:
    license_plate: str
    lat: float
    lng: float

    event_type = "PARKED"


@dataclass(frozen=True)
class ExitEvent:
    license_plate: str
    exit_time: datetime

    event_type = "EXIT"


LifecycleEvent = Union[EntryEvent, ParkedEvent, ExitEvent]


def to_utc_naive(value: datetime) -> datetime:
    """Aware → converted to UTC; naive → assumed UTC already."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _require(value, field: str, event_type: str, plate: str):
    if value is None:
        raise InvalidEventError(f"{event_type} event missing {field} for {plate}")
    return value


def parse_vehicle_event(payload: VehicleEventIn) -> LifecycleEvent:
    """
    Build the typed event for a raw webhook payload.
    Raises InvalidEventError for a blank plate, an unknown event_type, or a
    missing field required by that type. event_type is matched case-insensitively.
    """
    plate = (payload.license_plate or "").strip()
    if not plate:
        raise InvalidEventError("license_plate is required")

    event_type = (payload.event_type or "").strip().upper()

    if event_type == "ENTRY":
        entry_time = _require(payload.entry_time, "entry_time", event_type, plate)
        return EntryEvent(license_plate=plate, entry_time=to_utc_naive(entry_time))

    if event_type == "PARKED":
        lat = _require(payload.lat, "lat", event_type, plate)
        lng = _require(payload.lng, "lng", event_type, plate)
        return ParkedEvent(license_plate=plate, lat=lat, lng=lng)

    if event_type == "EXIT":
        exit_time = _require(payload.exit_time, "exit_time", event_type, plate)
        return ExitEvent(license_plate=plate, exit_time=to_utc_naive(exit_time))

    raise InvalidEventError(f"Invalid event_type: {payload.event_type!r}")
