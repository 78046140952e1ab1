# garage/services/event_processor.py
"""
Vehicle lifecycle state machine: ENTRY → PARKED → EXIT.

  ENTRY : opens a session (rejects a plate that already has an active one)
  PARKED: matches a free spot by GPS, prices it from sector occupancy, occupies it
  EXIT  : closes the session, charges the fee, frees the spot

apply() raises typed ParkingError / SQLAlchemy errors. process_event() and
handle_event() are the webhook boundary: they never raise, roll back on any
failure and report the outcome.
Every transition commits once, so spot and session changes land together.
"""

import math
from typing import NamedTuple, Optional, Union

from sqlalchemy.orm import Session

from garage.config import settings
from garage.models.parking_session import ParkingSession
from garage.repositories import SectorRepository, SessionRepository, SpotRepository
from garage.schemas.vehicle_event import VehicleEventIn
from garage.services import pricing
from garage.services.errors import (
    DuplicateEntryError,
    EventRejectedError,
    InvalidEventError,
    NoActiveSessionError,
    NoSpotAvailableError,
    SectorFullError,
    SectorNotFoundError,
    SessionAlreadyParkedError,
)
from garage.services.lifecycle_events import (
    EntryEvent,
    ExitEvent,
    LifecycleEvent,
    ParkedEvent,
    parse_vehicle_event,
)
from garage.utils.logger import event_logger, get_logger

logger = get_logger(__name__)


class EventOutcome(NamedTuple):
    success: bool
    error: Optional[str] = None   # set only for payloads that fail validation


class EventProcessor:
    def __init__(self, db, sectors, spots, sessions, gps_tolerance: float = None, grace_minutes: int = None):
        # db only needs commit() / rollback(); repositories do the queries
        self._db = db
        self._sectors = sectors
        self._spots = spots
        self._sessions = sessions
        self._gps_tolerance = settings.GPS_TOLERANCE if gps_tolerance is None else gps_tolerance
        self._grace_minutes = settings.GRACE_PERIOD_MINUTES if grace_minutes is None else grace_minutes

    @classmethod
    def for_session(cls, db: Session, **kwargs) -> "EventProcessor":
        """Processor wired to SQLAlchemy repositories sharing one DB session."""
        return cls(db, SectorRepository(db), SpotRepository(db), SessionRepository(db), **kwargs)

    # ── Boundary ──────────────────────────────────────────────────────────
    def process_event(self, event: Union[LifecycleEvent, VehicleEventIn]) -> bool:
        """
        Apply one event. Always returns True/False: never raises, because the
        event producer must get a definite answer for every event it sends.
        """
        return self.handle_event(event).success

    def handle_event(self, event: Union[LifecycleEvent, VehicleEventIn]) -> EventOutcome:
        """
        Same contract as process_event(), but also returns the validation message
        for a payload that could not be turned into a lifecycle event. Raw
        payloads are parsed here and nowhere else.
        """
        log = event_logger(logger, getattr(event, "event_type", None), getattr(event, "license_plate", None))
        try:
            if isinstance(event, VehicleEventIn):
                event = parse_vehicle_event(event)
            self.apply(event)
            return EventOutcome(success=True)
        except InvalidEventError as e:
            log.warning(f"Invalid event: {e}")
            return EventOutcome(success=False, error=str(e))
        except EventRejectedError as e:
            self._rollback()
            log.warning(f"Rejected: {e}")
        except Exception as e:
            self._rollback()
            log.error(f"Error processing event: {e}", exc_info=True)
        return EventOutcome(success=False)

    def _rollback(self):
        try:
            self._db.rollback()
        except Exception as e:
            logger.error(f"Rollback failed: {e}", exc_info=True)

    # ── Transitions ───────────────────────────────────────────────────────
    def apply(self, event: LifecycleEvent) -> ParkingSession:
        if isinstance(event, EntryEvent):
            return self._handle_entry(event)
        if isinstance(event, ParkedEvent):
            return self._handle_parked(event)
        if isinstance(event, ExitEvent):
            return self._handle_exit(event)
        raise InvalidEventError(f"Unsupported event: {type(event).__name__}")

    def _handle_entry(self, event: EntryEvent) -> ParkingSession:
        plate = event.license_plate
        if self._sessions.get_active(plate, for_update=True) is not None:
            raise DuplicateEntryError(f"Vehicle {plate} already has an active session")

        session = ParkingSession(
            license_plate=plate,
            entry_time=event.entry_time,
            applied_base_price=pricing.ZERO,   # priced on PARKED, once the sector is known
        )
        self._sessions.add(session)
        self._db.commit()

        event_logger(logger, "ENTRY", plate).info(f"Session opened at {event.entry_time.isoformat()}")
        return session

    def _handle_parked(self, event: ParkedEvent) -> ParkingSession:
        plate = event.license_plate
        session = self._sessions.get_active(plate, for_update=True)
        if session is None:
            raise NoActiveSessionError(f"No active session for {plate} on PARKED")
        if session.spot_id:
            raise SessionAlreadyParkedError(f"Vehicle {plate} already parked at spot {session.spot_id}")

        spot = self._match_spot(event.lat, event.lng)
        if spot is None:
            raise NoSpotAvailableError(f"No free spot near ({event.lat}, {event.lng})")

        sector = self._sectors.get(spot.sector_name, for_update=True)
        if sector is None:
            event_logger(logger, "PARKED", plate).error(f"Spot {spot.spot_id} references unknown sector {spot.sector_name}")
            raise SectorNotFoundError(f"Sector {spot.sector_name} not found")

        # Occupancy BEFORE this car takes the spot; the sector row lock above
        # serialises concurrent PARKED events on the same sector
        occupied = self._spots.count_occupied(sector.name)
        if occupied >= sector.max_capacity:
            raise SectorFullError(f"Sector {sector.name} is at full capacity ({occupied}/{sector.max_capacity})")

        rate = pricing.occupancy_rate(occupied, sector.max_capacity)
        applied_price = pricing.dynamic_price(sector.base_price, rate)

        session.sector_name = sector.name
        session.spot_id = spot.spot_id
        session.lat = event.lat
        session.lng = event.lng
        session.applied_base_price = applied_price
        spot.is_occupied = True
        self._db.commit()

        event_logger(logger, "PARKED", plate).info(
            f"spot={spot.spot_id} sector={sector.name} "
            f"occupancy={rate:.0%} price={applied_price}"
        )
        return session

    def _match_spot(self, lat: float, lng: float):
        """Nearest free spot inside the tolerance box; spot_id breaks distance ties."""
        candidates = self._spots.find_free_near(lat, lng, self._gps_tolerance)
        if not candidates:
            return None
        return min(candidates, key=lambda s: (math.hypot(s.lat - lat, s.lng - lng), s.spot_id))

    def _handle_exit(self, event: ExitEvent) -> ParkingSession:
        plate = event.license_plate
        session = self._sessions.get_active(plate, for_update=True)
        if session is None:
            raise NoActiveSessionError(f"No active session for {plate} on EXIT")

        duration = event.exit_time - session.entry_time
        fee = pricing.parking_fee(duration, session.applied_base_price, self._grace_minutes)

        session.exit_time = event.exit_time
        session.final_price = fee

        if session.spot_id:
            spot = self._spots.get(session.spot_id, for_update=True)
            if spot is not None:
                spot.is_occupied = False
            else:
                event_logger(logger, "EXIT", plate).warning(f"Spot {session.spot_id} no longer exists")
        self._db.commit()

        event_logger(logger, "EXIT", plate).info(f"Parked for {int(duration.total_seconds() // 60)} min, fee={fee}")
        return session
