# garage/services/errors.py
"""
Typed failures raised by the event processor.
The webhook boundary (EventProcessor.process_event) turns every one of them
into success=False; nothing here ever reaches the HTTP client as a 500.
"""


class ParkingError(Exception):
    """Base class for all parking-core errors."""
    pass


class InvalidEventError(ParkingError):
    """Unknown event type or a required field missing. Raised before any DB access."""
    pass


class EventRejectedError(ParkingError):
    """A well-formed event that conflicts with current garage state."""
    pass


class DuplicateEntryError(EventRejectedError):
    pass


class NoActiveSessionError(EventRejectedError):
    pass


class NoSpotAvailableError(EventRejectedError):
    """No unoccupied spot lies within GPS tolerance of the reported position."""
    pass


class SectorNotFoundError(EventRejectedError):
    pass


class SectorFullError(EventRejectedError):
    pass


class SessionAlreadyParkedError(EventRejectedError):
    """The active session already holds a spot; its applied price is fixed."""
    pass
