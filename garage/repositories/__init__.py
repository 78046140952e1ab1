# Data-access layer for the garage store.
# Repositories share the caller's SQLAlchemy Session and never commit:
# the event processor owns the transaction boundary.

from garage.repositories.sector_repository import SectorRepository    # noqa
from garage.repositories.spot_repository import SpotRepository        # noqa
from garage.repositories.session_repository import SessionRepository  # noqa
