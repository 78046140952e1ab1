# Garage Parking: Database Models
# Import all models here for SQLAlchemy discovery

from garage.models.sector import GarageSector             # noqa
from garage.models.spot import GarageSpot                 # noqa
from garage.models.parking_session import ParkingSession  # noqa
