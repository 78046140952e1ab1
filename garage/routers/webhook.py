# garage/routers/webhook.py
"""
Vehicle lifecycle webhook.
POST /webhook: receives ENTRY / PARKED / EXIT events from the garage simulator.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from garage.database import get_db
from garage.schemas.vehicle_event import VehicleEventIn, WebhookResult
from garage.services.event_processor import EventProcessor
from garage.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


def get_event_processor(db: Session = Depends(get_db)) -> EventProcessor:
    return EventProcessor.for_session(db)


@router.post("/webhook", response_model=WebhookResult, response_model_exclude_none=True,
             summary="Process vehicle ENTRY / PARKED / EXIT events")
def receive_vehicle_event(payload: VehicleEventIn, processor: EventProcessor = Depends(get_event_processor)):
    """
    Always returns HTTP 200 with {"success": bool}: the simulator treats any
    other status as a delivery failure.
    """
    logger.info(f"Webhook: type={payload.event_type} plate={payload.license_plate}")
    outcome = processor.handle_event(payload)
    return WebhookResult(success=outcome.success, error=outcome.error)
