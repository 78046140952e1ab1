# garage/routers/health.py
"""
System health check endpoint.
Returns status of backend + DB + garage layout provider reachability.
"""

import requests
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from garage.database import get_db
from garage.config import settings
from datetime import datetime

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(db: Session = Depends(get_db)):
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "backend": "ok",
        "database": "unknown",
        "garage_api": "unknown",
    }

    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
    except Exception as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    # Layout provider is only needed at startup, so it never degrades status
    try:
        resp = requests.get(f"{settings.GARAGE_API_URL.rstrip('/')}/garage", timeout=3)
        result["garage_api"] = "ok" if resp.status_code == 200 else f"http_{resp.status_code}"
    except requests.exceptions.ConnectionError:
        result["garage_api"] = "unreachable"
    except Exception as e:
        result["garage_api"] = f"error: {str(e)}"

    return result
