from fastapi import APIRouter, Request

from cvaudit.core.config import settings
from cvaudit.services.audit_service import get_default_engine

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report service status and the loaded audit rules.")
async def health_check(request: Request):
    engine = getattr(request.app.state, "engine", None) or get_default_engine()
    return {
        "status": "healthy",
        "countries": len(engine.country_table.codes()),
        "detectors": len(engine.detectors),
        "defaultCountry": settings.default_country,
    }
