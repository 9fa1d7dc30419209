from fastapi import APIRouter, Header, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cvaudit.core.config import settings
from cvaudit.core.rate_limit import rate_limit
from cvaudit.core.security import check_api_key
from cvaudit.rules import UnknownCountryError
from cvaudit.schemas.audit import Audit, FieldHighlight, QuickCheckResult
from cvaudit.schemas.profile import CVProfile
from cvaudit.services.audit_service import AuditEngine, get_default_engine
from cvaudit.services.coach_report import generate_coach_report
from cvaudit.services.highlights import build_field_highlights

router = APIRouter()


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuditRequest(_ApiModel):
    profile: CVProfile
    target_country: str = Field(default_factory=lambda: settings.default_country)
    user_name: str | None = None
    include_report: bool = False


class AuditResponse(Audit):
    report: str | None = None
    highlights: dict[str, FieldHighlight] | None = None


class QuickCheckRequest(_ApiModel):
    profile: CVProfile
    country: str = Field(default_factory=lambda: settings.default_country)


class CountrySummary(_ApiModel):
    code: str
    name: str
    zone: str
    photo_allowed: bool
    photo_required: bool
    paper_size: str
    max_pages: int


def _engine(request: Request) -> AuditEngine:
    engine = getattr(request.app.state, "engine", None)
    return engine or get_default_engine()


def _unknown_country(exc: UnknownCountryError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(exc))


@router.get("/countries", response_model=list[CountrySummary], response_model_by_alias=True)
async def list_countries(request: Request):
    table = _engine(request).country_table
    return [
        CountrySummary(
            code=rule.code,
            name=rule.name,
            zone=rule.zone,
            photo_allowed=rule.photo.allowed,
            photo_required=rule.photo.required,
            paper_size=rule.format.paper_size,
            max_pages=rule.format.max_pages,
        )
        for rule in table.all()
    ]


@router.post("/audit", response_model=AuditResponse, response_model_by_alias=True)
@rate_limit()
async def audit_profile(
    request: Request,
    payload: AuditRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    engine = _engine(request)
    try:
        audit = engine.analyze(payload.profile, payload.target_country)
    except UnknownCountryError as exc:
        raise _unknown_country(exc) from exc

    extras: dict = {}
    if payload.include_report:
        extras["report"] = generate_coach_report(
            audit,
            payload.user_name or payload.profile.personal.first_name or "there",
            country_table=engine.country_table,
        )
        extras["highlights"] = build_field_highlights(audit)
    return AuditResponse(**audit.model_dump(), **extras)


@router.post("/audit/quick-check", response_model=QuickCheckResult, response_model_by_alias=True)
@rate_limit(settings.quick_check_rate_limit)
async def quick_check_profile(
    request: Request,
    payload: QuickCheckRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    try:
        return _engine(request).quick_check(payload.profile, payload.country)
    except UnknownCountryError as exc:
        raise _unknown_country(exc) from exc
