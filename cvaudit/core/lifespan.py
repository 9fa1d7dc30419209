from contextlib import asynccontextmanager
import logging

from cvaudit.core.config import settings
from cvaudit.services.audit_service import build_default_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    engine = build_default_engine(log_issue_ids=settings.audit_log_issues)
    app.state.engine = engine
    logger.info(
        "audit_engine_ready countries=%s detectors=%s",
        len(engine.country_table.codes()),
        len(engine.detectors),
    )
    yield
