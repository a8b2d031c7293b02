from sqlalchemy.orm import Session
from fastapi import Depends, Query

from ..services.feedback import FeedbackService
from ..models.database import get_db
from ..schemas.feedback import FilterOptions, MAX_PAGE
from ..config.settings import settings

def get_feedback_service(db: Session = Depends(get_db)) -> FeedbackService:
    return FeedbackService(db)

def get_filter_options(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1),
) -> FilterOptions:
    # Oversized pages are clamped, not rejected.
    return FilterOptions(page=page, limit=min(limit, settings.MAX_PAGE_LIMIT))
