import logging
from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, status, Response
from fastapi.responses import JSONResponse

from ..schemas.feedback import (
    ErrorResponse,
    FeedbackCreate,
    FeedbackData,
    FeedbackDataResponse,
    FeedbackListResponse,
    FeedbackResponse,
    FeedbackSingleResponse,
    FeedbackUpdate,
    FilterOptions,
    HealthCheckResponse,
)
from ..services.feedback import FeedbackService
from ..services.exceptions import FeedbackError, FeedbackNotFoundError, FeedbackStoreError
from .dependencies import get_feedback_service, get_filter_options
from ..config.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter()


def error_response(status_code: int, exc: FeedbackError) -> JSONResponse:
    body = ErrorResponse(status=exc.STATUS, message=exc.message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.get("/healthchecker", response_model=HealthCheckResponse)
def health_checker():
    return HealthCheckResponse(
        message=settings.HEALTH_MESSAGE,
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/feedbacks",
    response_model=FeedbackListResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_feedbacks(
    opts: FilterOptions = Depends(get_filter_options),
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    List feedback ordered by id, one page at a time.
    """
    try:
        feedbacks = service.list_feedbacks(limit=opts.limit, offset=opts.offset)
    except FeedbackStoreError as exc:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)

    return FeedbackListResponse(
        results=len(feedbacks),
        feedbacks=[FeedbackResponse.model_validate(f) for f in feedbacks],
    )


@router.post(
    "/feedbacks/",
    response_model=FeedbackDataResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_feedback(
    feedback_data: FeedbackCreate,
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Create a new feedback record.
    """
    try:
        feedback = service.create_feedback(feedback_data=feedback_data)
    except FeedbackStoreError as exc:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)
    except FeedbackError as exc:
        return error_response(status.HTTP_400_BAD_REQUEST, exc)

    logger.info("Created feedback %s", feedback.id)
    return FeedbackDataResponse(
        data=FeedbackData(feedback=FeedbackResponse.model_validate(feedback))
    )


@router.get(
    "/feedbacks/{feedback_id}",
    response_model=FeedbackSingleResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_feedback(
    feedback_id: UUID,
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Fetch a single feedback record. Lookup failures of any kind are reported as 404.
    """
    try:
        feedback = service.get_feedback(feedback_id=feedback_id)
    except FeedbackError:
        return error_response(status.HTTP_404_NOT_FOUND, FeedbackNotFoundError(feedback_id))

    return FeedbackSingleResponse(feedback=FeedbackResponse.model_validate(feedback))


@router.patch(
    "/feedbacks/{feedback_id}",
    response_model=FeedbackSingleResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def update_feedback(
    feedback_id: UUID,
    feedback_data: FeedbackUpdate,
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Partially update a feedback record; omitted fields keep their stored value.
    """
    try:
        feedback = service.update_feedback(feedback_id=feedback_id, feedback_data=feedback_data)
    except FeedbackNotFoundError as exc:
        return error_response(status.HTTP_404_NOT_FOUND, exc)
    except FeedbackError as exc:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)

    logger.info("Updated feedback %s", feedback_id)
    return FeedbackSingleResponse(feedback=FeedbackResponse.model_validate(feedback))


@router.delete(
    "/feedbacks/{feedback_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_feedback(
    feedback_id: UUID,
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Permanently delete a feedback record.
    """
    try:
        service.delete_feedback(feedback_id=feedback_id)
    except FeedbackNotFoundError as exc:
        return error_response(status.HTTP_404_NOT_FOUND, exc)
    except FeedbackError as exc:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)

    logger.info("Deleted feedback %s", feedback_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
