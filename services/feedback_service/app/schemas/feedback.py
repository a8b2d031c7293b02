from pydantic import BaseModel, ConfigDict, Field, conint, constr
from typing import List, Optional
from datetime import datetime
from uuid import UUID

RATING_MIN = 1
RATING_MAX = 5
TEXT_MAX_LENGTH = 10000
# Keeps (page - 1) * limit well inside a signed 64-bit OFFSET.
MAX_PAGE = 2**31 - 1

# Strict: "5" and 5.0 are rejected rather than coerced.
FeedbackText = constr(min_length=1, max_length=TEXT_MAX_LENGTH, strict=True)
FeedbackRating = conint(ge=RATING_MIN, le=RATING_MAX, strict=True)


class FeedbackCreate(BaseModel):
    text: FeedbackText
    rating: FeedbackRating


class FeedbackUpdate(BaseModel):
    text: Optional[FeedbackText] = None
    rating: Optional[FeedbackRating] = None


class FilterOptions(BaseModel):
    page: int = Field(1, ge=1, le=MAX_PAGE)
    limit: int = Field(10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class FeedbackResponse(BaseModel):
    id: UUID
    text: str
    rating: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FeedbackData(BaseModel):
    feedback: FeedbackResponse


class FeedbackDataResponse(BaseModel):
    status: str = "success"
    data: FeedbackData


class FeedbackSingleResponse(BaseModel):
    status: str = "success"
    feedback: FeedbackResponse


class FeedbackListResponse(BaseModel):
    status: str = "success"
    results: int
    feedbacks: List[FeedbackResponse]


class ErrorResponse(BaseModel):
    status: str
    message: str


class HealthCheckResponse(BaseModel):
    message: str
    timestamp: datetime
