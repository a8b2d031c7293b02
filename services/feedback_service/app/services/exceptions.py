"""Typed failures raised by the feedback persistence layer."""

from uuid import UUID


class FeedbackError(Exception):
    """Base class for feedback persistence errors."""

    STATUS = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FeedbackNotFoundError(FeedbackError):
    """Raised when no feedback row matches the requested id."""

    STATUS = "fail"

    def __init__(self, feedback_id: UUID):
        super().__init__(f"Feedback with ID: {feedback_id} not found")
        self.feedback_id = feedback_id


class FeedbackConflictError(FeedbackError):
    """Raised when a write violates a uniqueness constraint."""

    STATUS = "fail"


class FeedbackStoreError(FeedbackError):
    """Raised for any other database failure. The message is safe to return to clients."""
