import logging
from uuid import UUID
from typing import List, NoReturn
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from ..models.feedback import Feedback, utcnow
from ..schemas.feedback import FeedbackCreate, FeedbackUpdate
from .exceptions import FeedbackConflictError, FeedbackNotFoundError, FeedbackStoreError

logger = logging.getLogger(__name__)


class FeedbackService:
    def __init__(self, db: Session):
        self.db = db

    def _store_failure(self, message: str, exc: SQLAlchemyError) -> NoReturn:
        self.db.rollback()
        logger.exception("Database error: %s", message)
        raise FeedbackStoreError(message) from exc

    def list_feedbacks(self, limit: int, offset: int) -> List[Feedback]:
        """
        Retrieves one page of feedback ordered by primary key.

        Args:
            limit: Maximum number of rows to return.
            offset: Number of rows to skip.

        Returns:
            A list of Feedback ORM objects in ascending id order.
        """
        try:
            return (
                self.db.query(Feedback)
                .order_by(Feedback.id)
                .limit(limit)
                .offset(offset)
                .all()
            )
        except SQLAlchemyError as exc:
            self._store_failure("Something bad happened while fetching all feedback items", exc)

    def create_feedback(self, feedback_data: FeedbackCreate) -> Feedback:
        """
        Creates a new feedback record.

        The id comes from the column default; created_at and updated_at
        share one timestamp.

        Raises:
            FeedbackConflictError: a uniqueness constraint rejected the row.
            FeedbackStoreError: any other database failure.
        """
        now = utcnow()
        db_feedback = Feedback(
            text=feedback_data.text,
            rating=feedback_data.rating,
            created_at=now,
            updated_at=now,
        )
        try:
            self.db.add(db_feedback)
            self.db.commit()
            self.db.refresh(db_feedback)
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Rejected duplicate feedback: %s", exc.orig)
            raise FeedbackConflictError("Feedback with that text already exists") from exc
        except SQLAlchemyError as exc:
            self._store_failure("Something bad happened while creating the feedback item", exc)
        return db_feedback

    def get_feedback(self, feedback_id: UUID) -> Feedback:
        """Point lookup by primary key."""
        try:
            feedback = self.db.query(Feedback).filter(Feedback.id == feedback_id).first()
        except SQLAlchemyError as exc:
            self._store_failure(f"Something bad happened while fetching feedback {feedback_id}", exc)
        if feedback is None:
            raise FeedbackNotFoundError(feedback_id)
        return feedback

    def update_feedback(self, feedback_id: UUID, feedback_data: FeedbackUpdate) -> Feedback:
        """
        Applies a partial update to a feedback record.

        Fields left out of `feedback_data` (or sent as null) keep their stored
        value. `updated_at` is refreshed even when nothing else changes.

        The row is read with SELECT ... FOR UPDATE and written in the same
        transaction, so two concurrent updates of one record are applied one
        after the other instead of the later one discarding the earlier.

        Raises:
            FeedbackNotFoundError: no record has this id.
            FeedbackStoreError: the read or the write failed.
        """
        try:
            feedback = (
                self.db.query(Feedback)
                .filter(Feedback.id == feedback_id)
                .with_for_update()
                .first()
            )
        except SQLAlchemyError as exc:
            self._store_failure(f"Something bad happened while fetching feedback {feedback_id}", exc)

        if feedback is None:
            self.db.rollback()
            raise FeedbackNotFoundError(feedback_id)

        changes = feedback_data.model_dump(exclude_none=True)
        feedback.text = changes.get("text", feedback.text)
        feedback.rating = changes.get("rating", feedback.rating)
        feedback.updated_at = utcnow()

        try:
            self.db.commit()
            self.db.refresh(feedback)
        except SQLAlchemyError as exc:
            self._store_failure(f"Something bad happened while updating feedback {feedback_id}", exc)
        return feedback

    def delete_feedback(self, feedback_id: UUID) -> int:
        """
        Permanently deletes a feedback record.

        Returns:
            The number of rows removed (always 1).

        Raises:
            FeedbackNotFoundError: no row was affected.
            FeedbackStoreError: the delete could not be executed.
        """
        try:
            num_deleted = self.db.query(Feedback).filter(
                Feedback.id == feedback_id
            ).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as exc:
            self._store_failure(f"Something bad happened while deleting feedback {feedback_id}", exc)

        if num_deleted == 0:
            raise FeedbackNotFoundError(feedback_id)
        return num_deleted
