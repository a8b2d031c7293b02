import os
from datetime import datetime, timezone

import pytest
from sqlalchemy.orm import sessionmaker
from uuid import uuid4

from services.feedback_service.app.models.database import Base, build_engine
from services.feedback_service.app.models.feedback import Feedback

# Point at a real PostgreSQL test database to run these against the production dialect
TEST_DATABASE_URL = os.environ.get("FEEDBACK_DATABASE_URL", "sqlite://")

engine = build_engine(TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create tables for testing
Base.metadata.create_all(bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """
    Pytest fixture to provide a database session for each test function.
    """
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()

def test_create_and_get_feedback(db_session):
    """
    Test creating a feedback record and retrieving it.
    """
    new_feedback = Feedback(text="This is a test feedback.", rating=4)

    db_session.add(new_feedback)
    db_session.commit()
    db_session.refresh(new_feedback)

    retrieved_feedback = db_session.query(Feedback).filter(Feedback.id == new_feedback.id).first()

    assert retrieved_feedback is not None
    assert retrieved_feedback.text == "This is a test feedback."
    assert retrieved_feedback.rating == 4

def test_store_generates_id_and_timestamps(db_session):
    """
    The id and both timestamps are filled in on insert, with updated_at >= created_at.
    """
    new_feedback = Feedback(text="defaults", rating=1)
    db_session.add(new_feedback)
    db_session.flush()

    assert new_feedback.id is not None
    assert new_feedback.created_at is not None
    assert new_feedback.updated_at >= new_feedback.created_at

def test_ids_are_unique(db_session):
    records = [Feedback(text=f"feedback {i}", rating=3) for i in range(10)]
    db_session.add_all(records)
    db_session.flush()

    assert len({record.id for record in records}) == len(records)

def test_explicit_id_is_kept(db_session):
    feedback_id = uuid4()
    now = datetime.now(timezone.utc)
    db_session.add(Feedback(id=feedback_id, text="explicit", rating=5, created_at=now, updated_at=now))
    db_session.commit()

    assert db_session.get(Feedback, feedback_id).text == "explicit"
