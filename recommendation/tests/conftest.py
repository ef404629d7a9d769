"""
Shared fixtures for the recommendation tests.

Uses an in-memory SQLite database so no DATABASE_URL is needed.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base, get_db
from recommendation.models import Course, Enrollment, ChallengeResult
from recommendation.logic.contracts import CourseSnapshot, ChallengeResultSnapshot
from utils.auth_utils import create_token


class InMemoryHistory:
    """LearnerHistorySource over plain lists, counting every read."""

    def __init__(
        self,
        completed: Optional[List[CourseSnapshot]] = None,
        catalog: Optional[List[CourseSnapshot]] = None,
        results: Optional[List[ChallengeResultSnapshot]] = None,
    ):
        self.completed = completed or []
        self.catalog = catalog or []
        self.results = results or []
        self.calls = {"completed": 0, "catalog": 0, "results": 0}

    def fetch_completed_courses(self, learner_id):
        self.calls["completed"] += 1
        return list(self.completed)

    def fetch_published_courses(self):
        self.calls["catalog"] += 1
        return list(self.catalog)

    def fetch_challenge_results(self, learner_id):
        self.calls["results"] += 1
        return list(self.results)


@pytest.fixture
def history():
    """Factory for InMemoryHistory sources."""
    return InMemoryHistory


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seed(db_session):
    """
    Insert rows with strictly increasing timestamps so catalog and
    enrollment order is deterministic.
    """
    clock = {"t": datetime(2025, 1, 1)}

    def _tick():
        clock["t"] += timedelta(seconds=1)
        return clock["t"]

    class Seeder:
        def course(self, id, title, level="Beginner", prerequisite_id=None,
                   is_published=True, is_remedial=False, skill=None):
            course = Course(
                id=id,
                title=title,
                description=f"{title} description",
                level=level,
                prerequisite_id=prerequisite_id,
                is_published=is_published,
                is_remedial=is_remedial,
                skill=skill,
                created_at=_tick(),
            )
            db_session.add(course)
            db_session.commit()
            return course

        def enrollment(self, student_id, course_id, completed=True):
            enrollment = Enrollment(
                student_id=student_id,
                course_id=course_id,
                completed=completed,
                enrolled_at=_tick(),
            )
            db_session.add(enrollment)
            db_session.commit()
            return enrollment

        def result(self, user_id, score, skill):
            result = ChallengeResult(user_id=user_id, score=score, skill=skill, taken_at=_tick())
            db_session.add(result)
            db_session.commit()
            return result

    return Seeder()


@pytest.fixture
def client(session_factory):
    from main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(learner_id="learner_1"):
        return {"Authorization": f"Bearer {create_token(learner_id)}"}
    return _headers
