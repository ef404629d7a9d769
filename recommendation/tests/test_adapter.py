"""
Tests for the SQL data adapter and the runner against an in-memory database.
"""

import pytest
from sqlalchemy.exc import OperationalError

from db import Base
from recommendation.logic.adapter import (
    SqlLearnerHistory,
    fetch_completed_courses,
    fetch_published_courses,
    fetch_challenge_results,
    normalize_level,
)
from recommendation.logic.runner import run_recommendations, run_recommendation_response


@pytest.mark.parametrize("raw, expected", [
    ("Beginner", "beginner"),
    (" INTERMEDIATE ", "intermediate"),
    ("Advanced", "advanced"),
    (None, "beginner"),
    ("", "beginner"),
    ("Expert", "expert"),
])
def test_normalize_level(raw, expected):
    assert normalize_level(raw) == expected


def test_fetch_completed_courses_only_returns_completed(db_session, seed):
    seed.course("A", "Intro to Web3")
    seed.course("B", "Solidity Fundamentals", level="Intermediate", prerequisite_id="A")
    seed.enrollment("learner_1", "A", completed=True)
    seed.enrollment("learner_1", "B", completed=False)
    seed.enrollment("learner_2", "B", completed=True)

    completed = fetch_completed_courses(db_session, "learner_1")

    assert [c.id for c in completed] == ["A"]
    assert completed[0].level == "beginner"


def test_completed_courses_include_unpublished(db_session, seed):
    seed.course("A", "Retired Intro", is_published=False)
    seed.enrollment("learner_1", "A")

    assert [c.id for c in fetch_completed_courses(db_session, "learner_1")] == ["A"]


def test_fetch_published_courses(db_session, seed):
    seed.course("A", "Intro")
    seed.course("D", "Draft", is_published=False)
    seed.course("B", "Next", prerequisite_id="A", level="Intermediate")

    catalog = fetch_published_courses(db_session)

    assert [c.id for c in catalog] == ["A", "B"]
    assert catalog[1].prerequisite == "A"
    assert catalog[1].level == "intermediate"


def test_fetch_challenge_results_for_learner(db_session, seed):
    seed.result("learner_1", 35, "Solidity")
    seed.result("learner_2", 10, "Rust")
    seed.result("learner_1", 90, "Rust")

    results = fetch_challenge_results(db_session, "learner_1")

    assert [(r.skill, r.score) for r in results] == [("Solidity", 35.0), ("Rust", 90.0)]


def test_runner_end_to_end(db_session, seed):
    seed.course("A", "Intro to Web3", level="Beginner")
    seed.course("B", "Solidity Fundamentals", level="Intermediate", prerequisite_id="A")
    seed.course("Y", "Solidity Basics", level="Advanced", is_remedial=True, skill="Solidity")
    seed.course("G", "Ghost Follow-up", prerequisite_id="removed-course")
    seed.enrollment("learner_1", "A")
    seed.result("learner_1", 35, "Solidity")

    recommendations = run_recommendations(db_session, "learner_1")

    assert [r.course_id for r in recommendations] == ["B", "Y"]
    # Intermediate path (third rule) replaces the sequence reason for B
    assert recommendations[0].reason == "You are ready to move to an intermediate learning path"
    assert recommendations[1].reason == "Recommended to strengthen your understanding of Solidity"


def test_runner_without_history(db_session, seed):
    seed.course("A", "Intro")

    response = run_recommendation_response(db_session, "nobody")

    assert response.model_dump() == {"status": "success", "recommendations": []}


def test_sql_source_errors_propagate(db_engine, db_session):
    Base.metadata.drop_all(bind=db_engine)

    with pytest.raises(OperationalError):
        SqlLearnerHistory(db_session).fetch_completed_courses("learner_1")
