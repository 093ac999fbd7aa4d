"""
Point the app at a private in-memory SQLite database before anything
imports liftlog.db, then build the schema once. Run before any test module loads.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["TIMEZONE"] = "UTC"
os.environ.setdefault("SECRET_KEY", "test-secret")

from datetime import datetime
from decimal import Decimal

import pytest

from liftlog.db import Base, SessionLocal, engine
from liftlog import models  # noqa: F401  # registers tables on Base.metadata
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.workout import SetCreate, WorkoutExerciseCreate

Base.metadata.create_all(bind=engine)


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.rollback()
        s.close()
        # children first so ON DELETE RESTRICT never fires
        with engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(table.delete())


@pytest.fixture
def bench(db):
    return ExerciseRepository(db).create(name="Bench Press", muscle_group="chest")


@pytest.fixture
def squat(db):
    return ExerciseRepository(db).create(name="Squat", muscle_group="legs")


def sets_of(*pairs):
    """[(reps, weight), ...] -> SetCreate list numbered by position."""
    return [SetCreate(set_order=i, reps=r, weight=Decimal(str(w))) for i, (r, w) in enumerate(pairs)]


def log_workout(db, user_id, when, *exercises, name=None):
    """exercises: (exercise, order, sets) tuples."""
    return WorkoutRepository(db).create(
        user_id,
        workout_date=when,
        name=name,
        exercises=[
            WorkoutExerciseCreate(exercise_id=ex.id, order=order, sets=sets)
            for ex, order, sets in exercises
        ],
    )


@pytest.fixture
def make_workout(db):
    def _make(user_id, when: datetime, *exercises, name=None):
        return log_workout(db, user_id, when, *exercises, name=name)
    return _make
