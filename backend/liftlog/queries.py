"""
Read side of the workout log.

Both functions return plain pydantic trees (workout -> workout_exercises ->
exercise + sets), ordered most recent workout first, exercises by `order`
and sets by `set_order`. Storage errors are not caught here.
"""
from __future__ import annotations
from datetime import date, datetime, tzinfo

from sqlalchemy.orm import Session

from liftlog.dates import day_bounds
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.workout import WorkoutRead

def get_user_workouts_by_date(
    db: Session,
    user_id: str,
    day: date | datetime,
    tz: tzinfo | None = None,
) -> list[WorkoutRead]:
    """All of a user's workouts on the caller's local calendar day of `day`."""
    start_of_day, end_of_day = day_bounds(day, tz)
    rows = WorkoutRepository(db).list_by_user_between(user_id, start_of_day, end_of_day)
    return [WorkoutRead.model_validate(w) for w in rows]

def get_user_workouts(db: Session, user_id: str) -> list[WorkoutRead]:
    rows = WorkoutRepository(db).list_by_user(user_id)
    return [WorkoutRead.model_validate(w) for w in rows]
