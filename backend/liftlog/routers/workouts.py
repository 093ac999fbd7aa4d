from datetime import date
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id
from liftlog.queries import get_user_workouts, get_user_workouts_by_date
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.workout import WorkoutCreate, WorkoutRead

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutRead])
def list_my_workouts(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    day: date | None = Query(None, alias="date", description="Calendar day, YYYY-MM-DD"),
    tz: str | None = Query(None, description="IANA zone the day is read in"),
):
    if day is None:
        return get_user_workouts(db, user_id)
    zone = None
    if tz:
        try:
            zone = ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError):
            raise HTTPException(status_code=400, detail=f"unknown time zone: {tz}")
    return get_user_workouts_by_date(db, user_id, day, zone)

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def log_workout(
    payload: WorkoutCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        w = WorkoutRepository(db).create(
            user_id,
            workout_date=payload.workout_date,
            name=payload.name,
            notes=payload.notes,
            exercises=payload.exercises,
        )
    except IntegrityError:
        raise HTTPException(status_code=400, detail="unknown exercise or duplicate order")
    return w

@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(
    workout_id: UUID,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    # Someone else's workout looks the same as a missing one
    w = WorkoutRepository(db).get_for_user(workout_id, user_id)
    if not w:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return w

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(
    workout_id: UUID,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    repo = WorkoutRepository(db)
    w = repo.get_for_user(workout_id, user_id)
    if not w:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    repo.delete(w)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
