from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=list[ExerciseRead])
def list_exercises(
    db: Session = Depends(get_db),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    page = ExerciseRepository(db).list(limit=limit, offset=offset)
    return page.items

# Catalog is shared, but only signed-in users may grow it
@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user_id)])
def create_exercise(payload: ExerciseCreate, db: Session = Depends(get_db)):
    repo = ExerciseRepository(db)
    if repo.get_by_name(payload.name):
        raise HTTPException(status_code=400, detail="exercise already exists")
    try:
        ex = repo.create(name=payload.name, description=payload.description, muscle_group=payload.muscle_group)
    except ValueError as e:
        if str(e) == "exercise_name_exists":
            raise HTTPException(status_code=400, detail="exercise already exists")
        raise
    return ex
