from typing import Annotated
from datetime import datetime
from decimal import Decimal
from uuid import UUID
from pydantic import BaseModel, Field, StringConstraints, model_validator

from liftlog.schemas.exercise import ExerciseRead

NonNegInt = Annotated[int, Field(ge=0)]
Weight = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=2000)]

# --- writes ---

class SetCreate(BaseModel):
    # Optional: defaults to the set's position in the payload
    set_order: NonNegInt | None = None
    reps: NonNegInt
    weight: Weight
    completed: bool = True

class WorkoutExerciseCreate(BaseModel):
    exercise_id: UUID
    order: NonNegInt | None = None
    notes: NotesStr | None = None
    sets: list[SetCreate] = []

class WorkoutCreate(BaseModel):
    # Omitted -> the database stamps the insert time
    workout_date: datetime | None = None
    name: Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)] | None = None
    notes: NotesStr | None = None
    exercises: list[WorkoutExerciseCreate] = []

    @model_validator(mode="after")
    def fill_positions(self):
        """Number exercises and sets by position when the client leaves order out."""
        for i, we in enumerate(self.exercises):
            if we.order is None:
                we.order = i
            for j, s in enumerate(we.sets):
                if s.set_order is None:
                    s.set_order = j
        return self

# --- reads (hydrated tree) ---

class SetRead(BaseModel):
    id: UUID
    workout_exercise_id: UUID
    set_order: int
    reps: int
    weight: Decimal
    completed: bool
    created_at: datetime

    model_config = {"from_attributes": True}

class WorkoutExerciseRead(BaseModel):
    id: UUID
    workout_id: UUID
    exercise_id: UUID
    order: int
    notes: str | None = None
    created_at: datetime
    exercise: ExerciseRead
    sets: list[SetRead] = []

    model_config = {"from_attributes": True}

class WorkoutRead(BaseModel):
    id: UUID
    user_id: str
    workout_date: datetime
    name: str | None = None
    notes: str | None = None
    created_at: datetime
    workout_exercises: list[WorkoutExerciseRead] = []

    model_config = {"from_attributes": True}
