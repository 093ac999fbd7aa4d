from typing import Annotated
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, StringConstraints

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
MuscleGroupStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]

class ExerciseCreate(BaseModel):
    name: NameStr
    description: str | None = None
    muscle_group: MuscleGroupStr | None = None

class ExerciseRead(BaseModel):
    id: UUID
    name: str
    description: str | None = None
    muscle_group: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
