# liftlog/repositories/workout_repo.py
from __future__ import annotations
import logging
from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload, selectinload

from liftlog.dates import as_local
from liftlog.models import Workout, WorkoutExercise, WorkoutSet
from liftlog.repositories.base import BaseRepository
from liftlog.schemas.workout import WorkoutExerciseCreate

log = logging.getLogger(__name__)

# workout -> workout_exercises (by order) -> exercise + sets (by set_order).
# Per-level ordering comes from the relationship order_by.
HYDRATE = (
    selectinload(Workout.workout_exercises).options(
        joinedload(WorkoutExercise.exercise),
        selectinload(WorkoutExercise.sets),
    ),
)

class WorkoutRepository(BaseRepository[Workout]):
    def _hydrated(self):
        return (
            select(Workout)
            .options(*HYDRATE)
            .order_by(Workout.workout_date.desc(), Workout.id.asc())
        )

    # READS
    def get(self, workout_id: UUID) -> Optional[Workout]:
        stmt = self._hydrated().where(Workout.id == workout_id).execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_user(self, workout_id: UUID, user_id: str) -> Optional[Workout]:
        w = self.get(workout_id)
        if w is None or w.user_id != user_id:
            return None
        return w

    def list_by_user(self, user_id: str) -> list[Workout]:
        stmt = self._hydrated().where(Workout.user_id == user_id)
        return list(self.db.execute(stmt).scalars().all())

    def list_by_user_between(self, user_id: str, start: datetime, end: datetime) -> list[Workout]:
        """Workouts with start <= workout_date < end, most recent first."""
        stmt = self._hydrated().where(
            Workout.user_id == user_id,
            Workout.workout_date >= start,
            Workout.workout_date < end,
        )
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def create(
        self,
        user_id: str,
        *,
        workout_date: datetime | None = None,
        name: str | None = None,
        notes: str | None = None,
        exercises: Iterable[WorkoutExerciseCreate] = (),
    ) -> Workout:
        w = Workout(user_id=user_id, name=name, notes=notes)
        if workout_date is not None:
            w.workout_date = as_local(workout_date)
        for i, we in enumerate(exercises):
            w.workout_exercises.append(
                WorkoutExercise(
                    exercise_id=we.exercise_id,
                    order=we.order if we.order is not None else i,
                    notes=we.notes,
                    sets=[
                        WorkoutSet(
                            set_order=s.set_order if s.set_order is not None else j,
                            reps=s.reps,
                            weight=s.weight,
                            completed=s.completed,
                        )
                        for j, s in enumerate(we.sets)
                    ],
                )
            )
        try:
            self.db.add(w)
            self.db.commit()
        except IntegrityError:
            # unknown exercise id or a duplicate order/set_order
            self.db.rollback()
            log.warning("workout insert rejected for user=%s", user_id)
            raise
        log.info("workout logged id=%s user=%s", w.id, user_id)
        return self.get(w.id)

    def delete(self, workout: Workout) -> None:
        workout_id = workout.id
        # workout_exercises and sets go with it via ON DELETE CASCADE
        self.db.delete(workout)
        self.db.commit()
        log.info("workout deleted id=%s", workout_id)

    def clear_all(self) -> dict[str, int]:
        """
        Delete every set, workout-exercise and workout, children first.
        Each step commits on its own; a failure part-way leaves earlier
        steps applied. The exercise catalog is left alone.
        """
        counts: dict[str, int] = {}
        for label, model in (("sets", WorkoutSet), ("workout_exercises", WorkoutExercise), ("workouts", Workout)):
            counts[label] = self.db.execute(delete(model)).rowcount
            self.db.commit()
            log.info("deleted all %s (%d rows)", label, counts[label])
        return counts
