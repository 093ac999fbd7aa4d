# liftlog/repositories/exercise_repo.py
from __future__ import annotations
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select, func, delete
from sqlalchemy.exc import IntegrityError

from liftlog.models import Exercise
from liftlog.repositories.base import BaseRepository, Page

log = logging.getLogger(__name__)

class ExerciseRepository(BaseRepository[Exercise]):
    # READS
    def get(self, exercise_id: UUID) -> Optional[Exercise]:
        return self.db.get(Exercise, exercise_id)

    def get_by_name(self, name: str) -> Optional[Exercise]:
        stmt = select(Exercise).where(Exercise.name == name)
        return self.db.execute(stmt).scalar_one_or_none()

    def list(self, *, limit: int = 100, offset: int = 0) -> Page[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc())
        items = self.db.execute(stmt.limit(limit).offset(offset)).scalars().all()
        total = self.db.execute(select(func.count()).select_from(Exercise)).scalar_one()
        return Page(items=list(items), total=total, limit=limit, offset=offset)

    # WRITES
    def create(self, *, name: str, description: str | None = None, muscle_group: str | None = None) -> Exercise:
        ex = Exercise(name=name, description=description, muscle_group=muscle_group)
        try:
            ex = self.add_and_commit(ex)
        except IntegrityError:
            self.db.rollback()
            log.warning("exercise name already in catalog: %r", name)
            # Names are globally unique; let the router map this to 400
            raise ValueError("exercise_name_exists")
        log.info("catalog exercise created id=%s name=%r", ex.id, ex.name)
        return ex

    def delete_all(self) -> int:
        """Empty the catalog. Fails while any workout still references an exercise."""
        n = self.db.execute(delete(Exercise)).rowcount
        self.db.commit()
        log.info("deleted all exercises (%d rows)", n)
        return n
