from datetime import datetime, timezone
from decimal import Decimal
import uuid
from zoneinfo import ZoneInfo

from sqlalchemy import event, func, select

from liftlog.dates import as_local
from liftlog.models import Workout, WorkoutSet
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.workout import SetCreate, WorkoutCreate, WorkoutExerciseCreate
from liftlog.settings import get_settings
from conftest import sets_of


def test_create_returns_hydrated_workout(db, bench, squat):
    w = WorkoutRepository(db).create(
        "u1",
        workout_date=datetime(2024, 1, 15, 10, 30),
        name="Upper",
        notes="felt strong",
        exercises=[
            WorkoutExerciseCreate(exercise_id=bench.id, order=0, sets=sets_of((8, 185), (8, 185))),
            WorkoutExerciseCreate(exercise_id=squat.id, order=1, notes="belt", sets=sets_of((5, 225))),
        ],
    )
    assert w.user_id == "u1" and w.name == "Upper" and w.notes == "felt strong"
    assert [we.exercise.name for we in w.workout_exercises] == ["Bench Press", "Squat"]
    assert w.workout_exercises[1].notes == "belt"
    assert [s.reps for s in w.workout_exercises[0].sets] == [8, 8]


def test_positions_default_to_payload_order(db, bench, squat):
    payload = WorkoutCreate(
        workout_date=datetime(2024, 1, 15, 10, 30),
        exercises=[
            {"exercise_id": str(bench.id), "sets": [{"reps": 8, "weight": 100}, {"reps": 6, "weight": 110}]},
            {"exercise_id": str(squat.id), "sets": [{"reps": 5, "weight": 140}]},
        ],
    )
    assert [we.order for we in payload.exercises] == [0, 1]
    assert [s.set_order for s in payload.exercises[0].sets] == [0, 1]

    w = WorkoutRepository(db).create("u1", workout_date=payload.workout_date, exercises=payload.exercises)
    assert [(we.order, [s.set_order for s in we.sets]) for we in w.workout_exercises] == [(0, [0, 1]), (1, [0])]


def test_create_without_date_uses_insert_time(db, bench):
    w = WorkoutRepository(db).create("u1", exercises=[WorkoutExerciseCreate(exercise_id=bench.id)])
    assert w.workout_date is not None


def test_get_for_user_hides_other_users(db, bench, make_workout):
    w = make_workout("u1", datetime(2024, 1, 15, 10, 0), (bench, 0, []))
    repo = WorkoutRepository(db)
    assert repo.get_for_user(w.id, "u1").id == w.id
    assert repo.get_for_user(w.id, "u2") is None
    assert repo.get_for_user(uuid.uuid4(), "u1") is None


def test_delete_removes_children(db, bench, make_workout):
    w = make_workout("u1", datetime(2024, 1, 15, 10, 0), (bench, 0, sets_of((8, 185), (8, 185))))
    WorkoutRepository(db).delete(w)
    assert db.execute(select(func.count()).select_from(Workout)).scalar_one() == 0
    assert db.execute(select(func.count()).select_from(WorkoutSet)).scalar_one() == 0


def test_set_fields_round_trip(db, bench):
    w = WorkoutRepository(db).create(
        "u1",
        workout_date=datetime(2024, 1, 15, 10, 0),
        exercises=[WorkoutExerciseCreate(
            exercise_id=bench.id,
            sets=[SetCreate(reps=3, weight=Decimal("102.25"), completed=False)],
        )],
    )
    s = w.workout_exercises[0].sets[0]
    assert s.weight == Decimal("102.25")
    assert s.completed is False
    assert s.set_order == 0


def test_naive_workout_date_is_stored_in_configured_zone(db, bench, monkeypatch):
    monkeypatch.setattr(get_settings(), "TIMEZONE", "Asia/Tokyo")
    flushed = []

    def grab(session, ctx, instances):
        flushed.extend(o.workout_date for o in session.new if isinstance(o, Workout))

    event.listen(db, "before_flush", grab)
    try:
        WorkoutRepository(db).create("u1", workout_date=datetime(2024, 1, 15, 20, 0),
                                     exercises=[WorkoutExerciseCreate(exercise_id=bench.id)])
    finally:
        event.remove(db, "before_flush", grab)

    # 20:00 on the 15th in Tokyo, not 20:00 in the database server's zone
    [stored] = flushed
    assert stored.tzinfo == ZoneInfo("Asia/Tokyo")
    assert (stored.year, stored.month, stored.day, stored.hour) == (2024, 1, 15, 20)


def test_aware_workout_date_keeps_its_zone():
    when = datetime(2024, 1, 15, 20, 0, tzinfo=timezone.utc)
    assert as_local(when) is when
    assert as_local(datetime(2024, 1, 15, 20, 0), ZoneInfo("Asia/Tokyo")).tzinfo == ZoneInfo("Asia/Tokyo")
