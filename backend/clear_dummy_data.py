"""
Wipe logged workout data: sets, then workout exercises, then workouts.

Run: cd backend && python clear_dummy_data.py [--include-exercises]

Each step commits on its own. If one fails the earlier deletes stay applied.
"""
import argparse
import logging
import sys

from liftlog.db import SessionLocal
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.workout_repo import WorkoutRepository

log = logging.getLogger("clear_dummy_data")

def clear(db, include_exercises=False):
    counts = WorkoutRepository(db).clear_all()
    if include_exercises:
        counts["exercises"] = ExerciseRepository(db).delete_all()
    return counts

def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--include-exercises", action="store_true",
                        help="also empty the shared exercise catalog")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    log.info("clearing all workout data")
    try:
        with SessionLocal() as db:
            counts = clear(db, include_exercises=args.include_exercises)
    except Exception:
        log.exception("clearing data failed")
        return 1
    log.info("done: %s", ", ".join(f"{k}={v}" for k, v in counts.items()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
