from liftlog.models.workout import Workout
from liftlog.models.exercise import Exercise
from liftlog.models.workout_exercise import WorkoutExercise
from liftlog.models.workout_set import WorkoutSet

__all__ = ["Workout", "Exercise", "WorkoutExercise", "WorkoutSet"]
