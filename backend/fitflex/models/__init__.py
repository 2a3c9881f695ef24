from fitflex.models.user import User
from fitflex.models.exercise import Exercise, ExerciseType
from fitflex.models.template import WorkoutTemplate, TemplateExercise, TemplateStatus
from fitflex.models.workout_session import WorkoutSession, ExerciseSessionRecord
from fitflex.models.measurement import BodyMeasurement
from fitflex.models.user_settings import UserSettings

__all__ = [
    "User",
    "Exercise",
    "ExerciseType",
    "WorkoutTemplate",
    "TemplateExercise",
    "TemplateStatus",
    "WorkoutSession",
    "ExerciseSessionRecord",
    "BodyMeasurement",
    "UserSettings",
]
