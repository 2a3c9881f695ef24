import csv
import io

from fitflex.models.measurement import METRIC_FIELDS
from fitflex.db import as_utc

WORKOUT_HEADERS = ["Date", "TemplateName", "ExerciseName", "ExerciseType", "Details"]
MEASUREMENT_HEADERS = ["Date", "Weight", "Chest", "Waist", "Hips", "UpperArm", "Forearm", "Thigh", "Calf"]


def fmt_number(v) -> str:
    """80.0 -> "80", 7.5 -> "7.5", None -> ""."""
    if v is None:
        return ""
    v = float(v)
    if v.is_integer():
        return str(int(v))
    return str(v)


def exercise_details(kind: str, payload: dict | None) -> str:
    """Human readable summary of one exercise record."""
    payload = payload or {}
    if kind == "strength":
        return ", ".join(
            f"{fmt_number(s.get('weight'))}kg x {fmt_number(s.get('reps'))}"
            for s in payload.get("sets", [])
        )
    if kind == "cardio":
        return (
            f"{fmt_number(payload.get('time'))}min, Level {fmt_number(payload.get('level'))}, "
            f"{fmt_number(payload.get('distance'))}km"
        )
    if kind == "endurance":
        return (
            f"{fmt_number(payload.get('time'))}min, {fmt_number(payload.get('distance'))}km, "
            f"{fmt_number(payload.get('pace'))}min/km"
        )
    if kind == "stretch":
        return "Completed" if payload.get("completed") else "Not completed"
    if kind == "counter":
        return fmt_number(payload.get("value"))
    return ""


def workouts_csv(sessions) -> str:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(WORKOUT_HEADERS)
    for sess in sessions:
        day = as_utc(sess.date).strftime("%Y-%m-%d")
        for rec in sess.exercises:
            kind = rec.type.value if hasattr(rec.type, "value") else rec.type
            writer.writerow(
                [
                    day,
                    sess.template_name,
                    rec.exercise_name,
                    kind,
                    exercise_details(kind, rec.payload),
                ]
            )
    return output.getvalue()


def measurements_csv(measurements) -> str:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(MEASUREMENT_HEADERS)
    for m in measurements:
        writer.writerow(
            [m.date.strftime("%Y-%m-%d")] + [fmt_number(getattr(m, col)) for col in METRIC_FIELDS]
        )
    return output.getvalue()
