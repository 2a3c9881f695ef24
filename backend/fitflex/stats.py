# fitflex/stats.py
"""
Dashboard figures derived from stored workout sessions.

Everything here is recomputed per request from rows handed in by the
repositories. Records are read through their ``type``, ``payload``,
``exercise_id`` and ``exercise_name`` attributes (ExerciseSessionRecord
rows), sessions through ``id``, ``date`` and ``template_name``.
"""
from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timedelta
from typing import Iterable

from fitflex.db import as_utc
from fitflex.normalize import round2


def _kind(record) -> str:
    return record.type.value if hasattr(record.type, "value") else record.type


def week_bounds(now: datetime) -> tuple[datetime, datetime]:
    """Monday 00:00:00.000 to Sunday 23:59:59.999 of the week containing ``now``."""
    now = as_utc(now)
    # Python's weekday() is already Monday=0
    start = (now - timedelta(days=now.weekday())).replace(hour=0, minute=0, second=0, microsecond=0)
    end = start + timedelta(days=7) - timedelta(milliseconds=1)
    return start, end


def count_this_week(dates: Iterable[datetime], now: datetime) -> int:
    start, end = week_bounds(now)
    return sum(1 for d in dates if start <= as_utc(d) <= end)


def total_lifted_weight(records: Iterable) -> float:
    """Sum of weight * reps over every strength set, in kg."""
    total = 0.0
    for rec in records:
        if _kind(rec) != "strength":
            continue
        for s in (rec.payload or {}).get("sets", []):
            total += (s.get("weight") or 0) * (s.get("reps") or 0)
    return round2(total)


def personal_records(records: Iterable, limit: int = 5) -> list[dict]:
    """Heaviest single set per strength exercise, best ``limit`` first.

    The name reported is the last snapshot seen, so callers should pass
    records oldest first. Ties on weight fall back to name, then id.
    """
    best: dict[str, float] = {}
    names: dict[str, str] = {}
    for rec in records:
        if _kind(rec) != "strength":
            continue
        for s in (rec.payload or {}).get("sets", []):
            weight = s.get("weight")
            if weight is None:
                continue
            if rec.exercise_id not in best or weight > best[rec.exercise_id]:
                best[rec.exercise_id] = weight
        if rec.exercise_id in best:
            names[rec.exercise_id] = rec.exercise_name

    ranked = sorted(best.items(), key=lambda kv: (-kv[1], names[kv[0]], kv[0]))
    return [
        {"exercise_id": ex_id, "exercise_name": names[ex_id], "max_weight": float(weight)}
        for ex_id, weight in ranked[:limit]
    ]


def counter_totals(records: Iterable) -> dict[str, float]:
    totals: dict[str, float] = defaultdict(float)
    for rec in records:
        if _kind(rec) != "counter":
            continue
        value = (rec.payload or {}).get("value")
        if value is not None:
            totals[rec.exercise_id] += value
    return dict(totals)


def counter_progress(exercise, total: float) -> dict:
    goal = exercise.goal
    return {
        "exercise_id": exercise.id,
        "exercise_name": exercise.name,
        "total": total,
        "goal": goal,
        "goal_due_date": exercise.goal_due_date,
        "progress": round2(total / goal) if goal else None,
        "reached": bool(goal) and total >= goal,
    }


def calendar_days(sessions: Iterable, year: int, month: int) -> list[dict]:
    """Days of one month that have workouts, each with its sessions in order."""
    by_day: dict = defaultdict(list)
    for sess in sessions:
        d = as_utc(sess.date).date()
        if d.year == year and d.month == month:
            by_day[d].append({"id": sess.id, "template_name": sess.template_name})
    return [{"date": d, "sessions": by_day[d]} for d in sorted(by_day)]
