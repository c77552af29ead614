from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable

from timetabler.models import Constraint, Teacher
from timetabler.services.conflict_service import AssignmentSource, scheduled_assignments

DEFAULT_MAX_HOURS_PER_WEEK = 40


def constrained_max_hours(requested_max_hours: int | None) -> int:
    if requested_max_hours is None:
        return DEFAULT_MAX_HOURS_PER_WEEK
    if requested_max_hours < 1:
        return 1
    return requested_max_hours


def teacher_daily_loads(assignments: AssignmentSource) -> dict[str, Counter[str]]:
    loads: defaultdict[str, Counter[str]] = defaultdict(Counter)
    for slot in scheduled_assignments(assignments):
        if slot.teacher is not None:
            loads[slot.day][slot.teacher.id] += 1
    return dict(loads)


def teacher_weekly_sessions(assignments: AssignmentSource) -> Counter[str]:
    sessions: Counter[str] = Counter()
    for slot in scheduled_assignments(assignments):
        if slot.teacher is not None:
            sessions[slot.teacher.id] += 1
    return sessions


def workload_overflow_constraints(
    assignments: AssignmentSource,
    teachers: Iterable[Teacher],
    *,
    session_minutes: int = 60,
) -> list[Constraint]:
    """One violated constraint per teacher scheduled beyond their weekly hour limit."""
    sessions = teacher_weekly_sessions(assignments)
    violations: list[Constraint] = []
    for teacher in teachers:
        hours = sessions.get(teacher.id, 0) * session_minutes / 60
        limit = constrained_max_hours(teacher.max_hours_per_week)
        if hours > limit:
            violations.append(Constraint(
                type="workload_overflow",
                description=f"Teacher {teacher.name or teacher.id} is scheduled for {hours:g}h, above the {limit}h weekly limit",
                priority="medium",
                violated=True,
            ))
    return violations
