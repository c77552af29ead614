from __future__ import annotations

from collections.abc import Iterable

from timetabler.models import Constraint, Course
from timetabler.services.conflict_service import AssignmentSource, scheduled_assignments
from timetabler.services.slot_store import Assignment


def unscheduled_courses(assignments: AssignmentSource, courses: Iterable[Course]) -> list[Course]:
    scheduled = {
        (slot.course.id, slot.course.code, slot.course.name)
        for slot in scheduled_assignments(assignments)
        if slot.course is not None
    }
    return [course for course in courses if (course.id, course.code, course.name) not in scheduled]


def availability_mismatches(assignments: AssignmentSource) -> list[Assignment]:
    """Assignments whose teacher lists availability for the day but not this time.

    A teacher with no availability entry for the day counts as available.
    """
    return [
        slot
        for slot in scheduled_assignments(assignments)
        if slot.teacher is not None and not slot.teacher.is_available(slot.day, slot.time)
    ]


def validate_timetable(assignments: AssignmentSource, courses: Iterable[Course] = ()) -> list[str]:
    slots = scheduled_assignments(assignments)
    errors = [f"Course {course.name} is not scheduled" for course in unscheduled_courses(slots, courses)]
    errors.extend(
        f"Teacher {slot.teacher.name or slot.teacher.id} is not available on {slot.day} at {slot.time}"
        for slot in availability_mismatches(slots)
    )
    return errors


def availability_constraints(assignments: AssignmentSource) -> list[Constraint]:
    return [
        Constraint(
            type="teacher_availability",
            description=f"Teacher {slot.teacher.name or slot.teacher.id} is not available on {slot.day} at {slot.time}",
            priority="high",
            violated=True,
        )
        for slot in availability_mismatches(assignments)
    ]
