import pytest

from timetabler.models import Course, Room, Teacher
from timetabler.services.conflict_service import ConflictService
from timetabler.services.slot_store import Assignment, SlotAssignmentStore


@pytest.fixture
def resources():
    return {
        "math": Course(id="c1", name="Course 1", code="C1"),
        "physics": Course(id="c2", name="Course 2", code="C2"),
        "prof_a": Teacher(id="f1", name="Prof A"),
        "prof_b": Teacher(id="f2", name="Prof B"),
        "room_1": Room(id="r1", name="Room 1", type="Lecture Hall"),
        "room_2": Room(id="r2", name="Room 2", type="Lecture Hall"),
    }


def test_detect_room_conflict(resources):
    slots = [
        Assignment(day="Monday", time="09:00", course=resources["math"], teacher=resources["prof_a"], room=resources["room_1"]),
        Assignment(day="Monday", time="09:00", course=resources["physics"], teacher=resources["prof_b"], room=resources["room_1"]),
    ]
    report = ConflictService(slots).detect_conflicts()

    assert len(report.conflicts) == 1
    conflict = report.conflicts[0]
    assert conflict.conflict_type == "room_conflict"
    assert conflict.description == "Room Room 1 has overlapping classes"
    assert conflict.slots == slots


def test_detect_teacher_conflict(resources):
    # same teacher, same cell, different rooms
    slots = [
        Assignment(day="Monday", time="09:00", course=resources["math"], teacher=resources["prof_a"], room=resources["room_1"]),
        Assignment(day="Monday", time="09:00", course=resources["physics"], teacher=resources["prof_a"], room=resources["room_2"]),
    ]
    report = ConflictService(slots).detect_conflicts()

    assert [c.conflict_type for c in report.conflicts] == ["teacher_conflict"]
    assert "Teacher Prof A has overlapping classes" == report.conflicts[0].description


def test_teacher_and_room_conflicts_are_counted_separately(resources):
    slot = Assignment(day="Monday", time="09:00", course=resources["math"], teacher=resources["prof_a"], room=resources["room_1"])
    report = ConflictService([slot, slot, slot]).detect_conflicts()

    types = [c.conflict_type for c in report.conflicts]
    assert types == ["teacher_conflict", "teacher_conflict", "room_conflict", "room_conflict"]
    # every later occupant is paired with the first one
    assert all(c.slots[0] == slot for c in report.conflicts)


def test_no_conflicts_across_different_times(resources):
    slots = [
        Assignment(day="Monday", time="09:00", course=resources["math"], teacher=resources["prof_a"], room=resources["room_1"]),
        Assignment(day="Monday", time="10:00", course=resources["physics"], teacher=resources["prof_a"], room=resources["room_1"]),
        Assignment(day="Tuesday", time="09:00", course=resources["physics"], teacher=resources["prof_a"], room=resources["room_1"]),
    ]
    assert ConflictService(slots).detect_conflicts().conflicts == []


def test_breaks_and_missing_resources_are_ignored(resources):
    slots = [
        Assignment(day="Monday", time="11:20-11:30", type="Break"),
        Assignment(day="Monday", time="11:20-11:30", type="Break"),
        Assignment(day="Monday", time="09:00", course=resources["math"]),
        Assignment(day="Monday", time="09:00", course=resources["physics"]),
    ]
    assert ConflictService(slots).detect_conflicts().conflicts == []


def test_course_free_assignments_still_clash_on_teacher(resources):
    slots = [
        Assignment(day="Monday", time="09:00", teacher=resources["prof_a"]),
        Assignment(day="Monday", time="09:00", teacher=resources["prof_a"]),
    ]
    report = ConflictService(slots).detect_conflicts()

    assert [c.conflict_type for c in report.conflicts] == ["teacher_conflict"]


def test_store_contents_never_conflict(resources):
    store = SlotAssignmentStore()
    store.set("Monday", "09:00", resources["math"], resources["prof_a"], resources["room_1"])
    store.set("Monday", "09:00", resources["physics"], resources["prof_a"], resources["room_1"])
    store.set("Monday", "10:00", resources["physics"], resources["prof_a"], resources["room_1"])

    assert ConflictService(store.all_assignments()).detect_conflicts().conflicts == []


def test_detection_is_idempotent(resources):
    slots = [
        Assignment(day="Monday", time="09:00", course=resources["math"], teacher=resources["prof_a"], room=resources["room_1"]),
        Assignment(day="Monday", time="09:00", course=resources["physics"], teacher=resources["prof_a"], room=resources["room_1"]),
    ]
    service = ConflictService(slots)
    assert service.detect_conflicts() == service.detect_conflicts()
    assert ConflictService(slots).detect_conflicts() == service.detect_conflicts()


def test_empty_input():
    report = ConflictService([]).detect_conflicts()
    assert report.conflicts == []
    assert report.suggested_resolutions == []


def test_resolutions_follow_conflict_type(resources):
    slots = [
        Assignment(day="Monday", time="09:00", course=resources["math"], teacher=resources["prof_a"], room=resources["room_1"]),
        Assignment(day="Monday", time="09:00", course=resources["physics"], teacher=resources["prof_a"], room=resources["room_1"]),
    ]
    report = ConflictService(slots).report_with_resolutions()

    actions = [r.action_type for r in report.suggested_resolutions]
    assert actions == ["move_slot", "change_teacher", "change_room"]
    assert {r.target_slot for r in report.suggested_resolutions} == {"Monday-09:00"}
    assert report.suggested_resolutions[1].parameters == {"teacher_id": "f1"}
    assert report.suggested_resolutions[2].parameters == {"room_id": "r1"}
