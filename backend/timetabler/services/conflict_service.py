from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Dict, List, Tuple

from timetabler.schemas.conflict import ConflictDetail, ConflictReport, ResolutionAction
from timetabler.services.slot_store import Assignment, SlotKey

logger = logging.getLogger(__name__)

AssignmentSource = Iterable[Tuple[SlotKey, Assignment]] | Iterable[Assignment]


def scheduled_assignments(assignments: AssignmentSource) -> List[Assignment]:
    scheduled: List[Assignment] = []
    for item in assignments:
        assignment = item[1] if isinstance(item, tuple) else item
        if assignment is None or assignment.is_break:
            continue
        scheduled.append(assignment)
    return scheduled


class ConflictService:
    """Reports every teacher or room booked twice in the same (day, time) cell.

    Accepts store contents (``store.all_assignments()``) or any list of
    assignments. A store holds one assignment per cell, so the teacher pass only
    fires for externally supplied lists that book several rooms per cell.
    """

    def __init__(self, assignments: AssignmentSource):
        self.slots: List[Assignment] = scheduled_assignments(assignments)

    def detect_conflicts(self) -> ConflictReport:
        conflicts: List[ConflictDetail] = []

        teacher_slots: Dict[Tuple[str, str, str], Assignment] = {}
        for slot in self.slots:
            if slot.teacher is None:
                continue
            key = (slot.teacher.id, slot.day, slot.time)
            first = teacher_slots.get(key)
            if first is None:
                teacher_slots[key] = slot
                continue
            conflicts.append(ConflictDetail(
                id=f"teacher-{slot.teacher.id}-{slot.key.label}-{len(conflicts)}",
                conflict_type="teacher_conflict",
                description=f"Teacher {slot.teacher.name or slot.teacher.id} has overlapping classes",
                slots=[first, slot],
            ))

        room_slots: Dict[Tuple[str, str, str], Assignment] = {}
        for slot in self.slots:
            if slot.room is None:
                continue
            key = (slot.room.id, slot.day, slot.time)
            first = room_slots.get(key)
            if first is None:
                room_slots[key] = slot
                continue
            conflicts.append(ConflictDetail(
                id=f"room-{slot.room.id}-{slot.key.label}-{len(conflicts)}",
                conflict_type="room_conflict",
                description=f"Room {slot.room.name or slot.room.id} has overlapping classes",
                slots=[first, slot],
            ))

        logger.debug("Conflict scan over %d assignment(s) found %d conflict(s)", len(self.slots), len(conflicts))
        return ConflictReport(conflicts=conflicts, suggested_resolutions=[])

    def generate_resolutions(self, conflict: ConflictDetail) -> List[ResolutionAction]:
        resolutions = []
        target = conflict.slots[-1].key.label
        if conflict.conflict_type == "room_conflict":
            resolutions.append(ResolutionAction(
                action_type="change_room",
                description="Move one of the classes to a free room",
                target_slot=target,
                parameters={"room_id": conflict.slots[-1].room.id},
            ))

        if conflict.conflict_type == "teacher_conflict":
            resolutions.append(ResolutionAction(
                action_type="move_slot",
                description="Move to a different time slot",
                target_slot=target,
            ))
            resolutions.append(ResolutionAction(
                action_type="change_teacher",
                description="Assign another qualified teacher",
                target_slot=target,
                parameters={"teacher_id": conflict.slots[-1].teacher.id},
            ))

        return resolutions

    def report_with_resolutions(self) -> ConflictReport:
        report = self.detect_conflicts()
        for conflict in report.conflicts:
            report.suggested_resolutions.extend(self.generate_resolutions(conflict))
        return report
