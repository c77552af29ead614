from __future__ import annotations

from collections.abc import ItemsView, KeysView
from dataclasses import dataclass

from pydantic import BaseModel, model_validator

from timetabler.models import Course, Room, SessionType, Teacher


@dataclass(frozen=True)
class SlotKey:
    day: str
    time: str

    @property
    def label(self) -> str:
        return f"{self.day}-{self.time}"

    def __str__(self) -> str:
        return self.label


class Assignment(BaseModel):
    """What occupies one (day, time) cell. A slot with no Assignment is free."""

    model_config = {"frozen": True}

    day: str
    time: str
    course: Course | None = None
    teacher: Teacher | None = None
    room: Room | None = None
    type: str = SessionType.theory.value

    @model_validator(mode="after")
    def validate_break_is_empty(self) -> "Assignment":
        if self.type == SessionType.break_.value and (self.course or self.teacher or self.room):
            raise ValueError("Break slots cannot carry a course, teacher or room")
        return self

    @property
    def key(self) -> SlotKey:
        return SlotKey(self.day, self.time)

    @property
    def is_break(self) -> bool:
        return self.type == SessionType.break_.value


class SlotAssignmentStore:
    """Mapping of (day, time) to Assignment; writing a key replaces its occupant.

    Not synchronized: a single scheduling run owns one store for its lifetime.
    """

    def __init__(self) -> None:
        self._slots: dict[SlotKey, Assignment] = {}

    def set(
        self,
        day: str,
        time: str,
        course: Course | None,
        teacher: Teacher | None = None,
        room: Room | None = None,
        *,
        session_type: str = SessionType.theory.value,
    ) -> Assignment:
        assignment = Assignment(day=day, time=time, course=course, teacher=teacher, room=room, type=session_type)
        self._slots[assignment.key] = assignment
        return assignment

    def set_break(self, day: str, time: str) -> Assignment:
        return self.set(day, time, None, session_type=SessionType.break_.value)

    def put(self, assignment: Assignment) -> None:
        self._slots[assignment.key] = assignment

    def get(self, day: str, time: str) -> Assignment | None:
        return self._slots.get(SlotKey(day, time))

    def remove(self, day: str, time: str) -> None:
        self._slots.pop(SlotKey(day, time), None)

    def all_assignments(self) -> ItemsView[SlotKey, Assignment]:
        # Live view: every iteration walks the current contents.
        return self._slots.items()

    def keys(self) -> KeysView[SlotKey]:
        return self._slots.keys()

    def as_dict(self) -> dict[str, Assignment]:
        return {key.label: assignment for key, assignment in self._slots.items()}

    def clear(self) -> None:
        self._slots.clear()

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, key: object) -> bool:
        return key in self._slots
