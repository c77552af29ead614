from __future__ import annotations

from pydantic import BaseModel, Field

from timetabler.core.config import Settings
from timetabler.models import Constraint, Course, Room, Teacher
from timetabler.schemas.conflict import ConflictDetail
from timetabler.services.rule_scheduler import WeeklyGrid
from timetabler.services.slot_store import Assignment


class GridDefinition(BaseModel):
    days: list[str] = Field(default_factory=list)
    time_slots: list[str] = Field(default_factory=list, alias="timeSlots")
    break_slots: list[str] = Field(default_factory=list, alias="breakSlots")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_settings(cls, settings: Settings) -> "GridDefinition":
        return cls(
            days=settings.schedule_days,
            time_slots=settings.schedule_time_slots,
            break_slots=settings.schedule_break_slots,
        )

    def to_grid(self) -> WeeklyGrid:
        return WeeklyGrid.build(self.days, self.time_slots, self.break_slots)


class GenerateTimetableRequest(BaseModel):
    subjects: list[Course] = Field(default_factory=list)
    teachers: list[Teacher] = Field(default_factory=list)
    rooms: list[Room] = Field(default_factory=list)
    grid: GridDefinition | None = None
    constraints: list[Constraint] = Field(default_factory=list)


class GenerateTimetableResponse(BaseModel):
    slots: dict[str, Assignment]
    conflicts: list[ConflictDetail] = Field(default_factory=list)
    fitness: int = Field(ge=0, le=100)
    warnings: list[str] = Field(default_factory=list)
