from pydantic import BaseModel, Field
from typing import Literal, List

from timetabler.services.slot_store import Assignment

class ConflictDetail(BaseModel):
    id: str
    conflict_type: Literal["teacher_conflict", "room_conflict"] = Field(alias="type")
    description: str
    severity: Literal["hard", "soft"] = "hard"
    slots: List[Assignment]  # [first occupant, clashing assignment]

    model_config = {"populate_by_name": True}

class ResolutionAction(BaseModel):
    action_type: Literal["move_slot", "change_room", "change_teacher"]
    description: str
    target_slot: str  # "<Day>-<TimeLabel>"
    parameters: dict = Field(default_factory=dict)

class ConflictReport(BaseModel):
    conflicts: List[ConflictDetail]
    suggested_resolutions: List[ResolutionAction] = Field(default_factory=list)
