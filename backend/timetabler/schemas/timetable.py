from pydantic import BaseModel, Field

from timetabler.models import Constraint
from timetabler.services.slot_store import Assignment


class TimetableEvaluationRequest(BaseModel):
    # A plain list, so one cell may appear more than once.
    slots: list[Assignment] = Field(default_factory=list)
    constraints: list[Constraint] = Field(default_factory=list)
