import math
from enum import Enum

from pydantic import BaseModel, Field, computed_field


class SessionType(str, Enum):
    theory = "Theory"
    lab = "Lab"
    project = "Project"
    break_ = "Break"
    free = "Free"


class Course(BaseModel):
    """A catalog course, also used as the scheduler's subject record."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str = ""
    name: str
    code: str = ""
    credits: float = 0
    department: str = ""
    prerequisites: list[str] = Field(default_factory=list)
    max_students: int = Field(default=50, alias="maxStudents")
    type: str = SessionType.theory.value

    @computed_field(alias="sessionsPerWeek")
    @property
    def sessions_per_week(self) -> int:
        return math.ceil(self.credits)

    @property
    def is_lab(self) -> bool:
        return self.type == SessionType.lab.value or "lab" in self.name.lower()
