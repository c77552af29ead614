from enum import Enum

from pydantic import BaseModel, Field


class RoomType(str, Enum):
    lecture_hall = "Lecture Hall"
    laboratory = "Laboratory"
    computer_lab = "Computer Lab"
    seminar_room = "Seminar Room"
    conference_room = "Conference Room"


class Room(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    id: str
    name: str = ""
    capacity: int = 0
    # Open vocabulary: RoomType lists the common values, any string is accepted.
    type: str = ""
    equipment: list[str] = Field(default_factory=list)
    availability: dict[str, list[str]] = Field(default_factory=dict)
