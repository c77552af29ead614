from pydantic import BaseModel, Field


class Teacher(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    id: str
    name: str = ""
    email: str = ""
    department: str = ""
    specialization: list[str] = Field(default_factory=list)
    # weekday -> time labels; advisory, the rule-based scheduler ignores it
    availability: dict[str, list[str]] = Field(default_factory=dict)
    max_hours_per_week: int = Field(default=40, alias="maxHoursPerWeek")

    def matches_subject(self, subject_name: str) -> bool:
        """Case-insensitive substring match in either direction against any specialization."""
        subject = subject_name.lower()
        for spec in self.specialization:
            topic = spec.lower()
            if topic in subject or subject in topic:
                return True
        return False

    def is_available(self, day: str, time: str) -> bool:
        # An empty list for a listed day means unavailable all day.
        if day not in self.availability:
            return True
        return time in self.availability[day]
