from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence
from dataclasses import dataclass
import logging
from time import perf_counter

from timetabler.core.config import DEFAULT_BREAK_SLOTS, DEFAULT_DAYS, DEFAULT_TIME_SLOTS, Settings
from timetabler.core.exceptions import GridDefinitionError
from timetabler.models import Course, Room, RoomType, SessionType, Teacher
from timetabler.services.slot_store import SlotAssignmentStore

logger = logging.getLogger(__name__)

DEFAULT_DAILY_CAP = 2


def _duplicates(labels: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    duplicates: list[str] = []
    for label in labels:
        if label in seen and label not in duplicates:
            duplicates.append(label)
        seen.add(label)
    return duplicates


@dataclass(frozen=True)
class WeeklyGrid:
    days: tuple[str, ...]
    time_slots: tuple[str, ...]
    break_slots: frozenset[str] = frozenset()

    @classmethod
    def build(cls, days: Sequence[str], time_slots: Sequence[str], break_slots: Sequence[str] = ()) -> "WeeklyGrid":
        return cls(days=tuple(days), time_slots=tuple(time_slots), break_slots=frozenset(break_slots))

    @classmethod
    def default(cls) -> "WeeklyGrid":
        return cls.build(DEFAULT_DAYS, DEFAULT_TIME_SLOTS, DEFAULT_BREAK_SLOTS)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WeeklyGrid":
        return cls.build(settings.schedule_days, settings.schedule_time_slots, settings.schedule_break_slots)

    @property
    def size(self) -> int:
        return len(self.days) * len(self.time_slots)

    def is_break(self, time: str) -> bool:
        return time in self.break_slots

    def validate(self) -> None:
        if not self.days:
            raise GridDefinitionError("Grid must define at least one day")
        if not self.time_slots:
            raise GridDefinitionError("Grid must define at least one time slot")
        blank = [label for label in (*self.days, *self.time_slots) if not label or not label.strip()]
        if blank:
            raise GridDefinitionError("Grid labels cannot be blank", blank)
        duplicate_days = _duplicates(self.days)
        if duplicate_days:
            raise GridDefinitionError(f"Duplicate day label(s): {', '.join(duplicate_days)}", duplicate_days)
        duplicate_times = _duplicates(self.time_slots)
        if duplicate_times:
            raise GridDefinitionError(f"Duplicate time slot label(s): {', '.join(duplicate_times)}", duplicate_times)
        unknown_breaks = sorted(self.break_slots - set(self.time_slots))
        if unknown_breaks:
            raise GridDefinitionError(
                f"Break label(s) not in the time slots: {', '.join(unknown_breaks)}",
                unknown_breaks,
            )


class RuleBasedScheduler:
    """Single deterministic pass over the grid.

    Subjects are picked round-robin with one index shared by the whole week.
    Teachers whose specialization matches the subject are tried first, and a
    teacher takes at most ``daily_cap`` classes per day. When no teacher fits,
    the slot keeps its subject with no teacher or room.
    """

    def __init__(
        self,
        subjects: Sequence[Course],
        teachers: Sequence[Teacher],
        rooms: Sequence[Room],
        grid: WeeklyGrid | None = None,
        *,
        daily_cap: int = DEFAULT_DAILY_CAP,
    ) -> None:
        self.subjects = list(subjects)
        self.teachers = list(teachers)
        self.rooms = list(rooms)
        self.grid = grid or WeeklyGrid.default()
        self.daily_cap = daily_cap

    def generate(self, store: SlotAssignmentStore | None = None) -> SlotAssignmentStore:
        self.grid.validate()
        store = store if store is not None else SlotAssignmentStore()

        started = perf_counter()
        # day -> teacher id -> classes given that day; local to this run
        daily_counts: defaultdict[str, Counter[str]] = defaultdict(Counter)
        subject_index = 0
        unstaffed = 0

        for day in self.grid.days:
            for time in self.grid.time_slots:
                if self.grid.is_break(time):
                    store.set_break(day, time)
                    continue

                if not self.subjects:
                    store.set(day, time, None, session_type=SessionType.free.value)
                    continue

                subject = self.subjects[subject_index]
                teacher = self._pick_teacher(subject, daily_counts[day])
                room = self._pick_room(subject) if teacher is not None else None
                store.set(day, time, subject, teacher, room, session_type=self._session_type(subject))

                if teacher is not None:
                    daily_counts[day][teacher.id] += 1
                else:
                    unstaffed += 1
                    logger.debug("No teacher under the daily cap for %s on %s %s", subject.name, day, time)

                subject_index = (subject_index + 1) % len(self.subjects)

        logger.info(
            "Rule-based schedule filled %d slot(s) over %d day(s); %d without a teacher (%.2f ms)",
            self.grid.size,
            len(self.grid.days),
            unstaffed,
            (perf_counter() - started) * 1000,
        )
        return store

    def candidate_teachers(self, subject: Course) -> list[Teacher]:
        matching = [teacher for teacher in self.teachers if teacher.matches_subject(subject.name)]
        others = [teacher for teacher in self.teachers if not teacher.matches_subject(subject.name)]
        return matching + others

    @staticmethod
    def _session_type(subject: Course) -> str:
        # Break is reserved for empty grid cells; a subject tagged Break is still taught.
        if subject.type == SessionType.break_.value:
            return SessionType.theory.value
        return subject.type

    def _pick_teacher(self, subject: Course, day_counts: Counter[str]) -> Teacher | None:
        for candidate in self.candidate_teachers(subject):
            if not candidate.id:
                continue
            if day_counts[candidate.id] < self.daily_cap:
                return candidate
        return None

    def _pick_room(self, subject: Course) -> Room | None:
        if not self.rooms:
            return None
        wanted = RoomType.computer_lab if subject.is_lab else RoomType.lecture_hall
        for room in self.rooms:
            if room.type == wanted.value:
                return room
        return self.rooms[0]
