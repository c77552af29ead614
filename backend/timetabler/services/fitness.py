from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from timetabler.models import Constraint
from timetabler.schemas.conflict import ConflictDetail
from timetabler.services.conflict_service import AssignmentSource, ConflictService

MAX_FITNESS = 100
CONFLICT_PENALTY = 10
VIOLATION_PENALTY = 5


class FitnessReport(BaseModel):
    fitness: int = Field(ge=0, le=MAX_FITNESS)
    conflict_count: int
    violated_constraint_count: int
    conflicts: list[ConflictDetail] = Field(default_factory=list)


def calculate_fitness(
    conflict_count: int,
    violated_count: int,
    *,
    conflict_penalty: int = CONFLICT_PENALTY,
    violation_penalty: int = VIOLATION_PENALTY,
) -> int:
    conflict_count = max(0, conflict_count)
    violated_count = max(0, violated_count)
    score = MAX_FITNESS - conflict_penalty * conflict_count - violation_penalty * violated_count
    return max(0, min(MAX_FITNESS, score))


def count_violated(constraints: Iterable[Constraint]) -> int:
    return sum(1 for constraint in constraints if constraint.violated)


def score_timetable(
    assignments: AssignmentSource,
    constraints: Iterable[Constraint] = (),
    *,
    conflict_penalty: int = CONFLICT_PENALTY,
    violation_penalty: int = VIOLATION_PENALTY,
) -> FitnessReport:
    """Re-run conflict detection and reduce it, with the violated constraints, to a 0-100 score.

    Nothing is cached; call again after every change to the store or constraints.
    """
    conflicts = ConflictService(assignments).detect_conflicts().conflicts
    violated = count_violated(constraints)
    return FitnessReport(
        fitness=calculate_fitness(
            len(conflicts),
            violated,
            conflict_penalty=conflict_penalty,
            violation_penalty=violation_penalty,
        ),
        conflict_count=len(conflicts),
        violated_constraint_count=violated,
        conflicts=conflicts,
    )
