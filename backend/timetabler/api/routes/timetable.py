import logging

from fastapi import APIRouter, Depends

from timetabler.core.config import Settings, get_settings
from timetabler.schemas.generator import GenerateTimetableRequest, GenerateTimetableResponse, GridDefinition
from timetabler.schemas.timetable import TimetableEvaluationRequest
from timetabler.services.fitness import FitnessReport, score_timetable
from timetabler.services.rule_scheduler import RuleBasedScheduler
from timetabler.services.validation import validate_timetable

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/grid", response_model=GridDefinition)
def default_grid(settings: Settings = Depends(get_settings)):
    return GridDefinition.from_settings(settings)


@router.post("/generate", response_model=GenerateTimetableResponse)
def generate_timetable(
    payload: GenerateTimetableRequest,
    settings: Settings = Depends(get_settings),
):
    grid = (payload.grid or GridDefinition.from_settings(settings)).to_grid()
    scheduler = RuleBasedScheduler(
        payload.subjects,
        payload.teachers,
        payload.rooms,
        grid,
        daily_cap=settings.teacher_daily_cap,
    )
    store = scheduler.generate()
    report = score_timetable(
        store.all_assignments(),
        payload.constraints,
        conflict_penalty=settings.conflict_penalty,
        violation_penalty=settings.constraint_violation_penalty,
    )
    warnings = validate_timetable(store.all_assignments(), payload.subjects)
    logger.info(
        "Generated timetable for %d subject(s): fitness=%d conflicts=%d warnings=%d",
        len(payload.subjects),
        report.fitness,
        report.conflict_count,
        len(warnings),
    )
    return GenerateTimetableResponse(
        slots=store.as_dict(),
        conflicts=report.conflicts,
        fitness=report.fitness,
        warnings=warnings,
    )


@router.post("/fitness", response_model=FitnessReport)
def timetable_fitness(
    payload: TimetableEvaluationRequest,
    settings: Settings = Depends(get_settings),
):
    return score_timetable(
        payload.slots,
        payload.constraints,
        conflict_penalty=settings.conflict_penalty,
        violation_penalty=settings.constraint_violation_penalty,
    )
