from fastapi import APIRouter

from timetabler.schemas.conflict import ConflictReport
from timetabler.schemas.timetable import TimetableEvaluationRequest
from timetabler.services.conflict_service import ConflictService

router = APIRouter()


@router.post("/detect", response_model=ConflictReport)
def detect_conflicts(payload: TimetableEvaluationRequest):
    return ConflictService(payload.slots).report_with_resolutions()
