"""
Schedule API endpoints
"""

from fastapi import APIRouter, HTTPException

from ..schemas import ScheduleRequest, ScheduleResult
from ..scheduling.constraints.input_constraints import InvalidScheduleInput
from ..services.scheduler_service import scheduler_service

router = APIRouter()

@router.post("/", response_model=ScheduleResult)
def create_schedule(request: ScheduleRequest):
    """
    Place the submitted tasks inside the time window around the busy intervals.
    Tasks that cannot be placed come back as conflicts, not as errors.
    """
    try:
        return scheduler_service.run_request(request)
    except InvalidScheduleInput as e:
        raise HTTPException(status_code=400, detail=str(e))
