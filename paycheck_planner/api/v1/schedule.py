"""POST /v1/schedule - assign obligations to a given set of paychecks"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request

from paycheck_planner.api.v1.schemas import ScheduleRequest, ScheduleResponse
from paycheck_planner.api.dependencies import get_request_id, get_settings, get_today
from paycheck_planner.config import Settings
from paycheck_planner.domain.scheduler import schedule
from paycheck_planner.domain.exceptions import DomainException
from paycheck_planner.infrastructure.observability.metrics import record_schedule, record_schedule_error
from paycheck_planner.infrastructure.observability.logging import log_schedule

router = APIRouter()


@router.post("/schedule", response_model=ScheduleResponse)
def create_schedule(
    request_body: ScheduleRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
    today: date = Depends(get_today),
):
    """
    Distribute bills, debt minimums and budget categories across paychecks.

    Each obligation is funded only by paychecks inside its billing cycle;
    anything that does not fit is returned as unassigned.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = schedule(
            [p.to_domain() for p in request_body.periods],
            [b.to_domain() for b in request_body.bills],
            [d.to_domain() for d in request_body.debts],
            [c.to_domain() for c in request_body.budget_categories],
            request_body.debt_strategy,
            request_body.household_extra_payment,
            as_of=request_body.as_of or today,
            horizon_months=settings.horizon_months,
            early_threshold_days=settings.early_threshold_days,
        )

    except DomainException as e:
        record_schedule_error()
        logging.warning(f"Invalid schedule input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        record_schedule_error()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_schedule(result.unassigned, result.extra_shortfall)
    log_schedule(
        request_id,
        "schedule",
        len(result.schedule),
        len(result.unassigned),
        sum(u.amount for u in result.unassigned),
        duration_ms,
    )

    return ScheduleResponse.model_validate(result)
