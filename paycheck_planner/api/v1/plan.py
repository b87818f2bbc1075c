"""POST /v1/plan - full paycheck plan from recurring paycheck settings"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request

from paycheck_planner.api.v1.schemas import PlanRequest, PlanResponse
from paycheck_planner.api.dependencies import get_request_id, get_settings, get_today
from paycheck_planner.config import Settings
from paycheck_planner.domain.planner import build_plan
from paycheck_planner.domain.exceptions import DomainException
from paycheck_planner.infrastructure.observability.metrics import record_schedule, record_schedule_error
from paycheck_planner.infrastructure.observability.logging import log_schedule

router = APIRouter()


@router.post("/plan", response_model=PlanResponse)
def create_plan(
    request_body: PlanRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
    today: date = Depends(get_today),
):
    """
    Build the household payment plan.

    Flow:
    1. Expand paycheck settings into dated paychecks
    2. Keep stored payments for past and imminent paychecks
    3. Schedule the remaining obligations into later paychecks
    4. Mark payments paid from transactions, split active and history

    Returns:
        Plan with active/history periods, unassigned and dismissed
        obligations, and newly scheduled payments for the caller to store
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        plan = build_plan(
            [p.to_domain() for p in request_body.paychecks],
            [b.to_domain() for b in request_body.bills],
            [d.to_domain() for d in request_body.debts],
            [c.to_domain() for c in request_body.budget_categories],
            request_body.debt_strategy,
            request_body.household_extra_payment,
            as_of=request_body.as_of or today,
            stored_payments=[s.to_domain() for s in request_body.stored_payments],
            transactions=[t.to_domain() for t in request_body.transactions],
            dismissed_keys=set(request_body.dismissed_keys),
            lookback_months=settings.lookback_months,
            horizon_months=settings.horizon_months,
            lock_threshold_days=settings.lock_threshold_days,
            early_threshold_days=settings.early_threshold_days,
            match_window_days=settings.paid_match_window_days,
            match_horizon_days=settings.paid_match_horizon_days,
        )

    except DomainException as e:
        record_schedule_error()
        logging.warning(f"Invalid plan input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        record_schedule_error()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_schedule(plan.unassigned, plan.extra_shortfall)
    log_schedule(
        request_id,
        "plan",
        len(plan.active) + len(plan.history),
        len(plan.unassigned),
        sum(u.amount for u in plan.unassigned),
        duration_ms,
    )

    return PlanResponse.model_validate(plan)
