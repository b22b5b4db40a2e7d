from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from schemas.schedule.generate import ScheduleRequest
from scheduler.builder import generate_schedule
from scheduler.extractor import build_schedule_frames
from scheduler.setup import classify_days
from exceptions.custom_errors import *
from api.dependencies import get_resolver
import traceback
import logging
from docs.schedule.roster import schedule_roster_description

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedule", tags=["Roster"])


def infeasible_response(e: ScheduleInfeasibleError) -> JSONResponse:
    return JSONResponse(
        status_code=CUSTOM_ERRORS[type(e)],
        content={
            "message": str(e),
            "issues": [
                i.model_dump(mode="json", by_alias=True, exclude_none=True) for i in e.issues
            ],
        },
    )


# generate monthly roster
@router.post(
    "/generate",
    response_model=dict,
    description=schedule_roster_description,
    summary="Generate Roster",
)
def generate_roster(request: ScheduleRequest, resolver=Depends(get_resolver)):
    try:
        # Resolve the year's holidays unless the caller supplied them
        holidays = request.holidays
        if holidays is None:
            holidays = resolver.resolve(request.year)

        assignments = generate_schedule(
            month=request.month,
            year=request.year,
            employees=request.employees,
            holidays=holidays,
            rules=request.rules,
        )

        # ---- readable views ----
        days = classify_days(request.year, request.month, holidays)
        roster = sorted((e for e in request.employees if e.active), key=lambda e: (e.name, e.id))
        schedule_df, summary_df = build_schedule_frames(assignments, days, roster)

        sched_df = schedule_df.reset_index().rename(columns={"index": "name"})
        sched_df.insert(0, "id", [e.id for e in roster])

        # ==== final response ====
        response = {
            "assignments": [a.model_dump(mode="json", by_alias=True) for a in assignments],
            "schedule": sched_df.to_dict(orient="records"),
            "summary": summary_df.to_dict(orient="records"),
        }
        return response

    except ScheduleInfeasibleError as e:
        logger.info(str(e))
        return infeasible_response(e)
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
