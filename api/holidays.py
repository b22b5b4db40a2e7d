from typing import Optional
from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse
from schemas.holidays.holiday import SyncRequest
from holiday_sources import synchronize_holidays
from api.dependencies import get_resolver, get_store
from docs.holidays.holidays import list_holidays_description, sync_holidays_description

router = APIRouter(prefix="/holidays", tags=["Holidays"])


# resolved holidays of a year
@router.get(
    "/{year}",
    response_model=dict,
    description=list_holidays_description,
    summary="List Holidays",
)
def list_holidays(
    year: int = Path(ge=1583),
    month: Optional[int] = Query(default=None, ge=1, le=12),
    stored: bool = Query(default=False),
    resolver=Depends(get_resolver),
    store=Depends(get_store),
):
    holidays = store.list_year(year) if stored else resolver.resolve(year)
    if month is not None:
        holidays = [h for h in holidays if h.date.month == month]
    return {
        "year": year,
        "holidays": [h.model_dump(mode="json", by_alias=True) for h in holidays],
    }


# replace a year's stored holidays
@router.post(
    "/sync",
    response_model=dict,
    description=sync_holidays_description,
    summary="Synchronize Holidays",
)
def sync_holidays(
    request: SyncRequest,
    resolver=Depends(get_resolver),
    store=Depends(get_store),
):
    result = synchronize_holidays(request.year, store, resolver)
    if result.success:
        return {
            "message": "Holidays synchronized successfully",
            "count": result.inserted_count,
            "errors": result.errors,
        }
    return JSONResponse(
        status_code=500,
        content={"message": "Error synchronizing holidays", "errors": result.errors},
    )
