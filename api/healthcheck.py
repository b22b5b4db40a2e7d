from fastapi import APIRouter, Depends
from api.dependencies import get_store

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
def healthcheck(store=Depends(get_store)):
    return {"status": "ok", "holidayYears": store.years()}
