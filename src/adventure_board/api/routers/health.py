# src/adventure_board/api/routers/health.py

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from adventure_board.aggregator.logic import AdventureLogic
from adventure_board.api.dependencies import get_logic
from adventure_board.api.schemas.responses import HealthResponse
from adventure_board.tools.logger import Logger


_LOG, _ = Logger().create(application="health_router")

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def _get_health(logic: AdventureLogic = Depends(get_logic)):
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        await logic.ping()
    except Exception as e:
        _LOG.warning(f"Health probe failed: {e}")
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "status": "Database connection failed", "timestamp": timestamp},
        )
    return HealthResponse(success=True, status="Database connected", timestamp=timestamp)
