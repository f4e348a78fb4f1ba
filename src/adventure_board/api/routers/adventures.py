# src/adventure_board/api/routers/adventures.py

import sentry_sdk

from fastapi import APIRouter, Depends

from adventure_board.aggregator.logic import AdventureLogic
from adventure_board.api.dependencies import get_logic
from adventure_board.api.schemas.responses import AdventuresResponse, PartyResponse
from adventure_board.errors import StoreError
from adventure_board.tools.logger import Logger


_LOG, _ = Logger().create(application="adventures_router")

router = APIRouter()


@router.get("/adventures", response_model=AdventuresResponse)
async def _get_adventures(logic: AdventureLogic = Depends(get_logic)):
    """Active adventures, newest first, with participant counts."""
    try:
        adventures = await logic.list_adventures()
    except Exception as e:
        _LOG.exception("Error fetching adventures")
        sentry_sdk.capture_exception(e)
        raise StoreError("Failed to fetch adventures") from e
    return AdventuresResponse(success=True, adventures=adventures)


@router.get("/adventures/{adventure_id}/party", response_model=PartyResponse)
async def _get_party(adventure_id: int, logic: AdventureLogic = Depends(get_logic)):
    """Party members ordered by name, each with skills, equipment and spells."""
    try:
        party = await logic.get_party(adventure_id)
    except Exception as e:
        _LOG.exception(f"Error fetching party for adventure {adventure_id}")
        sentry_sdk.capture_exception(e)
        raise StoreError("Failed to fetch party members") from e
    return PartyResponse(success=True, party=party)
