# src/adventure_board/api/routers/characters.py

from typing import Optional

import sentry_sdk

from fastapi import APIRouter, Depends, Query

from adventure_board.aggregator.logic import AdventureLogic
from adventure_board.api.dependencies import get_logic
from adventure_board.api.schemas.responses import (
    CharacterResponse,
    ErrorResponse,
    MyCharacterResponse,
)
from adventure_board.errors import InvalidRequestError, NotFoundError, StoreError
from adventure_board.tools.logger import Logger


_LOG, _ = Logger().create(application="characters_router")

router = APIRouter()


def _parse_user_id(raw: Optional[str]) -> int:
    # An empty ?user_id= counts as missing, not as malformed
    if raw is None or not raw.strip():
        raise InvalidRequestError("User ID is required")
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidRequestError("Invalid request parameters") from None


@router.get(
    "/my-character",
    response_model=MyCharacterResponse,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}},
)
async def _get_my_character(
    user_id: Optional[str] = Query(None, description="Chat user id of the player."),
    logic: AdventureLogic = Depends(get_logic),
):
    uid = _parse_user_id(user_id)

    try:
        character = await logic.get_my_character(uid)
    except Exception as e:
        _LOG.exception(f"Error fetching current character for user {uid}")
        sentry_sdk.capture_exception(e)
        raise StoreError("Failed to fetch character details") from e

    if character is None:
        return MyCharacterResponse(
            success=True,
            character=None,
            message="No active character found for this user",
        )
    return MyCharacterResponse(success=True, character=character)


@router.get(
    "/characters/{character_id}",
    response_model=CharacterResponse,
    responses={404: {"model": ErrorResponse}},
)
async def _get_character(character_id: int, logic: AdventureLogic = Depends(get_logic)):
    try:
        character = await logic.get_character(character_id)
    except NotFoundError:
        raise
    except Exception as e:
        _LOG.exception(f"Error fetching character {character_id}")
        sentry_sdk.capture_exception(e)
        raise StoreError("Failed to fetch character details") from e
    return CharacterResponse(success=True, character=character)
