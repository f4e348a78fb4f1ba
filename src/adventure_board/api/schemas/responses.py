# src/adventure_board/api/schemas/responses.py

from typing import Optional
from pydantic import BaseModel, Field

from adventure_board.models import AdventureSummary, CharacterRecord, PartyMember


class BaseResponse(BaseModel):
    success: bool = Field(
        ...,
        description="True when the request succeeded; False on error.",
        examples=[True],
    )

    model_config = {"extra": "allow"}


class ErrorResponse(BaseResponse):
    error: str = Field(
        ...,
        description="Client-safe description of the failure.",
        examples=["Character not found"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"success": False, "error": "Character not found"},
                {"success": False, "error": "User ID is required"},
            ]
        }
    }


class AdventuresResponse(BaseResponse):
    adventures: list[AdventureSummary] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": True,
                    "adventures": [
                        {
                            "adventure_id": 7,
                            "chat_id": -1001234567890,
                            "status": "active",
                            "created_at": "2025-03-01T18:30:00",
                            "participant_count": 3,
                        }
                    ],
                }
            ]
        }
    }


class PartyResponse(BaseResponse):
    party: list[PartyMember] = Field(default_factory=list)


class CharacterResponse(BaseResponse):
    character: CharacterRecord


class MyCharacterResponse(BaseResponse):
    character: Optional[CharacterRecord] = Field(
        None,
        description="The user's most recent active character, or null when there is none.",
    )
    message: Optional[str] = Field(
        None,
        description="Present only when character is null.",
        examples=["No active character found for this user"],
    )


class HealthResponse(BaseResponse):
    status: str = Field(..., examples=["Database connected"])
    timestamp: str = Field(..., description="ISO-8601 UTC time of the probe.")
