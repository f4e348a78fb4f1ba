# src/adventure_board/client/api.py
"""HTTP access to the Adventure Board API."""

from __future__ import annotations

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from adventure_board.errors import ClientFetchError
from adventure_board.models import AdventureSummary, CharacterRecord, PartyMember


class BoardClient:
    """
    Thin async wrapper over the REST endpoints.

    Every method either returns parsed records or raises ClientFetchError;
    callers never see raw envelopes. No request is retried.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    async def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> BoardClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        client = await self._get_http_client()
        try:
            response = await client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise ClientFetchError(f"Request to {path} failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise ClientFetchError(
                f"Non-JSON response from {path}", status_code=response.status_code
            ) from exc

        if not isinstance(data, dict) or not data.get("success"):
            error = data.get("error") if isinstance(data, dict) else None
            raise ClientFetchError(
                error or f"HTTP {response.status_code} from {path}",
                status_code=response.status_code,
            )
        return data

    async def adventures(self) -> list[AdventureSummary]:
        data = await self._get("/api/adventures")
        return _parse_list(AdventureSummary, data.get("adventures"))

    async def party(self, adventure_id: int) -> list[PartyMember]:
        data = await self._get(f"/api/adventures/{adventure_id}/party")
        return _parse_list(PartyMember, data.get("party"))

    async def character(self, character_id: int) -> CharacterRecord:
        data = await self._get(f"/api/characters/{character_id}")
        if data.get("character") is None:
            raise ClientFetchError("Character payload missing")
        return _parse(CharacterRecord, data["character"])

    async def my_character(self, user_id: int) -> Optional[CharacterRecord]:
        data = await self._get("/api/my-character", params={"user_id": user_id})
        if data.get("character") is None:
            return None
        return _parse(CharacterRecord, data["character"])

    async def health(self) -> dict[str, Any]:
        return await self._get("/api/health")


def _parse(model, payload):
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ClientFetchError(f"Malformed {model.__name__} payload") from exc


def _parse_list(model, payload) -> list:
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ClientFetchError(f"Expected a list of {model.__name__}")
    return [_parse(model, item) for item in payload]
