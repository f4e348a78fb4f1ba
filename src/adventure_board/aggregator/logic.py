# src/adventure_board/aggregator/logic.py

from typing import Any, Mapping, Protocol, Sequence, TypeVar

from adventure_board.db.session import DB
from adventure_board.db.queries import (
    PING,
    SELECT_ACTIVE_ADVENTURES,
    SELECT_PARTY_MEMBERS,
    SELECT_USER_ACTIVE_CHARACTER,
    SELECT_CHARACTER,
    SELECT_CHARACTER_SKILLS,
    SELECT_CHARACTER_EQUIPMENT,
    SELECT_CHARACTER_SPELLS,
    SELECT_CHARACTER_SPELLS_BRIEF,
)
from adventure_board.errors import NotFoundError
from adventure_board.models import (
    AdventureSummary,
    CharacterRecord,
    PartyMember,
    Spell,
    equipment_from_row,
)
from adventure_board.tools.logger import Logger


_LOG, _ = Logger().create(application="aggregator")

R = TypeVar("R", bound=CharacterRecord)


class Store(Protocol):
    async def fetch_one(self, q: str, p: Sequence[Any] = ()) -> dict | None: ...

    async def fetch_all(self, q: str, p: Sequence[Any] = ()) -> list[dict[str, Any]]: ...


class AdventureLogic:
    """Composes adventure, party and character records from the store.

    Every character record is built the same way: one primary row from a join
    over the reference tables, then skills, equipment and (for spellcasters
    only) spells fetched one after another by character id. A failure in any
    dependent fetch propagates; partial records are never returned.
    """

    def __init__(self, db: Store = DB):
        self.db = db

    async def ping(self) -> None:
        await self.db.fetch_one(PING)

    async def list_adventures(self) -> list[AdventureSummary]:
        rows = await self.db.fetch_all(SELECT_ACTIVE_ADVENTURES)
        return [AdventureSummary.model_validate(row) for row in rows or []]

    async def get_party(self, adventure_id: int) -> list[PartyMember]:
        rows = await self.db.fetch_all(SELECT_PARTY_MEMBERS, (adventure_id,))
        party = []
        for row in rows or []:
            party.append(await self._assemble(PartyMember, row, spells_query=SELECT_CHARACTER_SPELLS_BRIEF))
        _LOG.debug("Adventure %s: %d party members", adventure_id, len(party))
        return party

    async def get_my_character(self, user_id: int) -> CharacterRecord | None:
        """Most recently created active character of ``user_id``, or None."""
        row = await self.db.fetch_one(SELECT_USER_ACTIVE_CHARACTER, (user_id,))
        if not row:
            return None
        return await self._assemble(CharacterRecord, row, spells_query=SELECT_CHARACTER_SPELLS)

    async def get_character(self, character_id: int) -> CharacterRecord:
        row = await self.db.fetch_one(SELECT_CHARACTER, (character_id,))
        if not row:
            raise NotFoundError("Character not found")
        return await self._assemble(CharacterRecord, row, spells_query=SELECT_CHARACTER_SPELLS)

    async def _assemble(self, model: type[R], row: Mapping[str, Any], *, spells_query: str) -> R:
        record = dict(row)
        character_id = record["character_id"]

        record["skills"] = await self._skills(character_id)
        record["equipment"] = await self._equipment(character_id)
        if record.get("is_spellcaster"):
            record["spells"] = await self._spells(character_id, spells_query)
        else:
            record["spells"] = []

        return model.model_validate(record)

    async def _skills(self, character_id: int) -> list[str]:
        rows = await self.db.fetch_all(SELECT_CHARACTER_SKILLS, (character_id,))
        return [r["skill_name"] for r in rows or []]

    async def _equipment(self, character_id: int) -> list:
        rows = await self.db.fetch_all(SELECT_CHARACTER_EQUIPMENT, (character_id,))
        return [equipment_from_row(r) for r in rows or []]

    async def _spells(self, character_id: int, query: str) -> list[Spell]:
        rows = await self.db.fetch_all(query, (character_id,))
        return [Spell.model_validate(r) for r in rows or []]
