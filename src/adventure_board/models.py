"""
Records produced by the aggregator and consumed by the polling client.

Rows arrive from the store as plain dicts. They are validated into these
models once, at the data layer, so nothing downstream has to null-check
equipment columns or guess at flag types.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from adventure_board.errors import DataIntegrityError


ABILITIES: tuple[str, ...] = (
    "strength",
    "dexterity",
    "constitution",
    "intelligence",
    "wisdom",
    "charisma",
)


class Record(BaseModel):
    """Base for store projections; unknown columns are carried through."""

    model_config = ConfigDict(extra="allow")


class AdventureSummary(Record):
    adventure_id: int
    chat_id: int | None = None
    status: str
    created_at: datetime | None = None
    participant_count: int = 0


# =============================================================================
# Equipment (tagged union on item_type)
# =============================================================================


class _Item(BaseModel):
    # Columns that belong to the other variant are ignored, so they are
    # absent from the serialized item rather than null.
    model_config = ConfigDict(extra="ignore")

    item_id: int
    is_equipped: bool = False
    item_name: str | None = None

    @field_validator("is_equipped", mode="before")
    @classmethod
    def _tinyint_flag(cls, value: Any) -> bool:
        return bool(value)


class ArmorItem(_Item):
    item_type: Literal["armor"] = "armor"
    armor_class: int | None = None


class WeaponItem(_Item):
    item_type: Literal["weapon"] = "weapon"
    damage: str | None = None
    damage_type: str | None = None


EquipmentItem = Annotated[Union[ArmorItem, WeaponItem], Field(discriminator="item_type")]

_EQUIPMENT_ADAPTER: TypeAdapter[ArmorItem | WeaponItem] = TypeAdapter(EquipmentItem)


def equipment_from_row(row: Mapping[str, Any]) -> ArmorItem | WeaponItem:
    """Resolve one ``character_equipment`` row into its variant.

    Raises:
        DataIntegrityError: the tag is neither ``armor`` nor ``weapon`` or the
            row is otherwise malformed.
    """
    try:
        return _EQUIPMENT_ADAPTER.validate_python(dict(row))
    except ValidationError as exc:
        raise DataIntegrityError(
            f"Unresolvable equipment row (item_type={row.get('item_type')!r}, item_id={row.get('item_id')!r})"
        ) from exc


# =============================================================================
# Spells and characters
# =============================================================================


class Spell(BaseModel):
    name: str
    level: int = 0
    damage: str | None = None
    damage_type: str | None = None
    description: str | None = None

    @property
    def is_cantrip(self) -> bool:
        return self.level == 0


class CharacterRecord(Record):
    character_id: int
    user_id: int | None = None
    name: str
    level: int = 1
    experience: int = 0
    hit_points: int | None = None
    max_hit_points: int | None = None
    strength: int | None = None
    dexterity: int | None = None
    constitution: int | None = None
    intelligence: int | None = None
    wisdom: int | None = None
    charisma: int | None = None
    money: int | float | None = None
    race_name: str | None = None
    origin_name: str | None = None
    class_name: str | None = None
    hit_die: int | None = None
    is_spellcaster: bool = False
    proficiency_bonus: int | None = None

    skills: list[str] = Field(default_factory=list)
    equipment: list[EquipmentItem] = Field(default_factory=list)
    spells: list[Spell] = Field(default_factory=list)

    @field_validator("is_spellcaster", mode="before")
    @classmethod
    def _spellcaster_flag(cls, value: Any) -> bool:
        # NULL when the class join found nothing
        return bool(value)

    def ability_scores(self) -> dict[str, int | None]:
        return {name: getattr(self, name) for name in ABILITIES}


class PartyMember(CharacterRecord):
    first_name: str | None = None
    username: str | None = None
    joined_at: datetime | None = None
