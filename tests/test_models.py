"""
Tests for the record models and the equipment union.
"""

from decimal import Decimal

import pytest

from adventure_board.errors import DataIntegrityError
from adventure_board.models import (
    ArmorItem,
    CharacterRecord,
    Spell,
    WeaponItem,
    equipment_from_row,
)

from tests._testkit import armor_row, make_character, weapon_row


ARMOR_FIELDS = {"armor_class"}
WEAPON_FIELDS = {"damage", "damage_type"}


class TestEquipmentUnion:
    def test_armor_row_drops_weapon_columns(self):
        item = equipment_from_row(armor_row(4, "Chain Mail", 16))

        assert isinstance(item, ArmorItem)
        dumped = item.model_dump()
        assert ARMOR_FIELDS <= dumped.keys()
        assert not WEAPON_FIELDS & dumped.keys()
        assert dumped["is_equipped"] is True

    def test_weapon_row_drops_armor_columns(self):
        item = equipment_from_row(weapon_row(2, "Longsword", "1d8", "slashing", equipped=0))

        assert isinstance(item, WeaponItem)
        dumped = item.model_dump()
        assert WEAPON_FIELDS <= dumped.keys()
        assert not ARMOR_FIELDS & dumped.keys()
        assert dumped["is_equipped"] is False

    @pytest.mark.parametrize(
        "row",
        [
            {"item_type": "ring", "item_id": 1, "is_equipped": 1},
            {"item_type": None, "item_id": 1, "is_equipped": 1},
            {"item_id": 1, "is_equipped": 1},
        ],
    )
    def test_unknown_tag_is_integrity_error(self, row):
        with pytest.raises(DataIntegrityError):
            equipment_from_row(row)

    def test_json_payload_resolves_through_character(self):
        record = CharacterRecord.model_validate(
            {
                "character_id": 1,
                "name": "Thorin",
                "equipment": [
                    {"item_type": "armor", "item_id": 4, "is_equipped": True, "item_name": "Chain Mail", "armor_class": 16},
                    {"item_type": "weapon", "item_id": 2, "item_name": "Longsword", "damage": "1d8", "damage_type": "slashing"},
                ],
            }
        )

        assert [type(i) for i in record.equipment] == [ArmorItem, WeaponItem]


class TestCharacterRecord:
    def test_null_spellcaster_flag_is_false(self):
        record = CharacterRecord.model_validate(make_character(1, "Nobody", is_spellcaster=None))

        assert record.is_spellcaster is False

    def test_decimal_money(self):
        record = CharacterRecord.model_validate(make_character(1, "Rich", money=Decimal("12.50")))

        assert record.money == 12.5

    def test_unknown_columns_are_kept(self):
        record = CharacterRecord.model_validate(make_character(1, "Thorin", race_id=3))

        assert record.model_dump()["race_id"] == 3

    def test_ability_scores(self):
        record = CharacterRecord.model_validate(make_character(1, "Thorin", strength=18))

        scores = record.ability_scores()
        assert list(scores) == ["strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma"]
        assert scores["strength"] == 18


def test_cantrip():
    assert Spell(name="Fire Bolt", level=0).is_cantrip
    assert not Spell(name="Shield", level=1).is_cantrip
