from __future__ import annotations

from datetime import datetime, timezone

import pytest

from adventure_board.client import render
from adventure_board.models import AdventureSummary, CharacterRecord, PartyMember


@pytest.mark.parametrize(
    "score, expected",
    [(1, -5), (8, -1), (9, -1), (10, 0), (11, 0), (15, 2), (20, 5), (None, 0)],
)
def test_ability_modifier(score, expected) -> None:
    assert render.ability_modifier(score) == expected


def test_format_modifier() -> None:
    assert render.format_modifier(0) == "+0"
    assert render.format_modifier(3) == "+3"
    assert render.format_modifier(-1) == "-1"


def test_empty_adventure_list() -> None:
    assert "No active adventures." in render.render_adventures([])


def test_adventure_list() -> None:
    text = render.render_adventures([AdventureSummary(adventure_id=7, status="active", participant_count=3)])

    assert "[7] 3 participant(s)" in text


def test_party_roster() -> None:
    member = PartyMember(character_id=1, name="Thorin", level=3, class_name="Fighter")

    text = render.render_party(7, [member])

    assert "Party of adventure 7" in text
    assert "[1] Thorin (Lv. 3) Fighter" in text


def _wizard(**overrides) -> CharacterRecord:
    payload = {
        "character_id": 2,
        "name": "Mira Vale",
        "class_name": "Wizard",
        "race_name": "Elf",
        "origin_name": "Sage",
        "level": 3,
        "experience": 900,
        "hit_points": 14,
        "max_hit_points": 18,
        "money": 15,
        "proficiency_bonus": 2,
        "intelligence": 17,
        "strength": 8,
        "is_spellcaster": True,
        "skills": ["Arcana", "History"],
        "equipment": [
            {"item_type": "armor", "item_id": 1, "item_name": "Leather", "armor_class": 11, "is_equipped": True},
            {"item_type": "weapon", "item_id": 2, "item_name": "Dagger", "damage": "1d4", "damage_type": "piercing"},
        ],
        "spells": [
            {"name": "Fire Bolt", "level": 0},
            {"name": "Light", "level": 0},
            {"name": "Magic Missile", "level": 1},
            {"name": "Shield", "level": 1},
        ],
    }
    payload.update(overrides)
    return CharacterRecord.model_validate(payload)


def test_character_sheet() -> None:
    text = render.render_character(_wizard())

    assert "Hit points: 14/18" in text
    assert "Proficiency bonus: +2" in text
    assert "Arcana, History" in text
    assert "Intelligence  17 (+3)" in text
    assert "Strength       8 (-1)" in text
    assert "Dexterity     10 (+0)" in text
    assert "*Armor: Leather (AC 11)" in text
    assert " Weapon: Dagger (1d4 piercing)" in text
    assert "Cantrips: Fire Bolt, Light" in text
    assert "Level 1: Magic Missile, Shield" in text


def test_character_sheet_without_extras() -> None:
    text = render.render_character(_wizard(skills=[], equipment=[], spells=[], is_spellcaster=False))

    assert "No skills" in text
    assert "No equipment" in text
    assert "Spells:" not in text


def test_error_screen() -> None:
    assert "Failed to load adventures" in render.render_error("Failed to load adventures")


def test_status_line() -> None:
    stamp = datetime(2025, 3, 1, 18, 30, 5, tzinfo=timezone.utc)

    assert render.render_status(None, None) == "[Connecting] last update --:--:--"
    assert render.render_status(True, stamp).startswith("[Connected] last update ")
    assert render.render_status(False, stamp) == f"[Disconnected] last update {stamp.astimezone():%H:%M:%S}"
