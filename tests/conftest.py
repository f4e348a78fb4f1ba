"""
Shared fixtures for adventure-board tests.
"""

from __future__ import annotations

import os
import tempfile
from datetime import datetime

# Keep log files out of the working tree; must happen before package imports.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="adventure-board-logs-"))

import pytest

from tests._testkit import FakeStore, armor_row, make_character, spell_row, weapon_row


@pytest.fixture
def store() -> FakeStore:
    """Adventure 7 (active) with Thorin and Mira; adventure 8 finished."""
    return FakeStore(
        adventures=[
            {"adventure_id": 7, "chat_id": -100123, "status": "active", "created_at": datetime(2025, 3, 1, 18, 30)},
            {"adventure_id": 9, "chat_id": -100456, "status": "active", "created_at": datetime(2025, 3, 5, 10, 0)},
            {"adventure_id": 8, "chat_id": -100789, "status": "finished", "created_at": datetime(2025, 1, 1, 9, 0)},
        ],
        participants={7: [1, 2], 8: [1]},
        characters={
            1: make_character(1, "Thorin Oakenshield"),
            2: make_character(
                2,
                "Mira Vale",
                class_name="Wizard",
                hit_die=6,
                is_spellcaster=1,
                intelligence=17,
                created_at=datetime(2025, 2, 10, 8, 0),
            ),
            3: make_character(3, "Old Mira", user_id=1002, is_active=0, created_at=datetime(2025, 3, 1)),
        },
        skills={1: ["Athletics", "Intimidation"], 2: ["Arcana", "History"]},
        equipment={
            1: [armor_row(4, "Chain Mail", 16), weapon_row(2, "Longsword", "1d8", "slashing")],
            2: [weapon_row(5, "Quarterstaff", "1d6", "bludgeoning", equipped=0)],
        },
        spells={
            # Rows on a non-caster must never surface
            1: [spell_row("Shield", 1)],
            2: [
                spell_row("Shield", 1),
                spell_row("Fire Bolt", 0, "1d10", "fire"),
                spell_row("Magic Missile", 1, "1d4+1", "force"),
            ],
        },
    )
