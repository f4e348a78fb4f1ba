# src/adventure_board/client/render.py
"""
Plain-text screens for the polling client.

Each function takes parsed records and returns the full text of one screen;
the controller hands that text to whatever display it was given.
"""

from collections import defaultdict
from datetime import datetime
from typing import Iterable, Optional

from adventure_board.models import (
    ABILITIES,
    AdventureSummary,
    ArmorItem,
    CharacterRecord,
    PartyMember,
    Spell,
    WeaponItem,
)


RULE = "-" * 40


def ability_modifier(score: Optional[int]) -> int:
    """D&D ability modifier; a missing score counts as 10."""
    return ((score if score is not None else 10) - 10) // 2


def format_modifier(modifier: int) -> str:
    return f"+{modifier}" if modifier >= 0 else str(modifier)


def render_adventures(adventures: Iterable[AdventureSummary]) -> str:
    adventures = list(adventures)
    lines = ["Active adventures", RULE]
    if not adventures:
        lines.append("No active adventures.")
        return "\n".join(lines)

    for adventure in adventures:
        lines.append(f"[{adventure.adventure_id}] {adventure.participant_count} participant(s)")
    lines.append(RULE)
    lines.append("p <id>: view party")
    return "\n".join(lines)


def render_party(adventure_id: int, party: Iterable[PartyMember]) -> str:
    party = list(party)
    lines = [f"Party of adventure {adventure_id}", RULE]
    if not party:
        lines.append("Nobody has joined yet.")
    for member in party:
        lines.append(f"[{member.character_id}] {member.name} (Lv. {member.level}) {member.class_name or '?'}")
    lines.append(RULE)
    lines.append("c <id>: character details | b: back")
    return "\n".join(lines)


def _equipment_lines(character: CharacterRecord) -> list[str]:
    if not character.equipment:
        return ["  No equipment"]

    lines = []
    for item in character.equipment:
        mark = "*" if item.is_equipped else " "
        if isinstance(item, ArmorItem):
            ac = f" (AC {item.armor_class})" if item.armor_class is not None else ""
            lines.append(f" {mark}Armor: {item.item_name}{ac}")
        elif isinstance(item, WeaponItem):
            damage = f" ({item.damage} {item.damage_type})" if item.damage and item.damage_type else ""
            lines.append(f" {mark}Weapon: {item.item_name}{damage}")
    return lines


def _spell_lines(spells: Iterable[Spell]) -> list[str]:
    by_level: dict[int, list[str]] = defaultdict(list)
    for spell in spells:
        by_level[spell.level].append(spell.name)

    lines = []
    for level in sorted(by_level):
        label = "Cantrips" if level == 0 else f"Level {level}"
        lines.append(f"  {label}: {', '.join(by_level[level])}")
    return lines


def render_character(character: CharacterRecord) -> str:
    c = character
    proficiency = format_modifier(c.proficiency_bonus) if c.proficiency_bonus is not None else "?"
    lines = [
        f"{c.name}",
        RULE,
        f"Race: {c.race_name or '?'}",
        f"Origin: {c.origin_name or '?'}",
        f"Class: {c.class_name or '?'}",
        f"Level: {c.level}",
        f"Experience: {c.experience}",
        f"Hit points: {c.hit_points}/{c.max_hit_points}",
        f"Money: {c.money if c.money is not None else 0} coins",
        f"Proficiency bonus: {proficiency}",
        "",
        "Skills:",
        f"  {', '.join(c.skills) if c.skills else 'No skills'}",
        "",
        "Abilities:",
    ]
    for ability in ABILITIES:
        score = getattr(c, ability)
        value = score if score is not None else 10
        lines.append(f"  {ability.capitalize():<13} {value:>2} ({format_modifier(ability_modifier(score))})")

    lines.append("")
    lines.append("Equipment:")
    lines.extend(_equipment_lines(c))

    if c.is_spellcaster and c.spells:
        lines.append("")
        lines.append("Spells:")
        lines.extend(_spell_lines(c.spells))

    lines.append(RULE)
    lines.append("x: close")
    return "\n".join(lines)


def render_no_character() -> str:
    return "\n".join([
        "You have no active character.",
        "Create one with the bot first.",
        RULE,
        "x: close",
    ])


def render_main_menu(user_id: Optional[int]) -> str:
    who = f"user {user_id}" if user_id is not None else "unknown user"
    return "\n".join([
        f"Main menu ({who})",
        RULE,
        "m: my character",
        "g: my party",
    ])


def render_error(message: str) -> str:
    return "\n".join([
        "Error",
        RULE,
        message,
        RULE,
        "r: retry",
    ])


def render_status(connected: Optional[bool], last_updated: Optional[datetime]) -> str:
    """Footer line: connection state and local time of the last good fetch."""
    state = "Disconnected" if connected is False else "Connected" if connected else "Connecting"
    when = last_updated.astimezone().strftime("%H:%M:%S") if last_updated else "--:--:--"
    return f"[{state}] last update {when}"
