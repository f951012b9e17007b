"""Per-category extractors turning the profile modal into record segments.

Each extractor reads one region of the modal and never fails on missing
markup: absent nodes, unknown lookup keys and non-numeric labels all degrade
to empty slots so the record keeps its shape.
"""

from __future__ import annotations

import logging
import re

from bs4 import Tag

from charsheet.profile.models import Segment, build_segment
from charsheet.profile.primitives import (
    extract_identifier,
    extract_number,
    extract_variant,
    find_field,
    find_fields,
    node_text,
    normalize_whitespace,
)
from charsheet.profile.tables import (
    ABILITY_SIGNIFICANT_SLOTS,
    ABILITY_SLOTS,
    ACHIEVEMENT_ORDER,
    EQUIPMENT_ORDER,
    FOOD_SLOTS,
    HOUSE_KEY_BY_NAME,
    HOUSING_ORDER,
    SKILL_ORDER,
    SLOT_POSITION_TO_KEY,
)

logger = logging.getLogger(__name__)

_COMBAT_LABEL = "combat level"
_GRID_ROW_RE = re.compile(r"grid-row-start:\s*([0-9]+)")
_GRID_COLUMN_RE = re.compile(r"grid-column-start:\s*([0-9]+)")
_TIER_COUNT_RE = re.compile(r"([0-9]+)\s*/\s*([0-9]+)")


def _leveled_entry(node: Tag, level_field: str) -> str | None:
    """Encode ``<id>.<level>`` for an icon tile, or None when it has no id."""

    entity_id = extract_identifier(node.find("use"))
    if not entity_id:
        return None
    level = extract_number(node_text(find_field(node, level_field)))
    return f"{entity_id}.{level}"


def extract_general(modal: Tag) -> Segment:
    name_node = find_field(modal, "character_name")
    name: str | None = None
    if name_node is not None:
        name = (name_node.get("data-name") or "").strip() or node_text(name_node.find("span"))

    avatar_uses: list[Tag] = []
    for avatar in find_fields(modal, "avatar"):
        avatar_uses.extend(avatar.find_all("use"))
    avatar_use = avatar_uses[0] if avatar_uses else None
    outfit_use = avatar_uses[1] if len(avatar_uses) > 1 else None

    chat_icon = find_field(modal, "chat_icon")
    icon_use = chat_icon.find("use") if chat_icon is not None else None

    return build_segment(
        "general",
        [
            name,
            extract_identifier(avatar_use),
            extract_identifier(outfit_use),
            extract_identifier(icon_use),
            extract_variant(name_node),
        ],
    )


def extract_skills(modal: Tag) -> Segment:
    combat: str | None = None
    for row in find_fields(modal, "stat_row"):
        text = node_text(row) or ""
        if _COMBAT_LABEL in text.lower():
            combat = extract_number(text)
            break

    levels: dict[str, str] = {}
    for grid in find_fields(modal, "skill_grid"):
        for tile in find_fields(grid, "skill"):
            skill_id = extract_identifier(tile.find("use"))
            if not skill_id:
                continue
            levels[skill_id] = extract_number(node_text(find_field(tile, "skill_level")))

    return build_segment("skills", [combat, *(levels.get(skill) for skill in SKILL_ORDER[1:])])


def _grid_position(style: str) -> tuple[int, int] | None:
    row = _GRID_ROW_RE.search(style)
    column = _GRID_COLUMN_RE.search(style)
    if row is None or column is None:
        return None
    return int(row.group(1)), int(column.group(1))


def extract_equipment(modal: Tag) -> Segment:
    equipment: dict[str, str | None] = {}
    for model in find_fields(modal, "player_model"):
        for slot in find_fields(model, "equipment_slot"):
            position = _grid_position(slot.get("style") or "")
            key = SLOT_POSITION_TO_KEY.get(position) if position else None
            if key is None:
                logger.debug("Skipping equipment slot at unmapped grid position %s", position)
                continue
            equipment[key] = _leveled_entry(slot, "enhancement_level")

    return build_segment("equipment", [equipment.get(key) for key in EQUIPMENT_ORDER])


def extract_abilities(modal: Tag) -> Segment:
    entries: list[str | None] = []
    for container in find_fields(modal, "equipped_abilities"):
        for wrapper in container.find_all("div", recursive=False):
            entries.append(_leveled_entry(wrapper, "ability_level"))

    # Profiles list abilities starting from the last slot; display order is 2-3-4-5-1.
    if entries:
        entries = entries[1:] + entries[:1]
    entries = entries[:ABILITY_SIGNIFICANT_SLOTS]
    entries.extend([None] * (ABILITY_SLOTS - len(entries)))
    return build_segment("abilities", entries)


def extract_food(modal: Tag) -> Segment:
    """Food is not exposed by the profile modal; emit empty slots to keep the record shape."""

    return build_segment("food", [None] * FOOD_SLOTS)


def extract_housing(modal: Tag) -> Segment:
    housing: dict[str, str] = {}
    for rooms in find_fields(modal, "house_rooms"):
        for room in find_fields(rooms, "house_room"):
            room_name = node_text(find_field(room, "room_name"))
            key = HOUSE_KEY_BY_NAME.get(normalize_whitespace(room_name or ""))
            if key is None:
                logger.debug("Skipping house room with unknown name %r", room_name)
                continue
            housing[key] = extract_number(node_text(find_field(room, "room_level")))

    return build_segment("housing", [housing.get(key) for key in HOUSING_ORDER])


def _tier_completed(count_text: str) -> bool:
    match = _TIER_COUNT_RE.search(count_text)
    if match is None:
        return False
    have, total = int(match.group(1)), int(match.group(2))
    return have != 0 and total != 0 and have == total


def extract_achievements(modal: Tag) -> Segment:
    flags: dict[str, str] = {}
    for tier in find_fields(modal, "achievement_tier"):
        header = find_field(tier, "tier_header")
        if header is None:
            continue
        tier_name = node_text(find_field(header, "tier_name"))
        if not tier_name:
            logger.debug("Skipping achievement tier without a name")
            continue
        count_text = node_text(find_field(header, "tier_count")) or ""
        flags[tier_name] = "1" if _tier_completed(count_text) else "0"

    return build_segment(
        "achievements",
        [flags.get(tier) for tier in ACHIEVEMENT_ORDER],
        separator="",
        empty="0",
    )
