"""Static slot orders and lookup tables of the urpt record."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

GENERAL_FIELDS: tuple[str, ...] = ("name", "avatar", "outfit", "icon", "name_color")

SKILL_ORDER: tuple[str, ...] = (
    "combat",
    "stamina",
    "intelligence",
    "attack",
    "defense",
    "melee",
    "ranged",
    "magic",
)

EQUIPMENT_ORDER: tuple[str, ...] = (
    "back",
    "head",
    "trinket",
    "main_hand",
    "body",
    "off_hand",
    "hands",
    "legs",
    "pouch",
    "shoes",
    "necklace",
    "earrings",
    "ring",
    "charm",
)

# (grid-row-start, grid-column-start) -> equipment slot
SLOT_POSITION_TO_KEY: Mapping[tuple[int, int], str] = MappingProxyType(
    {
        (1, 1): "back",
        (1, 2): "head",
        (1, 3): "trinket",
        (2, 1): "main_hand",
        (2, 2): "body",
        (2, 3): "off_hand",
        (3, 1): "hands",
        (3, 2): "legs",
        (3, 3): "pouch",
        (4, 2): "shoes",
        (1, 5): "necklace",
        (2, 5): "earrings",
        (3, 5): "ring",
        (4, 5): "charm",
    }
)

ABILITY_SIGNIFICANT_SLOTS = 5
ABILITY_SLOTS = 8

FOOD_SLOTS = 6

HOUSING_ORDER: tuple[str, ...] = (
    "dining_room",
    "library",
    "dojo",
    "armory",
    "gym",
    "archery_range",
    "mystical_study",
)

HOUSE_KEY_BY_NAME: Mapping[str, str] = MappingProxyType(
    {
        "Dining Room": "dining_room",
        "Library": "library",
        "Dojo": "dojo",
        "Armory": "armory",
        "Gym": "gym",
        "Archery Range": "archery_range",
        "Mystical Study": "mystical_study",
    }
)

ACHIEVEMENT_ORDER: tuple[str, ...] = ("Beginner", "Novice", "Adept", "Veteran", "Elite", "Champion")

# Slot counts of the comma-joined segments, in record order.
SEGMENT_WIDTHS: Mapping[str, int] = MappingProxyType(
    {
        "general": len(GENERAL_FIELDS),
        "skills": len(SKILL_ORDER),
        "equipment": len(EQUIPMENT_ORDER),
        "abilities": ABILITY_SLOTS,
        "food": FOOD_SLOTS,
        "housing": len(HOUSING_ORDER),
        "achievements": len(ACHIEVEMENT_ORDER),
    }
)
