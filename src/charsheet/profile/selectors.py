"""Class-name selector configuration for the share profile markup.

The profile markup is styled with CSS-module class names of the form
``<Component>_<local>__<hash>``. The hash suffix changes with every upstream
build, so fields are addressed by the stable ``<Component>_<local>__`` prefix
only. Every class-name coupling to the upstream renderer lives in this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import re
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True)
class ClassSelector:
    """Match elements carrying a class token that starts with ``prefix``."""

    prefix: str

    @property
    def pattern(self) -> re.Pattern[str]:
        return _compile_prefix(self.prefix)

    def describe(self) -> str:
        return f".{self.prefix}*"


@lru_cache(maxsize=None)
def _compile_prefix(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(prefix)}")


PROFILE_SELECTORS: Mapping[str, ClassSelector] = MappingProxyType(
    {
        "modal": ClassSelector("SharableProfile_modal__"),
        "character_name": ClassSelector("CharacterName_name__"),
        "chat_icon": ClassSelector("CharacterName_chatIcon__"),
        "avatar": ClassSelector("SharableProfile_avatar__"),
        "stat_row": ClassSelector("SharableProfile_statRow__"),
        "skill_grid": ClassSelector("SharableProfile_skillGrid__"),
        "skill": ClassSelector("Skill_skill__"),
        "skill_level": ClassSelector("Skill_level__"),
        "player_model": ClassSelector("SharableProfile_playerModel__"),
        "equipment_slot": ClassSelector("SharableProfile_equipmentSlot__"),
        "enhancement_level": ClassSelector("Item_enhancementLevel__"),
        "equipped_abilities": ClassSelector("SharableProfile_equippedAbilities__"),
        "ability_level": ClassSelector("Ability_level__"),
        "house_rooms": ClassSelector("SharableProfile_houseRooms__"),
        "house_room": ClassSelector("SharableProfile_houseRoom__"),
        "room_name": ClassSelector("SharableProfile_name__"),
        "room_level": ClassSelector("SharableProfile_level__"),
        "achievement_tier": ClassSelector("SharableProfile_achievementTier__"),
        "tier_header": ClassSelector("SharableProfile_tierHeader__"),
        "tier_name": ClassSelector("SharableProfile_tierName__"),
        "tier_count": ClassSelector("SharableProfile_tierCount__"),
    }
)

# Name colours share the CharacterName_ prefix with purely structural classes.
VARIANT_CLASS_RE = re.compile(r"^CharacterName_([a-z]+)__")
VARIANT_CLASS_BLOCKLIST: tuple[str, ...] = (
    "_name__",
    "_characterName__",
    "_xlarge__",
    "_large__",
    "_medium__",
    "_small__",
)


def selector(field: str) -> ClassSelector:
    """Return the configured selector for a semantic field name."""

    try:
        return PROFILE_SELECTORS[field]
    except KeyError as exc:
        raise KeyError(f"No selector configured for field: {field}") from exc
