from __future__ import annotations

import pytest


def _use(href: str) -> str:
    return f'<svg><use href="{href}"></use></svg>'


def _skill(skill_id: str, level: str) -> str:
    return (
        '<div class="Skill_skill__3MrMc">'
        f"{_use('/static/media/skills_sprite.svg#' + skill_id)}"
        f'<div class="Skill_level__39kts">{level}</div>'
        "</div>"
    )


def _equipment_slot(row: int, column: int, item_id: str | None = None, enhancement: str | None = None) -> str:
    inner = ""
    if item_id:
        inner += _use("/static/media/items_sprite.svg#" + item_id)
    if enhancement:
        inner += f'<div class="Item_enhancementLevel__19g-e">{enhancement}</div>'
    return (
        f'<div class="SharableProfile_equipmentSlot__kOrug" '
        f'style="grid-row-start: {row}; grid-column-start: {column};">{inner}</div>'
    )


def _ability(ability_id: str, level: str) -> str:
    return (
        "<div>"
        '<div class="Ability_ability__3gk0j">'
        f"{_use('/static/media/abilities_sprite.svg#' + ability_id)}"
        f'<div class="Ability_level__1L-do">{level}</div>'
        "</div>"
        "</div>"
    )


def _room(name: str, level: str) -> str:
    return (
        '<div class="SharableProfile_houseRoom__2FW_d">'
        f'<div class="SharableProfile_name__1RDS1">{name}</div>'
        f'<div class="SharableProfile_level__1vQoc">{level}</div>'
        "</div>"
    )


def _tier(name: str, count: str) -> str:
    return (
        '<div class="SharableProfile_achievementTier__2izCL">'
        '<div class="SharableProfile_tierHeader__1iNyx">'
        f'<div class="SharableProfile_tierName__3pBrY">{name}</div>'
        f'<div class="SharableProfile_tierCount__3mJd2">{count}</div>'
        "</div>"
        "</div>"
    )


def build_profile_html(
    *,
    name_block: str | None = None,
    skills: str | None = None,
    equipment: str | None = None,
    abilities: str | None = None,
    housing: str | None = None,
    achievements: str | None = None,
) -> str:
    """Assemble a share profile page; omitted regions use a fully populated default."""

    if name_block is None:
        name_block = (
            '<div class="CharacterName_characterName__2FqyZ CharacterName_xlarge__1K-Jj">'
            '<div class="CharacterName_chatIcon__22lxV">'
            f"{_use('/static/media/chat_icons_sprite.svg#fury')}"
            "</div>"
            '<div class="CharacterName_name__1amXp CharacterName_burble__1z9bQ" data-name="Kiwi">'
            "<span>Kiwi</span>"
            "</div>"
            "</div>"
            '<div class="SharableProfile_avatar__1hHtL">'
            f"{_use('/static/media/avatars_sprite.svg#knight')}"
            '<svg><use xlink:href="/static/media/avatar_outfits_sprite.svg#knight_outfit"></use></svg>'
            "</div>"
        )
    if skills is None:
        skills = (
            '<div class="SharableProfile_statRow__2bT8_">Total Level: 1500</div>'
            '<div class="SharableProfile_statRow__2bT8_">Combat Level: 112</div>'
            '<div class="SharableProfile_skillGrid__3vIqO">'
            + _skill("magic", "Lv. 95")
            + _skill("stamina", "Lv. 100")
            + _skill("milking", "Lv. 80")
            + _skill("intelligence", "Lv. 98")
            + _skill("attack", "Lv. 90")
            + _skill("defense", "Lv. 91")
            + _skill("melee", "Lv. 92")
            + "</div>"
        )
    if equipment is None:
        equipment = (
            '<div class="SharableProfile_playerModel__o34sV">'
            + _equipment_slot(1, 1)
            + _equipment_slot(1, 2, "crimson_helmet", "+5")
            + _equipment_slot(2, 1, "sword_1", "+5")
            + _equipment_slot(2, 2, "crimson_plate_body")
            + _equipment_slot(1, 4, "mystery_box", "+1")
            + _equipment_slot(4, 5, "trainee_charm", "+2")
            + "</div>"
        )
    if abilities is None:
        abilities = (
            '<div class="SharableProfile_equippedAbilities__1NNpC">'
            + _ability("fireball", "Lv.10")
            + _ability("ice_spear", "Lv.11")
            + _ability("heal", "Lv.12")
            + _ability("toxic_pollen", "Lv.13")
            + _ability("berserk", "Lv.14")
            + "</div>"
        )
    if housing is None:
        housing = (
            '<div class="SharableProfile_houseRooms__3QGPc">'
            + _room("Dining Room", "Level 4")
            + _room("Library", "Level 3")
            + _room("Observatory", "Level 9")
            + _room("Gym", "Level 2")
            + "</div>"
        )
    if achievements is None:
        achievements = (
            '<div class="SharableProfile_achievements__2b0Ia">'
            + _tier("Beginner", "10 / 10")
            + _tier("Novice", "7 / 10")
            + _tier("Adept", "12/12")
            + _tier("Veteran", "0 / 0")
            + '<div class="SharableProfile_achievementTier__2izCL"><span>Elite</span></div>'
            + "</div>"
        )

    return (
        "<html><body>"
        '<div class="GamePage_gamePanel__3uNKN">unrelated page chrome</div>'
        '<div class="SharableProfile_modal__2OmCQ">'
        f"{name_block}{skills}{equipment}{abilities}{housing}{achievements}"
        "</div>"
        "</body></html>"
    )


EXPECTED_SEGMENTS = {
    "general": "Kiwi,knight,knight_outfit,fury,burble",
    "skills": "112,100,98,90,91,92,,95",
    "equipment": ",".join(
        ["", "crimson_helmet.5", "", "sword_1.5", "crimson_plate_body.", "", "", "", "", "", "", "", "", "trainee_charm.2"]
    ),
    "abilities": "ice_spear.11,heal.12,toxic_pollen.13,berserk.14,fireball.10,,,",
    "food": ",,,,,",
    "housing": "4,3,,,2,,",
    "achievements": "101000",
}


@pytest.fixture
def profile_html() -> str:
    return build_profile_html()


@pytest.fixture
def expected_urpt() -> str:
    return ";".join(EXPECTED_SEGMENTS.values())


@pytest.fixture
def profile_builder():
    return build_profile_html


@pytest.fixture
def expected_segments() -> dict[str, str]:
    return dict(EXPECTED_SEGMENTS)
