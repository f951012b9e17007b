"""Entry point assembling profile segments into a urpt record and viewer link."""

from __future__ import annotations

from urllib.parse import quote

from bs4 import BeautifulSoup, Tag

from charsheet.profile.extractors import (
    extract_abilities,
    extract_achievements,
    extract_equipment,
    extract_food,
    extract_general,
    extract_housing,
    extract_skills,
)
from charsheet.profile.models import SEGMENT_SEPARATOR, ProfileNotFoundError, ProfileSegments
from charsheet.profile.primitives import find_field, has_field_class
from charsheet.profile.selectors import selector

DEFAULT_SHEET_BASE_URL = "https://tib-san.github.io/mwi-character-sheet/"
DEFAULT_HTML_PARSER = "html.parser"

# Characters left untouched by JavaScript's encodeURIComponent besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def load_document(markup: str | bytes | Tag, *, parser: str = DEFAULT_HTML_PARSER) -> Tag:
    """Parse profile markup; already parsed trees are returned unchanged."""

    if isinstance(markup, Tag):
        return markup
    return BeautifulSoup(markup, parser)


def locate_profile_root(document: Tag) -> Tag:
    """Return the profile modal container, raising when it is absent."""

    if has_field_class(document, "modal"):
        return document
    modal = find_field(document, "modal")
    if modal is None:
        description = selector("modal").describe()
        raise ProfileNotFoundError(description)
    return modal


def parse_profile_segments(document: str | bytes | Tag) -> ProfileSegments:
    """Extract every record segment from a profile document."""

    modal = locate_profile_root(load_document(document))
    return ProfileSegments(
        general=extract_general(modal),
        skills=extract_skills(modal),
        equipment=extract_equipment(modal),
        abilities=extract_abilities(modal),
        food=extract_food(modal),
        housing=extract_housing(modal),
        achievements=extract_achievements(modal),
    )


def build_urpt(segments: ProfileSegments | None) -> str:
    """Join encoded segments into the ``general;skills;...;achievements`` record."""

    if segments is None:
        raise ValueError("Segments are required to build urpt")
    return SEGMENT_SEPARATOR.join(segment.encode() for segment in segments.ordered())


def encode_profile(document: str | bytes | Tag) -> str:
    return build_urpt(parse_profile_segments(document))


def build_sheet_link(urpt: str, base_url: str = DEFAULT_SHEET_BASE_URL) -> str:
    """Embed a record as the ``urpt`` query parameter of the viewer URL."""

    base = base_url if base_url.endswith("/") else f"{base_url}/"
    return f"{base}?urpt={quote(urpt, safe=_URI_COMPONENT_SAFE)}"


def build_character_sheet_link(
    document: str | bytes | Tag,
    base_url: str = DEFAULT_SHEET_BASE_URL,
) -> str:
    return build_sheet_link(encode_profile(document), base_url)
