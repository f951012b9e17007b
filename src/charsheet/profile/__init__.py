"""Share profile extraction and urpt record encoding."""

from .encoder import (
    DEFAULT_SHEET_BASE_URL,
    build_character_sheet_link,
    build_sheet_link,
    build_urpt,
    encode_profile,
    load_document,
    locate_profile_root,
    parse_profile_segments,
)
from .models import ProfileNotFoundError, ProfileSegments, Segment

__all__ = [
    "DEFAULT_SHEET_BASE_URL",
    "ProfileNotFoundError",
    "ProfileSegments",
    "Segment",
    "build_character_sheet_link",
    "build_sheet_link",
    "build_urpt",
    "encode_profile",
    "load_document",
    "locate_profile_root",
    "parse_profile_segments",
]
