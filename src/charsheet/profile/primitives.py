"""Field-level primitives shared by every profile extractor."""

from __future__ import annotations

import re

from bs4 import Tag

from charsheet.profile.selectors import VARIANT_CLASS_BLOCKLIST, VARIANT_CLASS_RE, selector

_DIGITS_RE = re.compile(r"[0-9]+")
_WHITESPACE_RE = re.compile(r"\s+")

_HREF_ATTRIBUTES = ("href", "xlink:href")


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim boundaries."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def node_text(node: Tag | None) -> str | None:
    """Return the trimmed text content of ``node``, or None when it is absent."""

    if node is None:
        return None
    return node.get_text().strip()


def find_field(node: Tag | None, field: str) -> Tag | None:
    """First descendant of ``node`` matching the selector configured for ``field``."""

    if node is None:
        return None
    return node.find(class_=selector(field).pattern)


def find_fields(node: Tag | None, field: str) -> list[Tag]:
    """All descendants of ``node`` matching the selector for ``field``, in tree order."""

    if node is None:
        return []
    return node.find_all(class_=selector(field).pattern)


def has_field_class(node: Tag, field: str) -> bool:
    pattern = selector(field).pattern
    return any(pattern.match(token) for token in node.get("class") or ())


def extract_identifier(node: Tag | None) -> str:
    """Return the fragment of an icon reference such as ``<use href="#icon_clover">``."""

    if node is None:
        return ""
    href = ""
    for attribute in _HREF_ATTRIBUTES:
        value = node.get(attribute)
        if value:
            href = value
            break
    parts = href.split("#")
    return parts[1] if len(parts) > 1 else ""


def extract_variant(node: Tag | None) -> str:
    """Return the colour/rarity word of a ``CharacterName_<word>__<hash>`` class."""

    if node is None:
        return ""
    for token in node.get("class") or ():
        if any(blocked in token for blocked in VARIANT_CLASS_BLOCKLIST):
            continue
        match = VARIANT_CLASS_RE.match(token)
        if match:
            return match.group(1)
    return ""


def extract_number(text: str | None) -> str:
    """Return the first run of digits in ``text``, e.g. ``"37"`` for ``"Combat Level 37"``."""

    match = _DIGITS_RE.search(text or "")
    return match.group(0) if match else ""
