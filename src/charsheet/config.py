"""Runtime configuration for profile encoding and viewer links."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from charsheet.profile.encoder import DEFAULT_HTML_PARSER, DEFAULT_SHEET_BASE_URL

SUPPORTED_HTML_PARSERS = frozenset({"html.parser", "lxml"})


def normalize_base_url(raw_value: str, *, name: str = "CHARSHEET_BASE_URL") -> str:
    """Validate a viewer base URL and normalize it to exactly one trailing slash."""

    base_url = raw_value.strip()
    if not base_url:
        raise ValueError(f"{name} cannot be empty")
    if not (base_url.startswith("http://") or base_url.startswith("https://")):
        raise ValueError(f"{name} must start with http:// or https://")
    return base_url.rstrip("/") + "/"


def validate_parser(raw_value: str, *, name: str = "CHARSHEET_HTML_PARSER") -> str:
    parser = raw_value.strip()
    if parser not in SUPPORTED_HTML_PARSERS:
        supported = ", ".join(sorted(SUPPORTED_HTML_PARSERS))
        raise ValueError(f"{name} must be one of: {supported}")
    return parser


@dataclass(frozen=True, slots=True)
class SheetSettings:
    """Validated settings for record encoding and link building."""

    base_url: str = DEFAULT_SHEET_BASE_URL
    html_parser: str = DEFAULT_HTML_PARSER

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SheetSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        base_url = normalize_base_url(source.get("CHARSHEET_BASE_URL", DEFAULT_SHEET_BASE_URL))
        html_parser = validate_parser(source.get("CHARSHEET_HTML_PARSER", DEFAULT_HTML_PARSER))

        return cls(base_url=base_url, html_parser=html_parser)
