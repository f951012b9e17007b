"""CLI command encoding a saved share profile page into a urpt record and viewer link."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from dotenv import load_dotenv

load_dotenv()

from charsheet.config import SUPPORTED_HTML_PARSERS, SheetSettings, normalize_base_url
from charsheet.profile.encoder import build_sheet_link, build_urpt, load_document, parse_profile_segments
from charsheet.profile.models import ProfileNotFoundError

logger = logging.getLogger(__name__)


def _read_markup(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Encode a character share profile into a urpt viewer link")
    parser.add_argument("--path", required=True, help="Saved profile HTML file, or '-' for stdin")
    parser.add_argument("--base-url", default=None, help="Character sheet viewer base URL")
    parser.add_argument(
        "--parser",
        default=None,
        choices=sorted(SUPPORTED_HTML_PARSERS),
        help="BeautifulSoup tree builder used to parse the profile",
    )
    parser.add_argument("--verbose", action="store_true", help="Log skipped profile fields")
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
        stream=sys.stderr,
    )

    try:
        settings = SheetSettings.from_env()
        base_url = normalize_base_url(args.base_url, name="--base-url") if args.base_url else settings.base_url
    except ValueError as error:
        logger.error("Configuration error: %s", error)
        return 2
    html_parser = args.parser or settings.html_parser

    try:
        markup = _read_markup(args.path)
    except OSError as exc:
        print(json.dumps({"path": args.path, "error": f"Failed to read profile: {exc}"}, ensure_ascii=True, indent=2))
        return 1

    try:
        segments = parse_profile_segments(load_document(markup, parser=html_parser))
    except ProfileNotFoundError as exc:
        print(json.dumps({"path": args.path, "error": str(exc)}, ensure_ascii=True, indent=2))
        return 1

    urpt = build_urpt(segments)
    logger.info("Encoded profile %s into %d-character record", args.path, len(urpt))

    payload = {
        "path": args.path,
        "urpt": urpt,
        "url": build_sheet_link(urpt, base_url),
        "segments": segments.to_dict(),
    }
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
