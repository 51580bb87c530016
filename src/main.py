"""
commit-card: render a GitHub commit activity card

Entry point for the command line.
"""

import argparse
import logging
import sys

from src.commit_card import render_card
from src.commit_parser import build_activity_map, parse_commit_events
from src.config import (
    CARD_ANCHOR_HOUR,
    CARD_THEME,
    GITHUB_TOKEN,
    GITHUB_USERNAME,
    LOG_LEVEL,
    validate_config,
)
from src.github_client import GitHubClient, GitHubClientError
from src.themes import Theme, UnknownThemeError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commit-card",
        description="Render the last 52 weeks of GitHub commits as an SVG card.",
    )
    parser.add_argument(
        "--theme",
        default=CARD_THEME,
        help=f"Card theme ({', '.join(t.value for t in Theme)})",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Write the SVG to this file instead of stdout",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    # Validate configuration
    try:
        validate_config()
    except ValueError as e:
        print(f"\nConfiguration Error:\n{e}", file=sys.stderr)
        return 1

    client = GitHubClient(GITHUB_TOKEN, GITHUB_USERNAME)

    try:
        events = client.get_user_events(pages=GitHubClient.MAX_PAGES)
    except GitHubClientError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    activity = build_activity_map(parse_commit_events(events), CARD_ANCHOR_HOUR)
    logger.info("Found commits on %d days", len(activity))

    try:
        svg = render_card(activity, args.theme, anchor_hour=CARD_ANCHOR_HOUR)
    except UnknownThemeError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(svg)
        print(f"Wrote commit card for {GITHUB_USERNAME} to {args.output}")
    else:
        print(svg)

    return 0


if __name__ == "__main__":
    sys.exit(main())
