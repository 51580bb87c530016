"""
FastAPI web application for commit-card.

Serves the commit activity card as SVG and its day records as JSON.
"""

import logging

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel

from src.commit_card import layout_records
from src.commit_parser import build_activity_map, parse_commit_events
from src.config import (
    CARD_ANCHOR_HOUR,
    CARD_THEME,
    GITHUB_TOKEN,
    GITHUB_USERNAME,
    validate_config,
)
from src.github_client import GitHubClient, GitHubClientError
from src.renderer import render_svg
from src.themes import UnknownThemeError, get_palette

logger = logging.getLogger(__name__)

app = FastAPI(
    title="commit-card",
    description="Commit activity heat-map cards",
    version="0.1.0",
)

SVG_MEDIA_TYPE = "image/svg+xml"


class DayRecordModel(BaseModel):
    """A single day on the card."""

    date: str
    commits: int
    color: str
    month: int
    weekday: int
    iso_week: int
    x: int
    y: int


class CardResponse(BaseModel):
    """Card data for the configured user."""

    username: str
    theme: str
    days: int
    total_commits: int
    records: list[DayRecordModel]


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


def _fetch_activity() -> dict[int, int]:
    """
    Fetch GitHub events and convert them to an activity map.

    Raises:
        HTTPException: on configuration or GitHub API errors
    """
    try:
        validate_config()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")

    client = GitHubClient(GITHUB_TOKEN, GITHUB_USERNAME)

    try:
        events = client.get_user_events(pages=GitHubClient.MAX_PAGES)
    except GitHubClientError as e:
        logger.warning("GitHub request failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e))

    return build_activity_map(parse_commit_events(events), CARD_ANCHOR_HOUR)


def _build(theme: str):
    """Validate the theme, then fetch activity and lay out the card."""
    try:
        palette = get_palette(theme)
    except UnknownThemeError as e:
        raise HTTPException(status_code=400, detail=str(e))

    activity = _fetch_activity()
    window, records = layout_records(activity, palette, anchor_hour=CARD_ANCHOR_HOUR)
    return palette, window, records


@app.get("/api/card.svg")
def get_card_svg(theme: str = Query(CARD_THEME, description="'light' or 'dark'")):
    """
    Render the commit activity card.

    Returns:
        SVG image of the last 52 weeks of commits
    """
    palette, _, records = _build(theme)
    return Response(
        content=render_svg(records, palette),
        media_type=SVG_MEDIA_TYPE,
    )


@app.get("/api/card", response_model=CardResponse)
def get_card(theme: str = Query(CARD_THEME, description="'light' or 'dark'")):
    """
    Get the card's day records.

    Returns:
        JSON with window size, totals and one record per day, oldest first
    """
    _, window, records = _build(theme)
    return {
        "username": GITHUB_USERNAME or "",
        "theme": theme,
        "days": window.days,
        "total_commits": sum(record.commits for record in records),
        "records": [record.to_dict() for record in records],
    }
