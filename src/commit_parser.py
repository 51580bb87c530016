"""
Turn GitHub push events into an activity map for the commit card.
"""

from datetime import date

from src.window_builder import ANCHOR_HOUR, date_key


def parse_commit_events(events: list[dict]) -> list[dict]:
    """
    Parse commit events from GitHub API events.

    Args:
        events: List of GitHub API event dictionaries

    Returns:
        List of dicts with:
        - date: push date (YYYY-MM-DD format)
        - repo: repository name
        - commit_count: number of commits in the push
    """
    commit_events = []

    for event in events:
        if event.get("type") != "PushEvent":
            continue

        created_at = event.get("created_at", "")
        if not created_at:
            continue

        payload = event.get("payload", {})
        # API sometimes omits commit details; a push is at least one commit
        if "size" in payload:
            commit_count = payload["size"]
        else:
            commit_count = len(payload.get("commits", [])) or 1

        commit_events.append({
            "date": created_at[:10],
            "repo": event.get("repo", {}).get("name", "unknown"),
            "commit_count": commit_count,
        })

    return commit_events


def build_activity_map(
    commit_events: list[dict], anchor_hour: int = ANCHOR_HOUR
) -> dict[int, int]:
    """
    Sum commit counts per day into an activity map.

    Args:
        commit_events: Parsed events with 'date' and 'commit_count' keys
        anchor_hour: Hour of day (0-23) day keys are anchored to

    Returns:
        Dict of date key -> total commits for that day
    """
    activity: dict[int, int] = {}

    for event in commit_events:
        try:
            day = date.fromisoformat(event.get("date") or "")
        except ValueError:
            continue

        key = date_key(day, anchor_hour)
        activity[key] = activity.get(key, 0) + event.get("commit_count", 0)

    return activity
