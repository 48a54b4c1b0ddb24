"""Stateless helpers: ID format checks, season math and avatar URLs."""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

AVATAR_BASE_URL = "https://sleepercdn.com/avatars"
REGULAR_SEASON_WEEKS = 17

_NUMERIC_ID = re.compile(r"[0-9]+")
_TEAM_ABBREVIATION = re.compile(r"[A-Z]{2,3}")


def is_valid_user_id(user_id: str) -> bool:
    return bool(_NUMERIC_ID.fullmatch(user_id))


def is_valid_league_id(league_id: str) -> bool:
    return bool(_NUMERIC_ID.fullmatch(league_id))


def is_valid_draft_id(draft_id: str) -> bool:
    return bool(_NUMERIC_ID.fullmatch(draft_id))


def is_valid_player_id(player_id: str) -> bool:
    """Numeric IDs, or 2-3 letter team abbreviations for team defenses."""
    return bool(_NUMERIC_ID.fullmatch(player_id) or _TEAM_ABBREVIATION.fullmatch(player_id))


def current_nfl_season(today: Optional[date] = None) -> str:
    """Rough NFL season year; January and February belong to last year's season.

    For the authoritative value use ``LeagueService.get_sport_state("nfl")``.
    """
    today = today or date.today()
    if today.month <= 2:
        return str(today.year - 1)
    return str(today.year)


def estimated_nfl_week(today: Optional[date] = None) -> int:
    today = today or date.today()
    season_start = date(today.year, 9, 7)
    if today < season_start:
        return 1
    weeks = (today - season_start).days // 7
    return min(max(weeks + 1, 1), REGULAR_SEASON_WEEKS)


def avatar_url(avatar_id: Optional[str], thumbnail: bool = False) -> Optional[str]:
    if not avatar_id:
        return None
    path = "/thumbs/" if thumbnail else "/"
    return f"{AVATAR_BASE_URL}{path}{avatar_id}"


__all__ = [
    "AVATAR_BASE_URL",
    "avatar_url",
    "current_nfl_season",
    "estimated_nfl_week",
    "is_valid_draft_id",
    "is_valid_league_id",
    "is_valid_player_id",
    "is_valid_user_id",
]
