"""Entry point bundling the Sleeper API services behind one client."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx

from . import __version__, utils
from .client import HttpClient
from .config import ClientConfig
from .drafts import DraftService
from .errors import SleeperError
from .leagues import LeagueService
from .players import PlayerService
from .users import UserService

logger = logging.getLogger("sleeper_sdk.sdk")

API_VERSION = "v1"


class SleeperSDK:
    """All services share one :class:`HttpClient`, and so one pacing budget."""

    is_valid_user_id = staticmethod(utils.is_valid_user_id)
    is_valid_league_id = staticmethod(utils.is_valid_league_id)
    is_valid_draft_id = staticmethod(utils.is_valid_draft_id)
    is_valid_player_id = staticmethod(utils.is_valid_player_id)
    current_nfl_season = staticmethod(utils.current_nfl_season)
    estimated_nfl_week = staticmethod(utils.estimated_nfl_week)
    avatar_url = staticmethod(utils.avatar_url)

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._http = HttpClient(config, transport=transport)
        self.users = UserService(self._http)
        self.leagues = LeagueService(self._http)
        self.drafts = DraftService(self._http)
        self.players = PlayerService(self._http)

    async def __aenter__(self) -> "SleeperSDK":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def http(self) -> HttpClient:
        return self._http

    def get_client_config(self) -> ClientConfig:
        return self._http.config

    async def test_connection(self) -> bool:
        try:
            await self.leagues.get_sport_state("nfl")
        except SleeperError as exc:
            logger.warning("Connection check failed status=%s: %s", exc.status, exc.message)
            return False
        return True

    def get_version(self) -> Dict[str, str]:
        return {"sdk_version": __version__, "api_version": API_VERSION}

    async def close(self) -> None:
        await self._http.close()


__all__ = ["SleeperSDK", "API_VERSION"]
