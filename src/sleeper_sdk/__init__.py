"""Sleeper fantasy sports API SDK."""

__version__ = "1.0.0"

from .client import HttpClient, build_query_string
from .config import ClientConfig
from .drafts import DraftService
from .errors import SleeperError, classify_error
from .leagues import LeagueService
from .players import PlayerService
from .sdk import SleeperSDK
from .users import UserService

__all__ = [
    "ClientConfig",
    "DraftService",
    "HttpClient",
    "LeagueService",
    "PlayerService",
    "SleeperError",
    "SleeperSDK",
    "UserService",
    "build_query_string",
    "classify_error",
]
