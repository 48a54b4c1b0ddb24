"""Player lookups.

Everything except :meth:`PlayerService.get_trending_players` works on the
full player dump from ``/players/{sport}``, which is several megabytes.
Sleeper asks clients to fetch it at most once a day.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .client import HttpClient
from .models import Player, PlayersResponse, Sport, TrendingPlayer, TrendingType

POSITION_PRIORITY: Dict[str, int] = {"QB": 1, "RB": 2, "WR": 3, "TE": 4, "K": 5, "DEF": 6}


def _rank_key(player: Player) -> Tuple[int, int]:
    # falsy ranks (missing or 0) count as unranked
    if player.search_rank:
        return (0, player.search_rank)
    return (1, 0)


def _team_key(player: Player) -> Tuple[int, int, int]:
    if player.search_rank:
        return (0, player.search_rank, 0)
    return (1, 0, POSITION_PRIORITY.get(player.position or "", 999))


def _take(players: Iterable[Player], predicate: Callable[[Player], bool], limit: int) -> List[Player]:
    matches: List[Player] = []
    for player in players:
        if len(matches) >= limit:
            break
        if predicate(player):
            matches.append(player)
    return matches


class PlayerService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def get_all_players(self, sport: Sport) -> PlayersResponse:
        return await self._http.get(f"/players/{sport}", response_model=PlayersResponse)

    async def get_trending_players(
        self,
        sport: Sport,
        type: TrendingType,
        lookback_hours: int = 24,
        limit: int = 25,
    ) -> List[TrendingPlayer]:
        query = self._http.build_query_string({"lookback_hours": lookback_hours, "limit": limit})
        return await self._http.get(f"/players/{sport}/trending/{type}{query}", response_model=List[TrendingPlayer])

    async def get_player_by_id(self, sport: Sport, player_id: str) -> Optional[Player]:
        players = await self.get_all_players(sport)
        return players.get(player_id)

    async def search_players_by_name(self, sport: Sport, search_term: str, limit: int = 10) -> List[Player]:
        players = await self.get_all_players(sport)
        needle = search_term.lower()

        def matches(player: Player) -> bool:
            full_name = f"{player.first_name} {player.last_name}".lower()
            return (
                needle in full_name
                or needle in (player.search_full_name or "").lower()
                or needle in player.first_name.lower()
                or needle in player.last_name.lower()
            )

        return sorted(_take(players.values(), matches, limit), key=_rank_key)

    async def get_players_by_position(self, sport: Sport, position: str, limit: int = 50) -> List[Player]:
        players = await self.get_all_players(sport)
        found = _take(
            players.values(),
            lambda p: p.position == position or position in (p.fantasy_positions or []),
            limit,
        )
        return sorted(found, key=_rank_key)

    async def get_players_by_team(self, sport: Sport, team: str, limit: int = 100) -> List[Player]:
        players = await self.get_all_players(sport)
        return sorted(_take(players.values(), lambda p: p.team == team, limit), key=_team_key)

    async def get_active_players(self, sport: Sport, limit: int = 1000) -> List[Player]:
        """Players with status ``Active`` who are on a team."""
        players = await self.get_all_players(sport)
        found = _take(players.values(), lambda p: p.status == "Active" and bool(p.team), limit)
        return sorted(found, key=_rank_key)

    async def get_players_by_ids(self, sport: Sport, player_ids: Iterable[str]) -> List[Player]:
        players = await self.get_all_players(sport)
        return [players[player_id] for player_id in player_ids if player_id in players]

    async def get_rookie_players(self, sport: Sport, limit: int = 100) -> List[Player]:
        players = await self.get_all_players(sport)
        found = _take(players.values(), lambda p: p.years_exp == 0 and p.status == "Active", limit)
        return sorted(found, key=_rank_key)


__all__ = ["PlayerService", "POSITION_PRIORITY"]
