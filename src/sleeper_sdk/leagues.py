"""League, roster, matchup and transaction lookups."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

from .client import HttpClient
from .models import (
    League,
    LeagueData,
    LeagueUser,
    Matchup,
    PlayoffMatchup,
    Roster,
    SportState,
    Sport,
    TradedPick,
    Transaction,
)
from .utils import avatar_url


class LeagueService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def get_league(self, league_id: str) -> Optional[League]:
        return await self._http.get(f"/league/{league_id}", response_model=League)

    async def get_league_rosters(self, league_id: str) -> List[Roster]:
        return await self._http.get(f"/league/{league_id}/rosters", response_model=List[Roster])

    async def get_league_users(self, league_id: str) -> List[LeagueUser]:
        return await self._http.get(f"/league/{league_id}/users", response_model=List[LeagueUser])

    async def get_league_matchups(self, league_id: str, week: int) -> List[Matchup]:
        return await self._http.get(f"/league/{league_id}/matchups/{week}", response_model=List[Matchup])

    async def get_winners_bracket(self, league_id: str) -> List[PlayoffMatchup]:
        return await self._http.get(f"/league/{league_id}/winners_bracket", response_model=List[PlayoffMatchup])

    async def get_losers_bracket(self, league_id: str) -> List[PlayoffMatchup]:
        return await self._http.get(f"/league/{league_id}/losers_bracket", response_model=List[PlayoffMatchup])

    async def get_league_transactions(self, league_id: str, round: int) -> List[Transaction]:
        """Transactions for one week (``round`` is the league's leg number)."""
        return await self._http.get(f"/league/{league_id}/transactions/{round}", response_model=List[Transaction])

    async def get_league_traded_picks(self, league_id: str) -> List[TradedPick]:
        return await self._http.get(f"/league/{league_id}/traded_picks", response_model=List[TradedPick])

    async def get_sport_state(self, sport: Sport) -> SportState:
        return await self._http.get(f"/state/{sport}", response_model=SportState)

    def get_league_avatar_url(self, avatar_id: Optional[str], thumbnail: bool = False) -> Optional[str]:
        return avatar_url(avatar_id, thumbnail=thumbnail)

    async def get_league_data(self, league_id: str) -> Optional[LeagueData]:
        league, rosters, users = await asyncio.gather(
            self.get_league(league_id),
            self.get_league_rosters(league_id),
            self.get_league_users(league_id),
        )
        if league is None:
            return None
        return LeagueData(league=league, rosters=rosters, users=users)

    async def get_matchups_for_week_range(
        self, league_id: str, start_week: int, end_week: int
    ) -> Dict[int, List[Matchup]]:
        weeks = list(range(start_week, end_week + 1))
        results = await asyncio.gather(*(self.get_league_matchups(league_id, week) for week in weeks))
        return dict(zip(weeks, results))

    async def get_roster_by_id(self, league_id: str, roster_id: int) -> Optional[Roster]:
        rosters = await self.get_league_rosters(league_id)
        return next((roster for roster in rosters if roster.roster_id == roster_id), None)

    async def get_roster_by_owner_id(self, league_id: str, owner_id: str) -> Optional[Roster]:
        rosters = await self.get_league_rosters(league_id)
        return next((roster for roster in rosters if roster.owner_id == owner_id), None)


__all__ = ["LeagueService"]
