"""Draft and draft-pick lookups."""

from __future__ import annotations

import asyncio
import math
from collections import Counter
from typing import List, Optional

from .client import HttpClient
from .models import CurrentPick, Draft, DraftData, DraftPick, DraftStats, TradedPick


class DraftService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def get_league_drafts(self, league_id: str) -> List[Draft]:
        return await self._http.get(f"/league/{league_id}/drafts", response_model=List[Draft])

    async def get_draft(self, draft_id: str) -> Optional[Draft]:
        return await self._http.get(f"/draft/{draft_id}", response_model=Draft)

    async def get_draft_picks(self, draft_id: str) -> List[DraftPick]:
        return await self._http.get(f"/draft/{draft_id}/picks", response_model=List[DraftPick])

    async def get_draft_traded_picks(self, draft_id: str) -> List[TradedPick]:
        return await self._http.get(f"/draft/{draft_id}/traded_picks", response_model=List[TradedPick])

    async def get_draft_data(self, draft_id: str) -> Optional[DraftData]:
        draft, picks, traded_picks = await asyncio.gather(
            self.get_draft(draft_id),
            self.get_draft_picks(draft_id),
            self.get_draft_traded_picks(draft_id),
        )
        if draft is None:
            return None
        return DraftData(draft=draft, picks=picks, traded_picks=traded_picks)

    async def get_picks_by_round(self, draft_id: str, round: int) -> List[DraftPick]:
        picks = await self.get_draft_picks(draft_id)
        return [pick for pick in picks if pick.round == round]

    async def get_picks_by_roster(self, draft_id: str, roster_id: int) -> List[DraftPick]:
        picks = await self.get_draft_picks(draft_id)
        return [pick for pick in picks if pick.roster_id == roster_id]

    async def get_picks_by_user(self, draft_id: str, user_id: str) -> List[DraftPick]:
        picks = await self.get_draft_picks(draft_id)
        return [pick for pick in picks if pick.picked_by == user_id]

    async def get_pick_by_number(self, draft_id: str, pick_number: int) -> Optional[DraftPick]:
        picks = await self.get_draft_picks(draft_id)
        return next((pick for pick in picks if pick.pick_no == pick_number), None)

    async def get_picks_by_position(self, draft_id: str, position: str) -> List[DraftPick]:
        picks = await self.get_draft_picks(draft_id)
        return [pick for pick in picks if pick.metadata.position == position]

    async def get_keeper_picks(self, draft_id: str) -> List[DraftPick]:
        picks = await self.get_draft_picks(draft_id)
        return [pick for pick in picks if pick.is_keeper is True]

    async def get_draft_stats(self, draft_id: str) -> DraftStats:
        picks = await self.get_draft_picks(draft_id)
        by_round = Counter(pick.round for pick in picks)
        by_position = Counter(pick.metadata.position for pick in picks if pick.metadata.position)
        return DraftStats(
            total_picks=len(picks),
            picks_by_round=dict(by_round),
            picks_by_position=dict(by_position),
        )

    async def is_draft_complete(self, draft_id: str) -> bool:
        draft = await self.get_draft(draft_id)
        return draft is not None and draft.status == "complete"

    async def get_current_pick(self, draft_id: str) -> Optional[CurrentPick]:
        """Work out who is on the clock from the picks made so far.

        Returns ``None`` for unknown drafts, and once the draft is complete or
        every slot is filled.
        In snake drafts even rounds run in reverse slot order.
        """
        draft, picks = await asyncio.gather(self.get_draft(draft_id), self.get_draft_picks(draft_id))
        if draft is None or draft.status == "complete":
            return None

        teams = draft.settings.teams
        rounds = draft.settings.rounds
        next_pick = len(picks) + 1
        if next_pick > teams * rounds:
            return None

        round_no = math.ceil(next_pick / teams)
        slot = (next_pick - 1) % teams + 1
        if draft.type == "snake" and round_no % 2 == 0:
            slot = teams - slot + 1

        roster_id = None
        if draft.slot_to_roster_id:
            roster_id = draft.slot_to_roster_id.get(str(slot))
        return CurrentPick(round=round_no, pick=slot, roster_id=roster_id)


__all__ = ["DraftService"]
