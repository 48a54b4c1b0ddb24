"""Pydantic models for Sleeper API payloads.

Every model keeps unknown keys (``extra="allow"``); they are available via
``model_extra`` and are written back out by ``model_dump()``.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Sport = Literal["nfl", "nba", "lcs"]
SeasonType = Literal["regular", "pre", "post", "off"]
LeagueStatus = Literal["pre_draft", "drafting", "in_season", "complete"]
DraftStatus = Literal["pre_draft", "drafting", "paused", "complete"]
DraftType = Literal["snake", "linear", "auction"]
TransactionType = Literal["free_agent", "waiver", "trade", "commissioner"]
TrendingType = Literal["add", "drop"]


class SleeperModel(BaseModel):
    model_config = ConfigDict(extra="allow")


# Users


class SleeperUser(SleeperModel):
    user_id: str
    username: Optional[str] = None
    display_name: Optional[str] = None
    avatar: Optional[str] = None


class UserWithAvatar(SleeperUser):
    avatar_url: Optional[str] = None


class LeagueUserMetadata(SleeperModel):
    team_name: Optional[str] = None


class LeagueUser(SleeperUser):
    metadata: Optional[LeagueUserMetadata] = None
    is_owner: Optional[bool] = None


# Leagues


class LeagueSettings(SleeperModel):
    num_teams: Optional[int] = None
    playoff_teams: Optional[int] = None
    playoff_week_start: Optional[int] = None
    start_week: Optional[int] = None
    draft_rounds: Optional[int] = None
    trade_review_days: Optional[int] = None
    max_keepers: Optional[int] = None
    waiver_type: Optional[int] = None
    waiver_budget: Optional[int] = None
    waiver_clear_days: Optional[int] = None
    waiver_day_of_week: Optional[int] = None
    daily_waivers: Optional[int] = None
    reserve_slots: Optional[int] = None
    taxi_slots: Optional[int] = None
    taxi_years: Optional[int] = None
    pick_trading: Optional[int] = None
    best_ball: Optional[int] = None


class ScoringSettings(SleeperModel):
    pass_yd: Optional[float] = None
    pass_td: Optional[float] = None
    pass_int: Optional[float] = None
    rush_yd: Optional[float] = None
    rush_td: Optional[float] = None
    rec: Optional[float] = None
    rec_yd: Optional[float] = None
    rec_td: Optional[float] = None
    fum_lost: Optional[float] = None
    def_td: Optional[float] = None
    def_int: Optional[float] = None
    def_sack: Optional[float] = None
    def_safety: Optional[float] = None


class League(SleeperModel):
    league_id: str
    name: Optional[str] = None
    status: Optional[str] = None
    sport: Optional[str] = None
    season: Optional[str] = None
    season_type: Optional[str] = None
    total_rosters: Optional[int] = None
    settings: LeagueSettings = Field(default_factory=LeagueSettings)
    scoring_settings: ScoringSettings = Field(default_factory=ScoringSettings)
    roster_positions: List[str] = Field(default_factory=list)
    previous_league_id: Optional[str] = None
    draft_id: Optional[str] = None
    avatar: Optional[str] = None


class RosterSettings(SleeperModel):
    wins: int = 0
    losses: int = 0
    ties: int = 0
    total_moves: int = 0
    waiver_position: Optional[int] = None
    waiver_budget_used: int = 0
    fpts: float = 0
    fpts_decimal: float = 0
    fpts_against: float = 0
    fpts_against_decimal: float = 0
    ppts: Optional[float] = None
    ppts_decimal: Optional[float] = None


class Roster(SleeperModel):
    roster_id: int
    owner_id: Optional[str] = None
    league_id: Optional[str] = None
    starters: List[str] = Field(default_factory=list)
    players: Optional[List[str]] = None
    reserve: Optional[List[str]] = None
    taxi: Optional[List[str]] = None
    co_owners: Optional[List[str]] = None
    settings: RosterSettings = Field(default_factory=RosterSettings)


class Matchup(SleeperModel):
    roster_id: int
    matchup_id: Optional[int] = None
    points: float = 0
    custom_points: Optional[float] = None
    starters: List[str] = Field(default_factory=list)
    players: Optional[List[str]] = None
    starters_points: Optional[List[float]] = None
    players_points: Optional[Dict[str, float]] = None


class BracketSource(SleeperModel):
    w: Optional[int] = None
    l: Optional[int] = None


class PlayoffMatchup(SleeperModel):
    r: int
    m: int
    t1: Optional[int] = None
    t2: Optional[int] = None
    w: Optional[int] = None
    l: Optional[int] = None
    t1_from: Optional[BracketSource] = None
    t2_from: Optional[BracketSource] = None
    p: Optional[int] = None


class TradedPick(SleeperModel):
    season: str
    round: int
    roster_id: int
    previous_owner_id: Optional[int] = None
    owner_id: int


class WaiverBudget(SleeperModel):
    sender: int
    receiver: int
    amount: int


class TransactionSettings(SleeperModel):
    waiver_bid: Optional[int] = None


class TransactionMetadata(SleeperModel):
    notes: Optional[str] = None


class Transaction(SleeperModel):
    transaction_id: str
    type: str
    status: str
    status_updated: Optional[int] = None
    leg: Optional[int] = None
    creator: Optional[str] = None
    created: Optional[int] = None
    roster_ids: List[int] = Field(default_factory=list)
    consenter_ids: Optional[List[int]] = None
    adds: Optional[Dict[str, int]] = None
    drops: Optional[Dict[str, int]] = None
    draft_picks: List[TradedPick] = Field(default_factory=list)
    waiver_budget: List[WaiverBudget] = Field(default_factory=list)
    settings: Optional[TransactionSettings] = None
    metadata: Optional[TransactionMetadata] = None


class SportState(SleeperModel):
    week: int
    season: str
    season_type: str
    season_start_date: Optional[str] = None
    previous_season: Optional[str] = None
    leg: Optional[int] = None
    league_season: Optional[str] = None
    league_create_season: Optional[str] = None
    display_week: Optional[int] = None


# Drafts


class DraftSettings(SleeperModel):
    teams: int
    rounds: int
    pick_timer: Optional[int] = None
    slots_qb: Optional[int] = None
    slots_rb: Optional[int] = None
    slots_wr: Optional[int] = None
    slots_te: Optional[int] = None
    slots_k: Optional[int] = None
    slots_def: Optional[int] = None
    slots_flex: Optional[int] = None
    slots_bn: Optional[int] = None
    slots_super_flex: Optional[int] = None
    reversal_round: Optional[int] = None
    alpha_sort: Optional[int] = None


class DraftMetadata(SleeperModel):
    scoring_type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class Draft(SleeperModel):
    draft_id: str
    type: str
    status: str
    sport: Optional[str] = None
    season: Optional[str] = None
    season_type: Optional[str] = None
    league_id: Optional[str] = None
    start_time: Optional[int] = None
    created: Optional[int] = None
    last_picked: Optional[int] = None
    last_message_time: Optional[int] = None
    last_message_id: Optional[str] = None
    settings: DraftSettings
    metadata: DraftMetadata = Field(default_factory=DraftMetadata)
    draft_order: Optional[Dict[str, int]] = None
    slot_to_roster_id: Optional[Dict[str, int]] = None
    creators: Optional[List[str]] = None


class PlayerMetadata(SleeperModel):
    player_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None
    team: Optional[str] = None
    status: Optional[str] = None
    sport: Optional[str] = None
    number: Optional[str] = None
    injury_status: Optional[str] = None
    news_updated: Optional[str] = None


class DraftPick(SleeperModel):
    draft_id: Optional[str] = None
    player_id: str
    picked_by: Optional[str] = None
    roster_id: Optional[int] = None
    round: int
    draft_slot: int
    pick_no: int
    is_keeper: Optional[bool] = None
    metadata: PlayerMetadata = Field(default_factory=PlayerMetadata)


# Players


class Player(SleeperModel):
    player_id: str
    first_name: str = ""
    last_name: str = ""
    full_name: Optional[str] = None
    search_first_name: Optional[str] = None
    search_last_name: Optional[str] = None
    search_full_name: Optional[str] = None
    search_rank: Optional[int] = None
    sport: Optional[str] = None
    status: Optional[str] = None
    position: Optional[str] = None
    fantasy_positions: Optional[List[str]] = None
    team: Optional[str] = None
    number: Optional[int] = None
    age: Optional[int] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    college: Optional[str] = None
    years_exp: Optional[int] = None
    injury_status: Optional[str] = None
    injury_start_date: Optional[str] = None
    practice_participation: Optional[str] = None
    depth_chart_position: Optional[Union[int, str]] = None
    depth_chart_order: Optional[int] = None
    hashtag: Optional[str] = None
    birth_country: Optional[str] = None
    espn_id: Optional[Union[int, str]] = None
    yahoo_id: Optional[Union[int, str]] = None
    sportradar_id: Optional[str] = None
    stats_id: Optional[Union[int, str]] = None
    fantasy_data_id: Optional[Union[int, str]] = None
    rotowire_id: Optional[Union[int, str]] = None
    rotoworld_id: Optional[Union[int, str]] = None


class TrendingPlayer(SleeperModel):
    player_id: str
    count: int


PlayersResponse = Dict[str, Player]


# Composite results


class LeagueData(BaseModel):
    league: League
    rosters: List[Roster]
    users: List[LeagueUser]


class DraftData(BaseModel):
    draft: Draft
    picks: List[DraftPick]
    traded_picks: List[TradedPick]


class DraftStats(BaseModel):
    total_picks: int
    picks_by_round: Dict[int, int]
    picks_by_position: Dict[str, int]


class CurrentPick(BaseModel):
    round: int
    pick: int
    roster_id: Optional[int] = None
