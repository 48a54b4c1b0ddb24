from __future__ import annotations

import httpx
import pytest

from conftest import make_player
from sleeper_sdk.errors import SleeperError

PLAYERS = {
    "4035": make_player("4035", first_name="Alvin", last_name="Kamara", search_full_name="alvinkamara",
                        position="RB", fantasy_positions=["RB"], team="NO", search_rank=40),
    "6794": make_player("6794", first_name="Justin", last_name="Jefferson", search_full_name="justinjefferson",
                        team="MIN", search_rank=3),
    "9999": make_player("9999", first_name="Rookie", last_name="Kicker", position="K", fantasy_positions=["K"],
                        team="NO", years_exp=0),
    "1111": make_player("1111", first_name="Free", last_name="Agent", team=None, search_rank=500),
    "2222": make_player("2222", first_name="Backup", last_name="Quarterback", position="QB",
                        fantasy_positions=["QB"], team="NO", search_rank=0, status="Inactive"),
    "NO": make_player("NO", first_name="New Orleans", last_name="Saints", position="DEF",
                      fantasy_positions=["DEF"], team="NO", years_exp=None),
}


@pytest.fixture()
def player_routes(fake):
    fake.routes["/players/nfl"] = PLAYERS
    return fake


async def test_get_all_players_and_by_id(sdk, player_routes) -> None:
    players = await sdk.players.get_all_players("nfl")
    assert set(players) == set(PLAYERS)
    assert (await sdk.players.get_player_by_id("nfl", "4035")).last_name == "Kamara"
    assert await sdk.players.get_player_by_id("nfl", "0") is None


async def test_trending_players_builds_query(sdk, fake) -> None:
    fake.routes["/players/nfl/trending/add"] = [{"player_id": "4035", "count": 1200}]

    trending = await sdk.players.get_trending_players("nfl", "add", lookback_hours=12, limit=5)

    assert trending[0].count == 1200
    assert fake.requests[0].url.params["lookback_hours"] == "12"
    assert fake.requests[0].url.params["limit"] == "5"


async def test_search_by_name_sorts_by_rank(sdk, player_routes) -> None:
    results = await sdk.players.search_players_by_name("nfl", "JUST")
    assert [p.player_id for p in results] == ["6794"]

    results = await sdk.players.search_players_by_name("nfl", "a")
    assert [p.player_id for p in results] == ["4035", "1111", "2222", "NO"]


async def test_search_limit_applies_before_sorting(sdk, player_routes) -> None:
    results = await sdk.players.search_players_by_name("nfl", "a", limit=1)
    assert [p.player_id for p in results] == ["4035"]


async def test_players_by_position_uses_fantasy_positions(sdk, player_routes) -> None:
    results = await sdk.players.get_players_by_position("nfl", "WR")
    assert [p.player_id for p in results] == ["6794", "1111"]


async def test_players_by_team_orders_unranked_by_position(sdk, player_routes) -> None:
    results = await sdk.players.get_players_by_team("nfl", "NO")
    # ranked first, then unranked (rank 0 counts as unranked) by position priority
    assert [p.player_id for p in results] == ["4035", "2222", "9999", "NO"]


async def test_active_and_rookie_players(sdk, player_routes) -> None:
    active = await sdk.players.get_active_players("nfl")
    assert [p.player_id for p in active] == ["6794", "4035", "9999", "NO"]

    rookies = await sdk.players.get_rookie_players("nfl")
    assert [p.player_id for p in rookies] == ["9999"]


async def test_players_by_ids_skips_unknown(sdk, player_routes) -> None:
    results = await sdk.players.get_players_by_ids("nfl", ["6794", "missing", "4035"])
    assert [p.player_id for p in results] == ["6794", "4035"]


async def test_filter_failure_propagates(sdk, fake) -> None:
    fake.routes["/players/nfl"] = httpx.Response(503)

    with pytest.raises(SleeperError) as excinfo:
        await sdk.players.get_players_by_position("nfl", "QB")
    assert excinfo.value.status == 503
