from __future__ import annotations

import httpx
import pytest

from conftest import make_pick

DRAFT = {
    "draft_id": "900",
    "type": "snake",
    "status": "drafting",
    "sport": "nfl",
    "season": "2024",
    "league_id": "10",
    "settings": {"teams": 4, "rounds": 3},
    "metadata": {"scoring_type": "ppr", "name": "Mock", "description": ""},
    "slot_to_roster_id": {"1": 11, "2": 12, "3": 13, "4": 14},
}

PICKS = [
    make_pick(1, round=1, roster_id=11, picked_by="u1", metadata={"position": "RB"}),
    make_pick(2, round=1, roster_id=12, picked_by="u2", metadata={"position": "WR"}, is_keeper=True),
    make_pick(3, round=1, roster_id=13, picked_by="u3", metadata={"position": "RB"}),
    make_pick(4, round=1, roster_id=14, picked_by="u4", metadata={}),
    make_pick(5, round=2, roster_id=14, picked_by="u4", metadata={"position": "QB"}),
]


@pytest.fixture()
def draft_routes(fake):
    fake.routes["/draft/900"] = DRAFT
    fake.routes["/draft/900/picks"] = PICKS
    fake.routes["/draft/900/traded_picks"] = []
    fake.routes["/league/10/drafts"] = [DRAFT]
    return fake


async def test_draft_data(sdk, draft_routes) -> None:
    data = await sdk.drafts.get_draft_data("900")

    assert data.draft.metadata.scoring_type == "ppr"
    assert len(data.picks) == 5
    assert data.traded_picks == []
    assert (await sdk.drafts.get_league_drafts("10"))[0].draft_id == "900"


async def test_pick_filters(sdk, draft_routes) -> None:
    assert [p.pick_no for p in await sdk.drafts.get_picks_by_round("900", 2)] == [5]
    assert [p.pick_no for p in await sdk.drafts.get_picks_by_roster("900", 14)] == [4, 5]
    assert [p.pick_no for p in await sdk.drafts.get_picks_by_user("900", "u2")] == [2]
    assert [p.pick_no for p in await sdk.drafts.get_picks_by_position("900", "RB")] == [1, 3]
    assert [p.pick_no for p in await sdk.drafts.get_keeper_picks("900")] == [2]
    assert (await sdk.drafts.get_pick_by_number("900", 3)).picked_by == "u3"
    assert await sdk.drafts.get_pick_by_number("900", 42) is None


async def test_draft_stats(sdk, draft_routes) -> None:
    stats = await sdk.drafts.get_draft_stats("900")

    assert stats.total_picks == 5
    assert stats.picks_by_round == {1: 4, 2: 1}
    assert stats.picks_by_position == {"RB": 2, "WR": 1, "QB": 1}


async def test_current_pick_reverses_even_snake_rounds(sdk, draft_routes) -> None:
    # five picks made: pick 6 is round 2, second in order, which is slot 3 in a snake
    current = await sdk.drafts.get_current_pick("900")

    assert current is not None
    assert current.round == 2
    assert current.pick == 3
    assert current.roster_id == 13


async def test_current_pick_linear_order(sdk, fake) -> None:
    fake.routes["/draft/900"] = {**DRAFT, "type": "linear", "slot_to_roster_id": None}
    fake.routes["/draft/900/picks"] = PICKS

    current = await sdk.drafts.get_current_pick("900")

    assert current.round == 2
    assert current.pick == 2
    assert current.roster_id is None


async def test_current_pick_none_when_complete_or_full(sdk, fake) -> None:
    fake.routes["/draft/900"] = {**DRAFT, "status": "complete"}
    fake.routes["/draft/900/picks"] = PICKS
    assert await sdk.drafts.get_current_pick("900") is None
    assert await sdk.drafts.is_draft_complete("900") is True

    fake.routes["/draft/900"] = {**DRAFT, "settings": {"teams": 2, "rounds": 2}}
    assert await sdk.drafts.get_current_pick("900") is None
    assert await sdk.drafts.is_draft_complete("900") is False


async def test_draft_unknown_to_sleeper_is_none(sdk, fake) -> None:
    fake.routes["/draft/0/picks"] = []
    fake.routes["/draft/0/traded_picks"] = []
    for lookup, expected in (
        (sdk.drafts.get_draft, None),
        (sdk.drafts.get_draft_data, None),
        (sdk.drafts.is_draft_complete, False),
        (sdk.drafts.get_current_pick, None),
    ):
        fake.routes["/draft/0"] = httpx.Response(200, text="null")
        assert await lookup("0") is expected
