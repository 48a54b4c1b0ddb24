from __future__ import annotations

from typing import Any, Dict, List

import httpx
import pytest

from sleeper_sdk.config import ClientConfig
from sleeper_sdk.sdk import SleeperSDK

BASE_URL = "https://api.example.com/v1"


class FakeSleeper:
    """Serves canned JSON by path and records every request it sees."""

    def __init__(self) -> None:
        self.routes: Dict[str, Any] = {}
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v1")
        if path not in self.routes:
            return httpx.Response(404, text="null")
        route = self.routes[path]
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    def paths(self) -> List[str]:
        return [request.url.path.removeprefix("/v1") for request in self.requests]


@pytest.fixture()
def fake() -> FakeSleeper:
    return FakeSleeper()


@pytest.fixture()
async def sdk(fake: FakeSleeper):
    cfg = ClientConfig(base_url=BASE_URL, max_retries=0, retry_delay=0, min_request_interval=0)
    client = SleeperSDK(cfg, transport=httpx.MockTransport(fake.handler))
    yield client
    await client.close()


def make_player(player_id: str, **fields: Any) -> Dict[str, Any]:
    payload = {
        "player_id": player_id,
        "first_name": "First",
        "last_name": f"Last{player_id}",
        "status": "Active",
        "sport": "nfl",
        "position": "WR",
        "fantasy_positions": ["WR"],
        "team": "KC",
        "years_exp": 3,
    }
    payload.update(fields)
    return payload


def make_pick(pick_no: int, **fields: Any) -> Dict[str, Any]:
    payload = {
        "draft_id": "900",
        "player_id": str(1000 + pick_no),
        "picked_by": "u1",
        "roster_id": 1,
        "round": 1,
        "draft_slot": pick_no,
        "pick_no": pick_no,
        "is_keeper": None,
        "metadata": {"position": "RB"},
    }
    payload.update(fields)
    return payload
