import asyncio
import json
import logging
import re
import sys
from typing import Any, Dict, List, Optional

import httpx
import pytest
from loguru import logger

from puppybowl.client.roster_client import RosterClient
from puppybowl.rendering.container import Container

BASE_URL = "https://api.test/api/TEST-COHORT"

_PLAYER_PATH = re.compile(r"^/api/TEST-COHORT/players/(-?\d+)$")


class FakeRosterAPI:
    """In-memory stand-in for the Puppy Bowl players endpoints."""

    def __init__(self, players: Optional[List[Dict[str, Any]]] = None, enveloped=True):
        self.players = [dict(p) for p in players or []]
        self.enveloped = enveloped
        self.requests: List[httpx.Request] = []
        self.fail_next: Optional[int] = None
        self._next_id = max((p["id"] for p in self.players), default=0) + 1

    def _ok(self, payload: Dict[str, Any]) -> httpx.Response:
        if self.enveloped:
            payload = {"success": True, "error": None, "data": payload}
        return httpx.Response(200, json=payload)

    def _fail(self, status: int, message: str) -> httpx.Response:
        return httpx.Response(
            status,
            json={"success": False, "error": {"message": message}, "data": None},
        )

    def _find(self, player_id: int) -> Optional[Dict[str, Any]]:
        return next((p for p in self.players if p["id"] == player_id), None)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_next is not None:
            status, self.fail_next = self.fail_next, None
            return self._fail(status, "Injected failure")

        path = request.url.path
        if path == "/api/TEST-COHORT/players":
            if request.method == "GET":
                return self._ok({"players": self.players})
            if request.method == "POST":
                body = json.loads(request.content or b"{}")
                if not body.get("name") or not body.get("breed"):
                    return self._fail(400, "name and breed are required")
                player = {"id": self._next_id, "teamId": None, "status": "bench", **body}
                self._next_id += 1
                self.players.append(player)
                return self._ok({"newPlayer": player})

        match = _PLAYER_PATH.match(path)
        if match:
            player = self._find(int(match.group(1)))
            if player is None:
                return self._fail(404, f"No player with id {match.group(1)}")
            if request.method == "GET":
                return self._ok({"player": player})
            if request.method == "DELETE":
                self.players.remove(player)
                return self._ok({})

        return self._fail(404, "Not found")


@pytest.fixture
def fake_api() -> FakeRosterAPI:
    return FakeRosterAPI(
        [
            {"id": 1, "name": "Rex", "breed": "Boxer", "imageUrl": "rex.png", "teamId": 7},
            {"id": 2, "name": "Fido", "breed": "Lab", "imageUrl": "fido.png", "teamId": None},
        ]
    )


def make_roster(api) -> RosterClient:
    return RosterClient(
        client=httpx.AsyncClient(transport=httpx.MockTransport(api), base_url=BASE_URL)
    )


@pytest.fixture
def roster(fake_api) -> RosterClient:
    return make_roster(fake_api)


@pytest.fixture
def container() -> Container:
    return Container()


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def restore_logging():
    """Undoes setup_logging(): loguru sinks and stdlib root handlers."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    logger.remove()
    logger.add(sys.stderr)
    root.handlers[:] = handlers
    root.setLevel(level)
