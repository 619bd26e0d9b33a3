"""Shared pytest fixtures for World Control tests.

Provides in-process fake game servers built with FastAPI. The API clients
accept any httpx.Client, so a FastAPI TestClient can stand in for the
network.
"""

from typing import Optional

import httpx
import pytest
from fastapi import FastAPI, Header, HTTPException
from fastapi.testclient import TestClient

from src.client.api import ColonyApi, FleetApi
from src.client.session import ClientConfig

TEST_SERVER_URL = "http://testserver"


def _check_token(authorization: Optional[str], tokens: dict) -> str:
    """Return the user id for a bearer token or reject the request."""
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing token")
    user_id = tokens.get(authorization[len("Bearer "):])
    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid token")
    return user_id


def create_colony_server() -> FastAPI:
    """Fake colony server: /register, /login, /state, /build."""
    app = FastAPI()
    users: dict = {}  # username -> {"password", "id"}
    tokens: dict = {}  # token -> user id
    colonies: dict = {}  # user id -> list of colony dicts

    @app.post("/register")
    def register(payload: dict):
        username = payload["username"]
        if username in users:
            raise HTTPException(status_code=409, detail="Username taken")
        user_id = len(users) + 1
        users[username] = {"password": payload["password"], "id": user_id}
        colonies[user_id] = [
            {
                "id": f"c{user_id}",
                "name": f"{username.title()} Prime",
                "x": 3,
                "y": 4,
                "buildings": {"farm": 1},
                "resources": {"food": 100, "water": 60},
                "population": 25,
            }
        ]
        return {"userId": user_id, "message": "Account created"}

    @app.post("/login")
    def login(payload: dict):
        user = users.get(payload["username"])
        if user is None or user["password"] != payload["password"]:
            raise HTTPException(status_code=401, detail="Invalid credentials")
        token = f"token-{user['id']}"
        tokens[token] = user["id"]
        return {"userId": user["id"], "token": token}

    @app.get("/state")
    def state(userId: int, authorization: Optional[str] = Header(default=None)):  # noqa: N803
        if _check_token(authorization, tokens) != userId:
            raise HTTPException(status_code=403, detail="Not your state")
        return {"userId": userId, "tick": 7, "starCoins": 500, "colonies": colonies[userId]}

    @app.post("/build")
    def build(payload: dict, authorization: Optional[str] = Header(default=None)):
        user_id = _check_token(authorization, tokens)
        for colony in colonies.get(user_id, []):
            if colony["id"] == payload["colonyId"]:
                building = payload["building"]
                colony["buildings"][building] = colony["buildings"].get(building, 0) + payload["count"]
                return {"message": f"Built {payload['count']} {building}", "colony": colony}
        raise HTTPException(status_code=404, detail="Colony not found")

    return app


def create_fleet_server() -> FastAPI:
    """Fake fleet server: /api/status, /api/register, /api/build, /api/bank/burn, /api/fleet/launch."""
    app = FastAPI()
    tokens: dict = {}  # token -> player id
    balances: dict = {}  # player id -> currency
    launches: list = []

    @app.get("/api/status")
    def status():
        return {"status": "ok", "tick": 42, "players": len(tokens)}

    @app.post("/api/register")
    def register(payload: dict):
        player_id = f"p-{len(tokens) + 1}"
        token = f"tok-{len(tokens) + 1}"
        tokens[token] = player_id
        balances[player_id] = 1000
        return {"playerId": player_id, "token": token, "colonyId": f"home-{player_id}"}

    @app.post("/api/build")
    def build(payload: dict, authorization: Optional[str] = Header(default=None)):
        _check_token(authorization, tokens)
        return {"message": f"Queued {payload['building']} at {payload['colonyId']}"}

    @app.post("/api/bank/burn")
    def burn(payload: dict, authorization: Optional[str] = Header(default=None)):
        player_id = _check_token(authorization, tokens)
        if payload["amount"] > balances[player_id]:
            raise HTTPException(status_code=400, detail="Insufficient funds")
        balances[player_id] -= payload["amount"]
        return {"burned": payload["amount"], "balance": balances[player_id]}

    @app.post("/api/fleet/launch")
    def launch(payload: dict, authorization: Optional[str] = Header(default=None)):
        _check_token(authorization, tokens)
        launches.append(payload)
        return {"fleetId": f"f-{len(launches)}", "eta": abs(payload["target"]["x"]) + abs(payload["target"]["y"])}

    app.state.launches = launches
    return app


def scripted_input(*lines):
    """Line reader that replays lines, then signals end of input."""
    remaining = list(lines)

    def fake_input(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input


@pytest.fixture
def colony_api():
    """ColonyApi wired to the fake colony server."""
    api = ColonyApi(ClientConfig(TEST_SERVER_URL), http=TestClient(create_colony_server()))
    yield api
    api.close()


@pytest.fixture
def fleet_server():
    return create_fleet_server()


@pytest.fixture
def fleet_api(fleet_server):
    """FleetApi wired to the fake fleet server."""
    api = FleetApi(ClientConfig(TEST_SERVER_URL), http=TestClient(fleet_server))
    yield api
    api.close()


def failing_http(status_code: int = 500, body: str = "boom") -> httpx.Client:
    """HTTP client whose every request gets the same error status."""
    return httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(status_code, text=body)))


def unreachable_http() -> httpx.Client:
    """HTTP client whose every request fails to connect."""

    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.Client(transport=httpx.MockTransport(refuse))
