"""Pydantic response schemas for game server replies.

Server replies are ad hoc JSON objects; unknown fields are ignored.
"""

from pydantic import BaseModel, Field


class Colony(BaseModel):
    """Snapshot of a server-owned colony."""

    id: str | int
    name: str
    x: float = 0
    y: float = 0
    buildings: dict[str, int] = Field(default_factory=dict)
    resources: dict[str, int | float] = Field(default_factory=dict)
    population: int = 0


class LoginResponse(BaseModel):
    """Reply to POST /login."""

    userId: str | int  # noqa: N815
    token: str | None = None
    message: str | None = None


class AccountResponse(BaseModel):
    """Reply to POST /register."""

    userId: str | int | None = None  # noqa: N815
    message: str | None = None


class StateResponse(BaseModel):
    """Reply to GET /state."""

    userId: str | int | None = None  # noqa: N815
    tick: int = 0
    starCoins: int = 0  # noqa: N815
    colonies: list[Colony] = Field(default_factory=list)


class BuildResponse(BaseModel):
    """Reply to a build request (either API)."""

    message: str | None = None
    colony: Colony | None = None


class StatusResponse(BaseModel):
    """Reply to GET /api/status."""

    status: str
    tick: int = 0
    players: int | None = None


class RegisterResponse(BaseModel):
    """Reply to POST /api/register."""

    playerId: str | int  # noqa: N815
    token: str
    colonyId: str | int | None = None  # noqa: N815


class BurnResponse(BaseModel):
    """Reply to POST /api/bank/burn."""

    burned: int
    balance: int | None = None


class LaunchResponse(BaseModel):
    """Reply to POST /api/fleet/launch."""

    fleetId: str | int | None = None  # noqa: N815
    eta: int | None = None
    message: str | None = None
