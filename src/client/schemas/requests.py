"""Pydantic request schemas for the game server endpoints."""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Body of POST /login and POST /register."""

    username: str = Field(min_length=1, description="Account name")
    password: str = Field(description="Account password")


class ColonyBuildRequest(BaseModel):
    """Body of POST /build."""

    userId: str | int  # noqa: N815
    colonyId: str  # noqa: N815
    building: str = Field(min_length=1, description="Building type to construct")
    count: int = Field(default=1, gt=0, description="Number of buildings")


class PlayerRegisterRequest(BaseModel):
    """Body of POST /api/register."""

    name: str = Field(min_length=1, description="Player name")


class FleetBuildRequest(BaseModel):
    """Body of POST /api/build."""

    colonyId: str  # noqa: N815
    building: str = Field(min_length=1, description="Building type to construct")


class BurnRequest(BaseModel):
    """Body of POST /api/bank/burn."""

    amount: int = Field(gt=0, description="Currency to burn")


class Target(BaseModel):
    """Map coordinates of a fleet destination."""

    x: int
    y: int


class LaunchRequest(BaseModel):
    """Body of POST /api/fleet/launch."""

    colonyId: str  # noqa: N815
    shipClass: str  # noqa: N815
    target: Target
