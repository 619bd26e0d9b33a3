"""HTTP clients for the game server.

Each public method performs exactly one request. There is no retry and no
backoff: a failed request raises ApiError once and the caller decides what
to tell the user.
"""

import logging
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .schemas.requests import (
    BurnRequest,
    ColonyBuildRequest,
    CredentialsRequest,
    FleetBuildRequest,
    LaunchRequest,
    PlayerRegisterRequest,
    Target,
)
from .schemas.responses import (
    AccountResponse,
    BuildResponse,
    BurnResponse,
    LaunchResponse,
    LoginResponse,
    RegisterResponse,
    StateResponse,
    StatusResponse,
)
from .session import ClientConfig, Session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiError(Exception):
    """Raised when a request fails or the server reply is unusable."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        """Initialize API error.

        Args:
            message: Failure detail (response body or transport error)
            status_code: HTTP status, or None if no response was received
        """
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"HTTP {self.status_code}: {self.message}"


class NotAuthenticatedError(ApiError):
    """Raised when an authenticated call is made without a session."""


class InvalidRequestError(ApiError):
    """Raised when command arguments do not form a valid request body."""


class BaseApiClient:
    """Shared request plumbing for both server APIs."""

    def __init__(
        self,
        config: ClientConfig,
        session: Optional[Session] = None,
        http: Optional[httpx.Client] = None,
    ):
        """Initialize API client.

        Args:
            config: Server location
            session: Login session (a fresh one is created if omitted)
            http: HTTP client to send requests with
        """
        self.config = config
        self.session = session or Session()
        self._http = http or httpx.Client()

    def close(self) -> None:
        self._http.close()

    def _request(
        self,
        method: str,
        path: str,
        body: Optional[BaseModel] = None,
        params: Optional[dict] = None,
        auth: bool = False,
    ) -> Any:
        """Send one request and return the decoded reply.

        Returns:
            Decoded JSON, the raw text if the body is not JSON, or {} if empty

        Raises:
            ApiError: On transport failure or a non-2xx status
        """
        url = f"{self.config.server_url}{path}"
        headers = {}
        if auth and self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"

        logger.debug(f"{method} {url}")
        try:
            response = self._http.request(
                method,
                url,
                json=body.model_dump() if body is not None else None,
                params=params,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.debug(f"{method} {url} failed: {e}")
            raise ApiError(str(e) or type(e).__name__) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        if not response.is_success:
            raise ApiError(response.text.strip() or response.reason_phrase, response.status_code)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return response.text

    def _parse(self, model: Type[ModelT], data: Any) -> ModelT:
        """Validate a reply against its schema.

        Raises:
            ApiError: If the reply does not match
        """
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ApiError(f"Unexpected response from server: {e.error_count()} invalid field(s)") from e

    def _body(self, model: Type[ModelT], **fields: Any) -> ModelT:
        """Build a request body, rejecting bad arguments before anything is sent.

        Raises:
            InvalidRequestError: If a field fails validation
        """
        try:
            return model(**fields)
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or model.__name__
            raise InvalidRequestError(f"Invalid {field}: {error['msg']}") from e

    def _require_session(self) -> Session:
        if not self.session.authenticated:
            raise NotAuthenticatedError("Not logged in")
        return self.session


class ColonyApi(BaseApiClient):
    """Client for the colony server (login, register, build, state)."""

    def login(self, username: str, password: str) -> LoginResponse:
        """Log in and start a session."""
        body = self._body(CredentialsRequest, username=username, password=password)
        data = self._request("POST", "/login", body)
        reply = self._parse(LoginResponse, data)
        self.session.start(reply.userId, reply.token, username)
        logger.info(f"Logged in as {username} (user {reply.userId})")
        return reply

    def register(self, username: str, password: str) -> AccountResponse:
        """Create an account. Does not log in."""
        body = self._body(CredentialsRequest, username=username, password=password)
        data = self._request("POST", "/register", body)
        if not isinstance(data, dict):
            return AccountResponse(message=str(data))
        return self._parse(AccountResponse, data)

    def build(self, colony_id: str, building: str, count: int = 1) -> BuildResponse:
        """Request buildings in one of the user's colonies."""
        session = self._require_session()
        body = self._body(
            ColonyBuildRequest, userId=session.user_id, colonyId=colony_id, building=building, count=count
        )
        data = self._request("POST", "/build", body, auth=True)
        if not isinstance(data, dict):
            return BuildResponse(message=str(data))
        return self._parse(BuildResponse, data)

    def get_state(self) -> StateResponse:
        """Fetch the user's colonies."""
        session = self._require_session()
        data = self._request("GET", "/state", params={"userId": session.user_id}, auth=True)
        return self._parse(StateResponse, data)

    def logout(self) -> None:
        """End the session locally."""
        self.session.clear()


class FleetApi(BaseApiClient):
    """Client for the fleet server (/api/...)."""

    def status(self) -> StatusResponse:
        """Fetch server status."""
        return self._parse(StatusResponse, self._request("GET", "/api/status"))

    def register(self, name: str) -> RegisterResponse:
        """Register a player and start a session with the returned token."""
        data = self._request("POST", "/api/register", self._body(PlayerRegisterRequest, name=name))
        reply = self._parse(RegisterResponse, data)
        self.session.start(reply.playerId, reply.token, name)
        logger.info(f"Registered as {name} (player {reply.playerId})")
        return reply

    def build(self, colony_id: str, building: str) -> BuildResponse:
        """Request a building in a colony."""
        self._require_session()
        body = self._body(FleetBuildRequest, colonyId=colony_id, building=building)
        data = self._request("POST", "/api/build", body, auth=True)
        if not isinstance(data, dict):
            return BuildResponse(message=str(data))
        return self._parse(BuildResponse, data)

    def burn(self, amount: int) -> BurnResponse:
        """Burn currency from the player's bank."""
        self._require_session()
        data = self._request("POST", "/api/bank/burn", self._body(BurnRequest, amount=amount), auth=True)
        return self._parse(BurnResponse, data)

    def launch(self, colony_id: str, ship_class: str, x: int, y: int) -> LaunchResponse:
        """Launch a fleet from a colony towards map coordinates."""
        self._require_session()
        body = self._body(LaunchRequest, colonyId=colony_id, shipClass=ship_class, target=Target(x=x, y=y))
        data = self._request("POST", "/api/fleet/launch", body, auth=True)
        if not isinstance(data, dict):
            return LaunchResponse(message=str(data))
        return self._parse(LaunchResponse, data)
