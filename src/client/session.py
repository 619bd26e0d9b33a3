"""Client configuration and login session."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..utils.constants import DEFAULT_FLEET_SERVER_URL, SERVER_URL_ENV_VAR


@dataclass
class ClientConfig:
    """Where the game server lives."""

    server_url: str

    def __post_init__(self):
        """Normalize the server URL."""
        self.server_url = self.server_url.strip().rstrip("/")
        if not self.server_url:
            raise ValueError("server_url cannot be empty")

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, default: str = DEFAULT_FLEET_SERVER_URL
    ) -> "ClientConfig":
        """Build configuration from the server URL override variable.

        Args:
            environ: Environment mapping (defaults to os.environ)
            default: URL used when the variable is unset or empty
        """
        environ = os.environ if environ is None else environ
        return cls(server_url=environ.get(SERVER_URL_ENV_VAR) or default)


@dataclass
class Session:
    """Identity of the logged-in user, if any."""

    user_id: str | None = None
    token: str | None = None
    username: str | None = None

    @property
    def authenticated(self) -> bool:
        return self.user_id is not None

    def start(self, user_id, token: str | None = None, username: str | None = None) -> None:
        """Record a successful login or registration."""
        self.user_id = str(user_id)
        self.token = token
        self.username = username

    def clear(self) -> None:
        """Forget the current user."""
        self.user_id = None
        self.token = None
        self.username = None
