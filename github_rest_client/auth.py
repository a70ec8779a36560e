"""httpx authentication flows for personal tokens, basic auth and GitHub Apps."""

import base64
import threading
from datetime import datetime, timedelta, timezone

import httpx
import structlog
from github import Auth, GithubIntegration

from .models import HEADER_OTP

logger = structlog.get_logger(__name__)

DEFAULT_APP_API_URL = "https://api.github.com"

# Installation tokens are refreshed this long before GitHub expires them
TOKEN_REFRESH_MARGIN = timedelta(minutes=1)


class TokenAuth(httpx.Auth):
    """Bearer token authentication (personal access tokens, OAuth tokens)."""

    def __init__(self, token: str):
        self.token = token

    def auth_flow(self, request: httpx.Request):
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


class BasicAuth(httpx.Auth):
    """HTTP basic authentication with an optional two-factor one-time password."""

    def __init__(self, username: str, password: str, otp: str | None = None):
        self.username = username
        self.password = password
        self.otp = otp

    def auth_flow(self, request: httpx.Request):
        credentials = base64.b64encode(f"{self.username}:{self.password}".encode()).decode()
        request.headers["Authorization"] = f"Basic {credentials}"
        if self.otp:
            request.headers[HEADER_OTP] = self.otp
        yield request


class AppInstallationAuth(httpx.Auth):
    """Authenticate as a GitHub App installation.

    Installation access tokens are minted through PyGithub's GithubIntegration
    using the app's private key, cached, and refreshed shortly before they
    expire. Safe to share between threads.
    """

    def __init__(
        self,
        app_id: int | str,
        private_key: str,
        installation_id: int,
        base_url: str = DEFAULT_APP_API_URL,
        integration: GithubIntegration | None = None,
    ):
        self.installation_id = installation_id
        self._integration = integration or GithubIntegration(
            auth=Auth.AppAuth(app_id, private_key),
            base_url=base_url,
        )
        self._token: str | None = None
        self._expires_at: datetime | None = None
        self._lock = threading.Lock()

    def _expiring(self) -> bool:
        if self._token is None or self._expires_at is None:
            return True
        return datetime.now(timezone.utc) + TOKEN_REFRESH_MARGIN >= self._expires_at

    def token(self) -> str:
        """Return a valid installation token, minting a new one when needed."""
        with self._lock:
            if self._expiring():
                authorization = self._integration.get_access_token(self.installation_id)
                expires_at = authorization.expires_at
                if expires_at is not None and expires_at.tzinfo is None:
                    expires_at = expires_at.replace(tzinfo=timezone.utc)
                self._token = authorization.token
                self._expires_at = expires_at
                logger.debug(
                    "installation_token_refreshed",
                    installation_id=self.installation_id,
                    expires_at=expires_at.isoformat() if expires_at else None,
                )
            return self._token

    def auth_flow(self, request: httpx.Request):
        request.headers["Authorization"] = f"token {self.token()}"
        yield request
