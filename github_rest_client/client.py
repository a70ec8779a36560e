"""GitHub REST API client using httpx.

A Client owns one httpx.Client and exposes the API as service groups::

    client = Client(token="...")
    repo, resp = client.repositories.get("octocat", "hello-world")
    issues, resp = client.issues.list_by_repo("octocat", "hello-world", IssueListByRepoOptions(state="all"))

Every method returns the decoded result together with a Response carrying
pagination and rate limit metadata, and raises a GitHubError subclass for
API errors.
"""

import copy
import json
import threading
from datetime import datetime, timezone
from functools import lru_cache

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter
from pydantic_core import to_jsonable_python

from .actions import ActionsService
from .activity import ActivityService
from .auth import TokenAuth
from .billing import BillingService
from .codespaces import CodespacesService
from .enterprise import EnterpriseService
from .errors import (
    AbuseRateLimitError,
    AcceptedError,
    ErrorResponse,
    GitHubError,
    RateLimitError,
    RedirectionError,
    check_response,
    parse_bool_response,
)
from .git import GitService
from .issues import IssuesService
from .models import (
    HEADER_FROM_CACHE,
    HEADER_RATE_LIMIT,
    HEADER_RATE_REMAINING,
    HEADER_RATE_RESET,
    Rate,
    RateLimitCategory,
    Response,
    get_rate_limit_category,
)
from .organizations import OrganizationsService
from .pulls import PullRequestsService
from .rate_limit import RateLimitService
from .repositories import RepositoriesService
from .secret_scanning import SecretScanningService
from .settings import get_settings
from .users import UsersService

LIBRARY_VERSION = "0.1.0"
DEFAULT_BASE_URL = "https://api.github.com/"
UPLOAD_BASE_URL = "https://uploads.github.com/"
USER_AGENT = f"github-rest-client/{LIBRARY_VERSION}"
DEFAULT_API_VERSION = "2022-11-28"
DEFAULT_TIMEOUT = 30.0

MEDIA_TYPE_V3 = "application/vnd.github.v3+json"
HEADER_API_VERSION = "X-GitHub-Api-Version"

logger = structlog.get_logger(__name__)


@lru_cache(maxsize=None)
def _adapter(model) -> TypeAdapter:
    return TypeAdapter(model)


def encode_body(body) -> bytes:
    """JSON-encode a request body.

    Absent (None) fields of a model body are dropped; plain dicts and lists
    are sent as given, so an explicit None becomes null.
    """
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(to_jsonable_python(body, by_alias=True)).encode()


class Client:
    """Manages communication with the GitHub API."""

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        *,
        token: str | None = None,
        auth: httpx.Auth | None = None,
        base_url: str = DEFAULT_BASE_URL,
        upload_url: str = UPLOAD_BASE_URL,
        user_agent: str = USER_AGENT,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._http = http_client or httpx.Client(timeout=timeout, follow_redirects=True)
        # Base URL for API requests; must end with a slash
        self.base_url = base_url
        self.upload_url = upload_url
        self.user_agent = user_agent
        self.api_version = api_version
        self.auth = TokenAuth(token) if token else auth

        self._rate_lock = threading.Lock()
        self._rate_limits: dict[RateLimitCategory, Rate] = {}
        self._secondary_rate_limit_reset: datetime | None = None

        self._init_services()

    def _init_services(self):
        self.actions = ActionsService(self)
        self.activity = ActivityService(self)
        self.billing = BillingService(self)
        self.codespaces = CodespacesService(self)
        self.enterprise = EnterpriseService(self)
        self.git = GitService(self)
        self.issues = IssuesService(self)
        self.organizations = OrganizationsService(self)
        self.pull_requests = PullRequestsService(self)
        self.rate_limit = RateLimitService(self)
        self.repositories = RepositoriesService(self)
        self.secret_scanning = SecretScanningService(self)
        self.users = UsersService(self)

    def _copy(self) -> "Client":
        clone = copy.copy(self)
        clone._rate_lock = threading.Lock()
        with self._rate_lock:
            clone._rate_limits = dict(self._rate_limits)
        clone._init_services()
        return clone

    def with_auth_token(self, token: str) -> "Client":
        """Return a copy of the client that authenticates with token."""
        clone = self._copy()
        clone.auth = TokenAuth(token)
        return clone

    def with_enterprise_urls(self, base_url: str, upload_url: str) -> "Client":
        """Return a copy of the client configured for GitHub Enterprise Server.

        "api/v3/" and "api/uploads/" are appended when the URLs don't already
        point at an API host or path.
        """
        clone = self._copy()
        clone.base_url = _enterprise_url(base_url, "/api/v3/", "api.")
        clone.upload_url = _enterprise_url(upload_url, "/api/uploads/", "api.")
        return clone

    def rate_limits(self) -> dict[RateLimitCategory, Rate]:
        """Last known rate limit per category, as reported by GitHub."""
        with self._rate_lock:
            return {category: rate.model_copy() for category, rate in self._rate_limits.items()}

    def update_rate_limits(self, limits) -> None:
        """Record the limits reported by the rate limit endpoint."""
        with self._rate_lock:
            for category in RateLimitCategory:
                rate = limits.get(category)
                if rate is not None:
                    self._rate_limits[category] = rate

    def new_request(self, method: str, url: str, body=None, headers: dict | None = None) -> httpx.Request:
        """Create an API request.

        url is resolved relative to base_url and should be given without a
        leading slash. A non-None body is JSON encoded.
        """
        if not self.base_url.endswith("/"):
            raise ValueError(f"base_url must have a trailing slash, but {self.base_url!r} does not")
        request_headers = self._default_headers()
        content = None
        if body is not None:
            content = encode_body(body)
            request_headers["Content-Type"] = "application/json"
        if headers:
            request_headers.update(headers)
        full_url = httpx.URL(self.base_url).join(url)
        return self._http.build_request(method, full_url, content=content, headers=request_headers)

    def new_upload_request(self, url: str, content: bytes, media_type: str) -> httpx.Request:
        """Create an upload request against upload_url."""
        if not self.upload_url.endswith("/"):
            raise ValueError(f"upload_url must have a trailing slash, but {self.upload_url!r} does not")
        request_headers = self._default_headers()
        request_headers["Content-Type"] = media_type
        full_url = httpx.URL(self.upload_url).join(url)
        return self._http.build_request("POST", full_url, content=content, headers=request_headers)

    def _default_headers(self) -> dict[str, str]:
        headers = {"Accept": MEDIA_TYPE_V3, HEADER_API_VERSION: self.api_version}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers

    def _api_path(self, url: httpx.URL) -> str:
        base_path = httpx.URL(self.base_url).path
        path = url.path
        if path.startswith(base_path):
            return "/" + path[len(base_path):]
        return path

    def bare_do(
        self,
        request: httpx.Request,
        *,
        follow_redirects: bool | None = None,
        bypass_rate_limit_check: bool = False,
    ) -> Response:
        """Send an API request and return the response without decoding the body.

        Raises a GitHubError for API errors, or without sending anything when
        the request's rate limit category is known to be exhausted.
        """
        category = get_rate_limit_category(request.method, self._api_path(request.url))
        if not bypass_rate_limit_check:
            self._check_rate_limit_before_do(request, category)
            self._check_secondary_rate_limit_before_do(request)

        send_kwargs = {}
        if self.auth is not None:
            send_kwargs["auth"] = self.auth
        if follow_redirects is not None:
            send_kwargs["follow_redirects"] = follow_redirects

        http_response = self._http.send(request, **send_kwargs)
        logger.debug(
            "github_request",
            method=request.method,
            url=str(request.url),
            status=http_response.status_code,
        )

        response = Response.from_http(http_response)
        if HEADER_FROM_CACHE not in http_response.headers:
            with self._rate_lock:
                self._rate_limits[category] = response.rate

        try:
            check_response(http_response)
        except AcceptedError as exc:
            exc.response = response
            raise
        except AbuseRateLimitError as exc:
            if exc.retry_after is not None:
                with self._rate_lock:
                    self._secondary_rate_limit_reset = datetime.now(timezone.utc) + exc.retry_after
            raise
        return response

    def do(self, request: httpx.Request, model=None, **kwargs):
        """Send an API request and decode the JSON body into model.

        model is a GitHubModel class or a typing construct such as
        list[Repository]. Returns (value, Response); value is None when no
        model is given or the body is empty.
        """
        response = self.bare_do(request, **kwargs)
        if model is None or not response.http_response.content:
            return None, response
        return _adapter(model).validate_json(response.http_response.content), response

    def do_accepted(self, request: httpx.Request, model=None):
        """Like do, but a 202 Accepted answer counts as success."""
        try:
            return self.do(request, model)
        except AcceptedError as exc:
            if model is None or not exc.raw:
                return None, exc.response
            return _adapter(model).validate_json(exc.raw), exc.response

    def do_bool(self, request: httpx.Request) -> tuple[bool, Response]:
        """Send a request to an endpoint that answers 204 for yes and 404 for no."""
        try:
            response = self.bare_do(request)
        except ErrorResponse as exc:
            return parse_bool_response(exc), Response.from_http(exc.response)
        return True, response

    def get_redirect_url(self, url: str, max_redirects: int = 0) -> tuple[str, Response]:
        """Resolve an endpoint that answers with a 302 to a download location.

        Permanent (301) redirects are followed up to max_redirects times.
        """
        request = self.new_request("GET", url)
        return self._bare_do_until_found(request, max_redirects)

    def _bare_do_until_found(self, request: httpx.Request, max_redirects: int) -> tuple[str, Response]:
        try:
            response = self.bare_do(request, follow_redirects=False)
        except RedirectionError as exc:
            if not exc.location:
                raise GitHubError("redirect response has no Location header") from exc
            location = httpx.URL(self.base_url).join(exc.location)
            if exc.status_code == 302:
                return str(location), Response.from_http(exc.response)
            if exc.status_code == 301 and max_redirects > 0:
                headers = {k: v for k, v in request.headers.items() if k.lower() != "host"}
                redirected = self._http.build_request(request.method, location, headers=headers)
                return self._bare_do_until_found(redirected, max_redirects - 1)
            raise
        raise GitHubError(f"unexpected status code: {response.status_code}")

    def _check_rate_limit_before_do(self, request: httpx.Request, category: RateLimitCategory) -> None:
        with self._rate_lock:
            rate = self._rate_limits.get(category)
        if rate is None or rate.reset is None:
            return
        if rate.remaining > 0 or datetime.now(timezone.utc) >= rate.reset:
            return
        # Fabricate the 403 GitHub would have sent
        fake = httpx.Response(
            403,
            request=request,
            headers={
                HEADER_RATE_LIMIT: str(rate.limit),
                HEADER_RATE_REMAINING: "0",
                HEADER_RATE_RESET: str(int(rate.reset.timestamp())),
            },
        )
        logger.warning("rate_limit_exhausted", category=category.value, reset=rate.reset.isoformat())
        raise RateLimitError(
            rate,
            fake,
            f"API rate limit of {rate.limit} still exceeded until {rate.reset}, not making remote request.",
        )

    def _check_secondary_rate_limit_before_do(self, request: httpx.Request) -> None:
        with self._rate_lock:
            reset = self._secondary_rate_limit_reset
        if reset is None:
            return
        now = datetime.now(timezone.utc)
        if now >= reset:
            return
        logger.warning("secondary_rate_limit_active", reset=reset.isoformat())
        raise AbuseRateLimitError(
            httpx.Response(403, request=request),
            f"API secondary rate limit exceeded until {reset}, not making remote request.",
            retry_after=reset - now,
        )

    def close(self):
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def _enterprise_url(url: str, api_path: str, host_prefix: str) -> str:
    parsed = httpx.URL(url)
    path = parsed.path if parsed.path.endswith("/") else parsed.path + "/"
    host = parsed.host
    if not path.endswith(api_path) and not host.startswith(host_prefix) and f".{host_prefix}" not in host:
        path += api_path.lstrip("/")
    return str(parsed.copy_with(path=path))


# Client instances keyed by config
_clients: dict[tuple, Client] = {}


def get_client(token: str | None = None) -> Client:
    """Get or create a Client configured from settings."""
    settings = get_settings()
    token = token or settings.github_token
    key = (token, settings.github_api_url, settings.github_upload_url)
    if key not in _clients:
        client = Client(
            token=token,
            user_agent=settings.github_user_agent or USER_AGENT,
            api_version=settings.github_api_version,
            timeout=settings.github_timeout,
        )
        if settings.github_api_url.rstrip("/") != DEFAULT_BASE_URL.rstrip("/"):
            client = client.with_enterprise_urls(settings.github_api_url, settings.github_upload_url)
        _clients[key] = client
    return _clients[key]
