"""Base model, response wrapper and rate-limit types shared by every service."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from urllib.parse import parse_qs, urlsplit

import httpx
from pydantic import BaseModel, ConfigDict

HEADER_RATE_LIMIT = "X-RateLimit-Limit"
HEADER_RATE_REMAINING = "X-RateLimit-Remaining"
HEADER_RATE_USED = "X-RateLimit-Used"
HEADER_RATE_RESET = "X-RateLimit-Reset"
HEADER_RATE_RESOURCE = "X-RateLimit-Resource"
HEADER_OTP = "X-GitHub-OTP"
HEADER_RETRY_AFTER = "Retry-After"
HEADER_TOKEN_EXPIRATION = "GitHub-Authentication-Token-Expiration"
HEADER_FROM_CACHE = "X-From-Cache"

# Formats GitHub uses in the token expiration header
_TOKEN_EXPIRATION_FORMATS = ("%Y-%m-%d %H:%M:%S %Z", "%Y-%m-%d %H:%M:%S %z")


class GitHubModel(BaseModel):
    """Base for every GitHub resource.

    All fields default to None, which means "absent from the JSON document".
    Unknown fields are ignored so new API attributes never break decoding.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_payload(self) -> dict:
        """Serialize for a request body, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class RateLimitCategory(str, Enum):
    CORE = "core"
    SEARCH = "search"
    GRAPHQL = "graphql"
    INTEGRATION_MANIFEST = "integration_manifest"
    SOURCE_IMPORT = "source_import"
    CODE_SCANNING_UPLOAD = "code_scanning_upload"
    ACTIONS_RUNNER_REGISTRATION = "actions_runner_registration"
    SCIM = "scim"
    DEPENDENCY_SNAPSHOTS = "dependency_snapshots"
    CODE_SEARCH = "code_search"
    AUDIT_LOG = "audit_log"


def get_rate_limit_category(method: str, path: str) -> RateLimitCategory:
    """Return the rate limit bucket an API call is counted against.

    ``path`` is the API path relative to the base URL, with a leading slash.
    """
    method = method.upper()
    if path.startswith("/search/code") and method == "GET":
        return RateLimitCategory.CODE_SEARCH
    if path.startswith("/search/"):
        return RateLimitCategory.SEARCH
    if path == "/graphql":
        return RateLimitCategory.GRAPHQL
    if path.startswith("/app-manifests/") and path.endswith("/conversions") and method == "POST":
        return RateLimitCategory.INTEGRATION_MANIFEST
    if path.startswith("/repos/") and path.endswith("/import") and method == "PUT":
        return RateLimitCategory.SOURCE_IMPORT
    if path.endswith("/code-scanning/sarifs"):
        return RateLimitCategory.CODE_SCANNING_UPLOAD
    if path.startswith("/scim/"):
        return RateLimitCategory.SCIM
    if path.startswith("/repos/") and path.endswith("/dependency-graph/snapshots") and method == "POST":
        return RateLimitCategory.DEPENDENCY_SNAPSHOTS
    if path.endswith("/audit-log"):
        return RateLimitCategory.AUDIT_LOG
    # actions_runner_registration has no dedicated endpoint and is counted as core
    return RateLimitCategory.CORE


class Rate(GitHubModel):
    """The rate limit for one category of requests."""

    limit: int = 0
    remaining: int = 0
    used: int = 0
    reset: datetime | None = None
    resource: str = ""


def parse_rate(http_response: httpx.Response) -> Rate:
    """Build a Rate from the X-RateLimit-* headers of a response."""
    headers = http_response.headers
    rate = Rate()
    if (limit := headers.get(HEADER_RATE_LIMIT)) is not None:
        rate.limit = _to_int(limit)
    if (remaining := headers.get(HEADER_RATE_REMAINING)) is not None:
        rate.remaining = _to_int(remaining)
    if (used := headers.get(HEADER_RATE_USED)) is not None:
        rate.used = _to_int(used)
    if (reset := headers.get(HEADER_RATE_RESET)) is not None:
        seconds = _to_int(reset)
        if seconds:
            rate.reset = datetime.fromtimestamp(seconds, tz=timezone.utc)
    if (resource := headers.get(HEADER_RATE_RESOURCE)) is not None:
        rate.resource = resource
    return rate


def parse_token_expiration(http_response: httpx.Response) -> datetime | None:
    value = http_response.headers.get(HEADER_TOKEN_EXPIRATION)
    if not value:
        return None
    for fmt in _TOKEN_EXPIRATION_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    return None


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


@dataclass
class Response:
    """A GitHub API response.

    Wraps the httpx response and exposes the pagination values parsed from
    the Link header, plus rate limit and token expiration metadata.
    """

    http_response: httpx.Response

    next_page: int = 0
    prev_page: int = 0
    first_page: int = 0
    last_page: int = 0
    # Set instead of next_page when the "next" link carries a non-numeric page
    next_page_token: str = ""
    # True when next_page came from a "since" parameter rather than "page"
    next_page_is_since: bool = False
    cursor: str = ""
    before: str = ""
    after: str = ""

    rate: Rate = field(default_factory=Rate)
    token_expiration: datetime | None = None

    @classmethod
    def from_http(cls, http_response: httpx.Response) -> "Response":
        response = cls(http_response=http_response)
        response._populate_page_values()
        response.rate = parse_rate(http_response)
        response.token_expiration = parse_token_expiration(http_response)
        return response

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    def _populate_page_values(self) -> None:
        link_header = self.http_response.headers.get("link")
        if not link_header:
            return
        for link in link_header.split(","):
            segments = [s.strip() for s in link.strip().split(";")]
            # href and rel at minimum
            if len(segments) < 2:
                continue
            href = segments[0]
            if not (href.startswith("<") and href.endswith(">")):
                continue
            query = parse_qs(urlsplit(href[1:-1]).query)
            rels = segments[1:]

            cursor = _first(query, "cursor")
            if cursor:
                if 'rel="next"' in rels:
                    self.cursor = cursor
                continue

            page = _first(query, "page")
            since = _first(query, "since")
            before = _first(query, "before")
            after = _first(query, "after")
            if not (page or before or after or since):
                continue
            from_since = bool(since) and not page
            if from_since:
                page = since

            for rel in rels:
                if rel == 'rel="next"':
                    if page.isdigit():
                        self.next_page = int(page)
                        self.next_page_is_since = from_since
                    else:
                        self.next_page_token = page
                    self.after = after
                elif rel == 'rel="prev"':
                    self.prev_page = int(page) if page.isdigit() else 0
                    self.before = before
                elif rel == 'rel="first"':
                    self.first_page = int(page) if page.isdigit() else 0
                elif rel == 'rel="last"':
                    self.last_page = int(page) if page.isdigit() else 0


def _first(query: dict[str, list[str]], key: str) -> str:
    values = query.get(key)
    return values[0] if values else ""
