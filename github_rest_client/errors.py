"""Exceptions raised for GitHub API error responses.

GitHub API docs: https://docs.github.com/rest/overview/resources-in-the-rest-api#client-errors
"""

from datetime import datetime, timedelta, timezone

import httpx
from pydantic import Field, ValidationError, model_validator

from .models import (
    HEADER_OTP,
    HEADER_RATE_REMAINING,
    HEADER_RATE_RESET,
    HEADER_RETRY_AFTER,
    GitHubModel,
    Rate,
    parse_rate,
)


class GitHubError(Exception):
    """Base class for every error reported by this package."""


class ErrorDetail(GitHubModel):
    """More detail on an individual error in an ErrorResponse.

    Known validation codes: missing, missing_field, invalid, already_exists,
    unprocessable, custom.
    """

    resource: str | None = None
    field: str | None = None
    code: str | None = None
    message: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data):
        # Some endpoints return bare strings in the errors list
        if isinstance(data, str):
            return {"message": data}
        return data

    def __str__(self) -> str:
        return f"{self.code} error caused by {self.field} field on {self.resource} resource"


class ErrorBlock(GitHubModel):
    """Legal block details returned with HTTP 451."""

    reason: str | None = None
    created_at: datetime | None = None


class _ErrorBody(GitHubModel):
    message: str = ""
    errors: list[ErrorDetail] = Field(default_factory=list)
    documentation_url: str = ""
    block: ErrorBlock | None = None


def _request_line(response: httpx.Response) -> str:
    request = response.request
    return f"{request.method} {_sanitize_url(request.url)}"


def _sanitize_url(url: httpx.URL) -> str:
    """Redact client_secret from the query string before it lands in a message."""
    if "client_secret" not in url.params:
        return str(url)
    params = url.params.set("client_secret", "REDACTED")
    return str(url.copy_with(params=params))


class ErrorResponse(GitHubError):
    """One or more errors caused by an API request."""

    def __init__(
        self,
        response: httpx.Response,
        message: str = "",
        errors: list[ErrorDetail] | None = None,
        documentation_url: str = "",
        block: ErrorBlock | None = None,
    ):
        self.response = response
        self.message = message
        self.errors = errors or []
        self.documentation_url = documentation_url
        self.block = block
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __str__(self) -> str:
        text = f"{_request_line(self.response)}: {self.response.status_code} {self.message}"
        if self.errors:
            text += f" {[e.model_dump(exclude_none=True) for e in self.errors]}"
        return text


class TwoFactorOTPError(ErrorResponse):
    """A request requires a two-factor authentication one-time password."""


class RateLimitError(GitHubError):
    """The primary rate limit for the request's category is exhausted."""

    def __init__(self, rate: Rate, response: httpx.Response, message: str = ""):
        self.rate = rate
        self.response = response
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        reset = self.rate.reset or datetime.now(timezone.utc)
        return (
            f"{_request_line(self.response)}: {self.response.status_code} {self.message} "
            f"{format_rate_reset(reset - datetime.now(timezone.utc))}"
        )


class AbuseRateLimitError(GitHubError):
    """A secondary (abuse) rate limit was hit.

    retry_after is how long GitHub asked us to wait, when it said so.
    """

    def __init__(self, response: httpx.Response, message: str = "", retry_after: timedelta | None = None):
        self.response = response
        self.message = message
        self.retry_after = retry_after
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{_request_line(self.response)}: {self.response.status_code} {self.message}"


class AcceptedError(GitHubError):
    """GitHub accepted the request (HTTP 202) and scheduled work in the background."""

    def __init__(self, raw: bytes = b""):
        self.raw = raw
        # Set by Client.bare_do
        self.response = None
        super().__init__("job scheduled on GitHub side; try again later")


class RedirectionError(GitHubError):
    """A redirect (301/302) was returned and not followed."""

    def __init__(self, response: httpx.Response, location: str | None):
        self.response = response
        self.status_code = response.status_code
        self.location = location
        super().__init__(f"{_request_line(response)}: {response.status_code} location {location}")


def format_rate_reset(delta: timedelta) -> str:
    """Render the time until (or since) a rate limit reset, e.g. "[rate reset in 1m05s]"."""
    seconds = delta.total_seconds()
    negative = seconds < 0
    total = int(0.5 + abs(seconds))
    minutes, secs = divmod(total, 60)
    text = f"{minutes}m{secs:02d}s" if minutes > 0 else f"{secs}s"
    if negative:
        return f"[rate limit was reset {text} ago]"
    return f"[rate reset in {text}]"


def _parse_body(response: httpx.Response) -> _ErrorBody:
    if not response.content:
        return _ErrorBody()
    try:
        data = response.json()
    except ValueError:
        return _ErrorBody()
    if not isinstance(data, dict):
        return _ErrorBody()
    try:
        return _ErrorBody.model_validate(data)
    except ValidationError:
        # Keep what can be read from a malformed body
        return _ErrorBody(
            message=_as_text(data.get("message")),
            documentation_url=_as_text(data.get("documentation_url")),
        )


def _as_text(value) -> str:
    return "" if value is None else str(value)


def _parse_secondary_retry_after(response: httpx.Response) -> timedelta | None:
    retry_after = response.headers.get(HEADER_RETRY_AFTER)
    if retry_after is not None:
        try:
            return timedelta(seconds=int(retry_after))
        except ValueError:
            return None
    if response.headers.get(HEADER_RATE_REMAINING) == "0":
        reset = response.headers.get(HEADER_RATE_RESET)
        if reset is None:
            return None
        try:
            reset_at = datetime.fromtimestamp(int(reset), tz=timezone.utc)
        except ValueError:
            return None
        return reset_at - datetime.now(timezone.utc)
    return None


def check_response(response: httpx.Response) -> None:
    """Raise the matching GitHubError when a response is not a success.

    A response is an error when its status code is outside 2xx. 202 is
    reported as AcceptedError so callers can tell scheduled work apart.
    """
    status = response.status_code
    if status == 202:
        raise AcceptedError(response.content)
    if 200 <= status <= 299:
        return

    if status in (301, 302):
        raise RedirectionError(response, response.headers.get("location"))

    body = _parse_body(response)
    kwargs = {
        "message": body.message,
        "errors": body.errors,
        "documentation_url": body.documentation_url,
        "block": body.block,
    }

    if status == 401 and response.headers.get(HEADER_OTP, "").startswith("required"):
        raise TwoFactorOTPError(response, **kwargs)

    if status in (403, 429) and response.headers.get(HEADER_RATE_REMAINING) == "0":
        raise RateLimitError(parse_rate(response), response, body.message)

    if status in (403, 429) and (
        body.documentation_url.endswith("#abuse-rate-limits")
        or body.documentation_url.endswith("secondary-rate-limits")
    ):
        raise AbuseRateLimitError(response, body.message, _parse_secondary_retry_after(response))

    raise ErrorResponse(response, **kwargs)


def parse_bool_response(exc: GitHubError) -> bool:
    """Map an error from a "boolean" endpoint to False when it is a 404.

    Any other error is re-raised.
    """
    if isinstance(exc, ErrorResponse) and exc.status_code == 404:
        return False
    raise exc


class WebhookValidationError(GitHubError, ValueError):
    """A webhook delivery failed signature or content type validation."""
