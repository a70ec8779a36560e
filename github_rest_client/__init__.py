"""Typed client for the GitHub REST API built on httpx and pydantic.

Each API area is a service on Client (``client.repositories``,
``client.issues``, ...); methods return the decoded result together with a
Response carrying pagination and rate limit metadata.
"""

from .auth import AppInstallationAuth, BasicAuth, TokenAuth
from .cli import main
from .client import Client, get_client
from .encryption import encrypt_secret
from .errors import (
    AbuseRateLimitError,
    AcceptedError,
    ErrorResponse,
    GitHubError,
    RateLimitError,
    RedirectionError,
    TwoFactorOTPError,
    WebhookValidationError,
)
from .messages import parse_web_hook, validate_payload, validate_signature
from .models import Rate, RateLimitCategory, Response
from .options import ListCursorOptions, ListOptions
from .pagination import scan

__all__ = [
    "AbuseRateLimitError",
    "AcceptedError",
    "AppInstallationAuth",
    "BasicAuth",
    "Client",
    "ErrorResponse",
    "GitHubError",
    "ListCursorOptions",
    "ListOptions",
    "Rate",
    "RateLimitCategory",
    "RateLimitError",
    "RedirectionError",
    "Response",
    "TokenAuth",
    "TwoFactorOTPError",
    "WebhookValidationError",
    "encrypt_secret",
    "get_client",
    "main",
    "parse_web_hook",
    "scan",
    "validate_payload",
    "validate_signature",
]
