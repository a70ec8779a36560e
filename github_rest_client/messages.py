"""Validation and parsing of incoming webhook deliveries.

A receiving handler typically does::

    payload = validate_payload(request.headers, request.body, secret)
    event = parse_web_hook(web_hook_type(request.headers), payload)

GitHub API docs: https://docs.github.com/webhooks/using-webhooks/validating-webhook-deliveries
"""

import hashlib
import hmac
from collections.abc import Mapping
from urllib.parse import parse_qs

import structlog

from .errors import WebhookValidationError
from .events import WebhookPayload, event_for_type

SHA1_SIGNATURE_HEADER = "X-Hub-Signature"
SHA256_SIGNATURE_HEADER = "X-Hub-Signature-256"
EVENT_TYPE_HEADER = "X-GitHub-Event"
DELIVERY_ID_HEADER = "X-GitHub-Delivery"

# Form field holding the JSON document of form encoded deliveries
PAYLOAD_FORM_PARAM = "payload"

_HASHES = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}

logger = structlog.get_logger(__name__)


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode() if isinstance(value, str) else value


def _message_mac(signature: str):
    if not signature:
        raise WebhookValidationError("missing signature")
    prefix, sep, digest = signature.partition("=")
    if not sep:
        raise WebhookValidationError(f"error parsing signature {signature!r}")
    hash_func = _HASHES.get(prefix)
    if hash_func is None:
        raise WebhookValidationError(f"unknown hash type prefix: {prefix!r}")
    try:
        mac = bytes.fromhex(digest)
    except ValueError as exc:
        raise WebhookValidationError(f"error decoding signature {signature!r}: {exc}") from exc
    return mac, hash_func


def validate_signature(signature: str, payload: str | bytes, secret: str | bytes) -> None:
    """Check an X-Hub-Signature(-256) value against the raw request body.

    Raises WebhookValidationError when the signature is malformed or does
    not match.
    """
    mac, hash_func = _message_mac(signature)
    expected = hmac.new(_as_bytes(secret), _as_bytes(payload), hash_func).digest()
    if not hmac.compare_digest(mac, expected):
        raise WebhookValidationError("payload signature check failed")


def validate_payload_from_body(
    content_type: str, body: bytes, signature: str, secret: str | bytes | None
) -> bytes:
    """Return the JSON payload of a delivery body after checking its signature.

    The signature is checked over the raw body whenever a secret is
    configured or the delivery carries a signature.
    """
    if content_type == "application/json":
        payload = body
    elif content_type == "application/x-www-form-urlencoded":
        try:
            form = parse_qs(body.decode(), keep_blank_values=True)
        except UnicodeDecodeError as exc:
            raise WebhookValidationError(f"error decoding form body: {exc}") from exc
        payload = form.get(PAYLOAD_FORM_PARAM, [""])[0].encode()
    else:
        raise WebhookValidationError(f"webhook request has unsupported Content-Type {content_type!r}")

    if secret or signature:
        validate_signature(signature, body, secret or b"")
    return payload


def _header(headers: Mapping[str, str], name: str) -> str:
    value = headers.get(name)
    if value is None:
        # Plain dicts are case sensitive
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                return candidate
        return ""
    return value


def validate_payload(headers: Mapping[str, str], body: bytes, secret: str | bytes | None) -> bytes:
    """Validate a webhook delivery from its headers and raw body.

    X-Hub-Signature-256 is preferred over the legacy X-Hub-Signature.
    """
    signature = _header(headers, SHA256_SIGNATURE_HEADER) or _header(headers, SHA1_SIGNATURE_HEADER)
    content_type = _header(headers, "Content-Type").split(";", 1)[0].strip().lower()
    try:
        return validate_payload_from_body(content_type, body, signature, secret)
    except WebhookValidationError:
        logger.warning("webhook_validation_failed", delivery=delivery_id(headers))
        raise


def web_hook_type(headers: Mapping[str, str]) -> str:
    """Return the event name of a delivery, e.g. "push"."""
    return _header(headers, EVENT_TYPE_HEADER)


def delivery_id(headers: Mapping[str, str]) -> str:
    return _header(headers, DELIVERY_ID_HEADER)


def parse_web_hook(message_type: str, payload: str | bytes) -> WebhookPayload:
    """Decode a webhook payload into the model registered for message_type.

    Raises ValueError for event names without a payload model.
    """
    model = event_for_type(message_type)
    if model is None:
        raise ValueError(f"unknown X-GitHub-Event in message: {message_type}")
    return model.model_validate_json(payload)
