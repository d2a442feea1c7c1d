"""
Inbound webhook verification for Digiflazz.

Digiflazz signs each webhook with HMAC-SHA1 over the raw body and sends it as
`X-Hub-Signature: sha1=<hex>`, with the event kind in `X-Digiflazz-Event`.
Transaction events wrap the transaction in a `data` field; ping events do not.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from .constants import EVENT_HEADER, SIGNATURE_ALGORITHM, SIGNATURE_HEADER, WebhookEvent
from .exceptions import (
    ConfigurationError,
    DigiflazzException,
    InvalidBodyError,
    MalformedSignatureError,
    MissingHeaderError,
    SignatureMismatchError,
    UnknownEventError,
    WebhookError,
)
from .utils.headers import normalize_headers
from .utils.signature import compute_webhook_signature, signatures_match

logger = logging.getLogger(__name__)

HEX_DIGEST = re.compile(r"[0-9a-fA-F]*")


@dataclass(frozen=True)
class VerifiedWebhookPayload:
    """A webhook whose signature has been checked."""
    event: WebhookEvent
    payload: Dict[str, Any]


@dataclass(frozen=True)
class WebhookVerificationResult:
    """Outcome of verify_webhook: exactly one of `value` and `error` is set."""
    value: Optional[VerifiedWebhookPayload] = None
    error: Optional[DigiflazzException] = None
    
    @property
    def ok(self) -> bool:
        return self.error is None


def _read_event(headers: Mapping[str, Any]) -> WebhookEvent:
    value = headers.get(EVENT_HEADER.lower())
    if not value:
        raise MissingHeaderError(EVENT_HEADER)
    if not isinstance(value, str):
        value = value[0]
    try:
        return WebhookEvent(value.strip().lower())
    except ValueError:
        raise UnknownEventError(f'Unsupported webhook event "{value}".')


def _read_signature(headers: Mapping[str, Any]) -> bytes:
    value = headers.get(SIGNATURE_HEADER.lower())
    if not value:
        raise MissingHeaderError(SIGNATURE_HEADER)
    if not isinstance(value, str):
        raise MalformedSignatureError(f'Header "{SIGNATURE_HEADER}" must have a single value.')
    
    parts = value.split('=')
    if len(parts) != 2 or parts[0] != SIGNATURE_ALGORITHM:
        raise MalformedSignatureError('Invalid signature format. Expected "sha1=<hex>".')
    
    if not HEX_DIGEST.fullmatch(parts[1]):
        raise MalformedSignatureError('Invalid signature format. Digest is not hex.')
    try:
        return bytes.fromhex(parts[1])
    except ValueError:
        raise MalformedSignatureError('Invalid signature format. Digest is not hex.')


def _extract_payload(event: WebhookEvent, raw_body: Union[bytes, str]) -> Dict[str, Any]:
    try:
        body = json.loads(raw_body)
    except (ValueError, RecursionError) as e:
        raise InvalidBodyError(f"Webhook body is not valid JSON: {str(e)}")
    
    if not isinstance(body, dict):
        raise InvalidBodyError("Webhook body must be a JSON object.")
    
    if event == WebhookEvent.PING:
        return body
    
    data = body.get('data')
    if not isinstance(data, dict):
        raise InvalidBodyError(f'Webhook "{event.value}" body has no "data" object.')
    return data


def verify_and_parse_webhook(
    raw_body: Union[bytes, str],
    headers: Optional[Mapping[str, Any]],
    secret: str
) -> VerifiedWebhookPayload:
    """
    Verify a webhook signature and parse its payload.
    
    The body is only deserialized once the signature has been verified.
    
    Args:
        raw_body: Request body exactly as received, not parsed JSON
        headers: Request headers, any casing
        secret: Webhook secret configured in the Digiflazz dashboard
        
    Returns:
        VerifiedWebhookPayload with the event and its payload
        
    Raises:
        ConfigurationError: If secret is empty
        MissingHeaderError: If the signature or event header is absent
        UnknownEventError: If the event is not create, update or ping
        MalformedSignatureError: If the signature is not "sha1=<hex>"
        SignatureMismatchError: If the signature does not match the body
        InvalidBodyError: If the verified body is not the expected JSON
    """
    if not secret:
        raise ConfigurationError("Webhook secret must not be empty.")
    
    headers = normalize_headers(headers)
    if SIGNATURE_HEADER.lower() not in headers:
        raise MissingHeaderError(SIGNATURE_HEADER)
    event = _read_event(headers)
    received = _read_signature(headers)
    
    if raw_body is None:
        raw_body = b''
    expected = bytes.fromhex(compute_webhook_signature(raw_body, secret))
    
    if not signatures_match(received, expected):
        raise SignatureMismatchError("Signature does not match.")
    
    payload = _extract_payload(event, raw_body)
    return VerifiedWebhookPayload(event=event, payload=payload)


def verify_webhook(
    raw_body: Union[bytes, str],
    headers: Optional[Mapping[str, Any]],
    secret: str
) -> WebhookVerificationResult:
    """
    Same as verify_and_parse_webhook but returns a result instead of raising.
    """
    try:
        verified = verify_and_parse_webhook(raw_body, headers, secret)
    except (ConfigurationError, WebhookError) as e:
        logger.warning(f"Webhook rejected ({type(e).__name__}): {e.message}")
        return WebhookVerificationResult(error=e)
    return WebhookVerificationResult(value=verified)
