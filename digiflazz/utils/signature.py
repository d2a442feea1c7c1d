"""
Request signing and webhook signature utilities.
"""

import hashlib
import hmac
from typing import Union


def generate_sign(username: str, api_key: str, identifier: str) -> str:
    """
    Generate the `sign` field for a Digiflazz API request.
    
    The gateway mandates md5(username + api_key + identifier) with no
    delimiter, rendered as lowercase hex.
    
    Args:
        username: Digiflazz username
        api_key: Digiflazz API key
        identifier: Per-call value ('depo', 'pricelist', 'deposit', ref_id or customer_no)
        
    Returns:
        32 character lowercase hex digest
    """
    data = f"{username}{api_key}{identifier}"
    return hashlib.md5(data.encode('utf-8')).hexdigest()


def compute_webhook_signature(raw_body: Union[bytes, str], secret: str) -> str:
    """
    Compute the HMAC-SHA1 hex digest of a raw webhook body.
    
    Args:
        raw_body: Request body exactly as received
        secret: Webhook secret key
        
    Returns:
        Lowercase hex digest
    """
    if isinstance(raw_body, str):
        raw_body = raw_body.encode('utf-8')
    
    return hmac.new(
        secret.encode('utf-8'),
        raw_body,
        hashlib.sha1
    ).hexdigest()


def signatures_match(received: bytes, expected: bytes) -> bool:
    """
    Compare two raw digests in constant time.
    
    Digests of differing length are rejected before any byte comparison.
    """
    if len(received) != len(expected):
        return False
    return hmac.compare_digest(received, expected)
