"""
Utility modules for Digiflazz operations.
"""

from .http_client import HTTPClient
from .headers import normalize_headers
from .signature import generate_sign, compute_webhook_signature, signatures_match
from .validators import validate_required, validate_bank_name

__all__ = [
    'HTTPClient',
    'normalize_headers',
    'generate_sign',
    'compute_webhook_signature',
    'signatures_match',
    'validate_required',
    'validate_bank_name',
]
