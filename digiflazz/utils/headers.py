"""
Header normalization for inbound webhook requests.
"""

from typing import Any, Dict, Mapping, Optional, Sequence, Union

HeaderValue = Union[str, Sequence[str]]


def _as_text(value: Any) -> Optional[str]:
    # Raw ASGI/WSGI headers are latin-1 encoded bytes
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode('latin-1')
    if isinstance(value, str):
        return value
    return None


def normalize_headers(headers: Optional[Mapping[str, Any]]) -> Dict[str, HeaderValue]:
    """
    Lower-case every header name once so lookups are case-insensitive.
    
    Byte values are decoded as latin-1. Single-element sequences (as produced
    by some frameworks) are unwrapped to a plain string and multi-valued
    headers are kept as a tuple. Values that are neither text nor bytes are
    dropped, so they read as missing headers.
    
    Args:
        headers: Mapping of header name to value(s)
        
    Returns:
        New dictionary keyed by lower-cased header names
    """
    normalized = {}
    for name, value in (headers or {}).items():
        name = _as_text(name)
        if name is None:
            continue
        if isinstance(value, (list, tuple)):
            values = tuple(v for v in map(_as_text, value) if v is not None)
            if not values:
                continue
            value = values[0] if len(values) == 1 else values
        else:
            value = _as_text(value)
            if value is None:
                continue
        normalized[name.lower()] = value
    return normalized
