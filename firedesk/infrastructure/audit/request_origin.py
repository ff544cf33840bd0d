"""Request origin extraction from forwarding headers.

The dashboard runs behind a reverse proxy, so the peer address is the
proxy. The origin is taken from the headers instead, in order:
``X-Forwarded-For`` (the whole hop chain, as sent), then ``X-Real-IP``,
then a fallback.
"""

from collections.abc import Mapping

# Width of logs.ip
MAX_ORIGIN_LENGTH = 255


def _header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup for plain dicts and Starlette Headers."""
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                value = candidate
                break
    return value


def resolve_request_origin(headers: Mapping[str, str], fallback: str) -> str:
    """Derive the request origin recorded in audit entries.

    Args:
        headers: Request headers (any mapping; lookup ignores case).
        fallback: Value used when neither header yields a non-empty value.

    Returns:
        str: Origin text, at most MAX_ORIGIN_LENGTH characters. Not
            validated as an IP address.

    Example:
        >>> resolve_request_origin({"X-Forwarded-For": "10.0.0.1, 10.0.0.2"}, "127.0.0.1")
        '10.0.0.1, 10.0.0.2'
    """
    for name in ("X-Forwarded-For", "X-Real-IP"):
        value = (_header(headers, name) or "").strip()
        if value.strip(", "):
            return value[:MAX_ORIGIN_LENGTH]

    return fallback
