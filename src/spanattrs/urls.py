"""
Credential stripping for URL-valued attributes.

Removes the userinfo (``user:password@``) segment from a URL's authority
before the URL is recorded on a span. Parse failures are reported through
the returned StripResult instead of an exception so callers can decide to
keep the original value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import SplitResult, urlsplit, urlunsplit

# Schemes that require a host
_HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


@dataclass(frozen=True)
class StripResult:
    """
    Outcome of a credential-stripping attempt.

    Attributes:
        ok:     True if the input parsed as a URL.
        value:  The rewritten URL when ok, otherwise the untouched input.
    """

    ok: bool
    value: str


def _parse(raw: str) -> Optional[SplitResult]:
    try:
        parts = urlsplit(raw)
        # .port validates the port segment lazily
        parts.port
    except ValueError:
        return None
    if not parts.scheme:
        return None
    if parts.scheme in _HOST_SCHEMES and not parts.hostname:
        return None
    return parts


def strip_credentials(raw: str) -> StripResult:
    """
    Remove username and password from ``raw``.

    URLs without userinfo are returned verbatim so that valid input is
    never re-normalized.
    """
    parts = _parse(raw)
    if parts is None:
        return StripResult(ok=False, value=raw)

    if "@" not in parts.netloc:
        return StripResult(ok=True, value=raw)

    host = parts.netloc.rpartition("@")[2]
    return StripResult(ok=True, value=urlunsplit(parts._replace(netloc=host)))
