"""
Sanitizer configuration.

Configuration is driven by arguments + environment variables:

  SPANATTRS_URL_KEYS                - Comma-separated attribute keys holding URLs
                                      (e.g. "http.url,url.full,db.connection_url")
  SPANATTRS_STRIP_URL_CREDENTIALS   - "false"/"0"/"no"/"off" disables credential stripping
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from opentelemetry.semconv._incubating.attributes.http_attributes import HTTP_URL
from opentelemetry.semconv.attributes.url_attributes import URL_FULL

URL_KEYS_ENV = "SPANATTRS_URL_KEYS"
STRIP_URL_CREDENTIALS_ENV = "SPANATTRS_STRIP_URL_CREDENTIALS"

DEFAULT_URL_KEYS: frozenset[str] = frozenset({HTTP_URL, URL_FULL})

_FALSE_VALUES = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class SanitizerPolicy:
    """
    Controls the URL handling of the sanitizer.

    Attributes:
        url_keys:               Attribute keys whose string values are URLs.
        strip_url_credentials:  Remove user:password@ from those URLs.
    """

    url_keys: frozenset[str] = field(default_factory=lambda: DEFAULT_URL_KEYS)
    strip_url_credentials: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> SanitizerPolicy:
        """Build a policy from SPANATTRS_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            url_keys=_resolve_url_keys(env.get(URL_KEYS_ENV)),
            strip_url_credentials=_resolve_flag(env.get(STRIP_URL_CREDENTIALS_ENV), default=True),
        )

    def is_url_key(self, key: str) -> bool:
        return self.strip_url_credentials and key in self.url_keys


def _resolve_url_keys(raw: Optional[str]) -> frozenset[str]:
    if not raw:
        return DEFAULT_URL_KEYS
    keys = {part.strip() for part in raw.split(",") if part.strip()}
    return frozenset(keys) if keys else DEFAULT_URL_KEYS


def _resolve_flag(raw: Optional[str], default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES
