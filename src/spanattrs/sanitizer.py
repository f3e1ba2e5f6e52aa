"""
Attribute sanitization: the validation boundary between caller-supplied
metadata and what gets recorded on telemetry.

Every entry of the input mapping is checked independently:
  - invalid key          -> dropped, warning logged
  - invalid value        -> dropped, warning logged
  - URL under a URL key  -> credentials stripped (kept verbatim if unparsable)
  - list/tuple value     -> copied into a new list
  - anything else        -> passed through as-is

Returns a new dict; never mutates the input and never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from spanattrs.policy import SanitizerPolicy
from spanattrs.urls import strip_credentials
from spanattrs.values import AttributeKind, AttributeValue, classify, is_attribute_key, is_homogeneous_array

logger = logging.getLogger(__name__)

_DEFAULT_POLICY = SanitizerPolicy()


def sanitize_attributes(
    attributes: Any,
    policy: Optional[SanitizerPolicy] = None,
    log: Optional[logging.Logger] = None,
) -> dict[str, AttributeValue]:
    """
    Return the subset of ``attributes`` that may be recorded on a span.

    Args:
        attributes: Untyped input. Anything that is not a Mapping yields {}.
        policy:     URL handling policy. Defaults to SanitizerPolicy().
        log:        Diagnostic sink for rejected entries. Defaults to this
                    module's logger.
    """
    policy = policy or _DEFAULT_POLICY
    log = log or logger
    result: dict[str, AttributeValue] = {}

    if not isinstance(attributes, Mapping):
        return result

    for key, value in attributes.items():
        if not is_attribute_key(key):
            log.warning("Invalid attribute key: %s", key)
            continue

        kind = classify(value)
        if kind is AttributeKind.INVALID or (kind is AttributeKind.ARRAY and not is_homogeneous_array(value)):
            log.warning("Invalid attribute value set for key: %s", key)
            continue

        if kind is AttributeKind.STRING and policy.is_url_key(key):
            stripped = strip_credentials(value)
            if not stripped.ok:
                log.warning("Invalid attribute value set for key: %s. Unable to sanitize invalid URL.", key)
            result[key] = stripped.value
            continue

        # Copy so later mutation of the caller's list can't leak in
        if kind is AttributeKind.ARRAY:
            result[key] = list(value)
        else:
            result[key] = value

    return result


class AttributeSanitizer:
    """
    Sanitizer bound to a policy and a diagnostic logger.

    Usage:
        sanitizer = AttributeSanitizer(SanitizerPolicy.from_env())
        clean = sanitizer(raw_attributes)

    Holds no mutable state; one instance can be shared across threads.
    """

    def __init__(
        self,
        policy: Optional[SanitizerPolicy] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self._policy = policy or _DEFAULT_POLICY
        self._log = log or logger

    @property
    def policy(self) -> SanitizerPolicy:
        return self._policy

    def sanitize(self, attributes: Any) -> dict[str, AttributeValue]:
        return sanitize_attributes(attributes, self._policy, self._log)

    __call__ = sanitize
