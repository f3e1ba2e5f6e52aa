"""
spanattrs: attribute sanitization for OpenTelemetry spans.

Quick start::

    from spanattrs import sanitize_attributes
    clean = sanitize_attributes({"http.url": "https://user:pw@host/", "n": 1})
    # {"http.url": "https://host/", "n": 1}

With OTel spans::

    from spanattrs import SanitizingSpanWriter
    writer = SanitizingSpanWriter()
    span = writer.start_span("work", attributes=raw_attributes)
"""

from spanattrs.policy import DEFAULT_URL_KEYS, SanitizerPolicy
from spanattrs.sanitizer import AttributeSanitizer, sanitize_attributes
from spanattrs.spans import SanitizingSpanWriter
from spanattrs.urls import StripResult, strip_credentials
from spanattrs.values import (
    AttributeKind,
    AttributeValue,
    classify,
    is_attribute_key,
    is_attribute_value,
    is_homogeneous_array,
    is_valid_primitive,
)

__all__ = [
    # Sanitization
    "AttributeSanitizer",
    "sanitize_attributes",
    "SanitizerPolicy",
    "DEFAULT_URL_KEYS",
    # Value contract
    "AttributeKind",
    "AttributeValue",
    "classify",
    "is_attribute_key",
    "is_attribute_value",
    "is_homogeneous_array",
    "is_valid_primitive",
    # URLs
    "StripResult",
    "strip_credentials",
    # OTel bridge
    "SanitizingSpanWriter",
]

__version__ = "0.1.0"
