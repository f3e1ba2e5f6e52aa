"""
OpenTelemetry bridge: sanitize attributes before they reach a span.

    writer = SanitizingSpanWriter()
    span = writer.start_span("http.request", attributes=raw)
    writer.set_attributes(span, {"http.status_code": 200})
    writer.add_event(span, "retry", {"attempt": 2})
    span.end()

Entries removed by sanitization are counted on the
``spanattrs.attributes.dropped`` counter, labelled by operation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from opentelemetry import metrics, trace
from opentelemetry.trace import Span

from spanattrs.sanitizer import AttributeSanitizer
from spanattrs.values import AttributeValue

logger = logging.getLogger(__name__)


class SanitizingSpanWriter:
    """
    Thin wrapper over an OTel tracer that runs every attribute mapping
    through an AttributeSanitizer first.

    Thread-safe: keeps no per-span state.
    """

    def __init__(
        self,
        tracer_name: str = "spanattrs",
        meter_name: str = "spanattrs",
        sanitizer: Optional[AttributeSanitizer] = None,
    ) -> None:
        self._tracer = trace.get_tracer(tracer_name)
        self._meter = metrics.get_meter(meter_name)
        self._sanitizer = sanitizer or AttributeSanitizer()

        self._dropped_counter = self._meter.create_counter(
            name="spanattrs.attributes.dropped",
            description="Attributes rejected by sanitization",
            unit="1",
        )

    def start_span(self, name: str, attributes: Any = None, **kwargs: Any) -> Span:
        """Start a span with sanitized attributes. kwargs go to tracer.start_span."""
        attrs = self._clean(attributes, "start_span")
        return self._tracer.start_span(name=name, attributes=attrs, **kwargs)

    def set_attributes(self, span: Span, attributes: Any) -> None:
        if not span.is_recording():
            return
        attrs = self._clean(attributes, "set_attributes")
        if attrs:
            span.set_attributes(attrs)

    def add_event(self, span: Span, name: str, attributes: Any = None) -> None:
        if not span.is_recording():
            return
        span.add_event(name, attributes=self._clean(attributes, "add_event"))

    # --- Helpers ---

    def _clean(self, attributes: Any, operation: str) -> dict[str, AttributeValue]:
        if attributes is None:
            return {}
        sanitized = self._sanitizer(attributes)
        if isinstance(attributes, Mapping):
            dropped = len(attributes) - len(sanitized)
            if dropped:
                self._dropped_counter.add(dropped, {"spanattrs.operation": operation})
                logger.debug("Dropped %d attribute(s) in %s", dropped, operation)
        return sanitized
