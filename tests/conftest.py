"""
Fixtures for spanattrs tests.

The OTel SDK only accepts one global tracer/meter provider per process, so
providers are installed once per session and spans are cleared between tests.
Metric values are cumulative across the session; compare before/after totals.
"""

from __future__ import annotations

import logging
from typing import Iterator

import pytest
from opentelemetry import metrics, trace
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import InMemoryMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from spanattrs.spans import SanitizingSpanWriter


@pytest.fixture(scope="session")
def otel_sinks() -> Iterator[tuple[InMemorySpanExporter, InMemoryMetricReader]]:
    resource = Resource.create({"service.name": "spanattrs-tests"})
    exporter = InMemorySpanExporter()
    reader = InMemoryMetricReader()

    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(SimpleSpanProcessor(exporter))
    trace.set_tracer_provider(tracer_provider)
    metrics.set_meter_provider(MeterProvider(resource=resource, metric_readers=[reader]))

    yield exporter, reader
    tracer_provider.shutdown()


@pytest.fixture
def span_exporter(otel_sinks) -> InMemorySpanExporter:
    exporter = otel_sinks[0]
    exporter.clear()
    return exporter


@pytest.fixture
def metric_reader(otel_sinks) -> InMemoryMetricReader:
    return otel_sinks[1]


@pytest.fixture
def writer(otel_sinks) -> SanitizingSpanWriter:
    return SanitizingSpanWriter(tracer_name="test-spanattrs", meter_name="test-spanattrs")


@pytest.fixture
def sanitizer_caplog(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog capturing warnings from the sanitizer logger."""
    caplog.set_level(logging.WARNING, logger="spanattrs.sanitizer")
    return caplog
