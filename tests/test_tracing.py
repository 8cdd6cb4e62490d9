import json

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)
from opentelemetry.trace import StatusCode

from jira_workflow_schemes.tracing import traced

_exporter = InMemorySpanExporter()
_provider = TracerProvider()
_provider.add_span_processor(SimpleSpanProcessor(_exporter))
trace.set_tracer_provider(_provider)


@pytest.fixture(autouse=True)
def exporter():
    _exporter.clear()
    yield _exporter
    _exporter.clear()


def test_sync_span_records_inputs_and_output(exporter):
    @traced(name="add", run_type="jira")
    def add(a, b=2):
        return a + b

    assert add(1) == 3

    (span,) = exporter.get_finished_spans()
    assert span.name == "add"
    assert span.attributes["run_type"] == "jira"
    assert span.attributes["span_type"] == "function_call_sync"
    assert json.loads(span.attributes["inputs"]) == {"a": 1, "b": 2}
    assert json.loads(span.attributes["output"]) == 3


def test_hidden_input(exporter):
    @traced(hide_input=True)
    def secret(token):
        return "ok"

    secret("abc")

    (span,) = exporter.get_finished_spans()
    assert span.name == "secret"
    assert "abc" not in span.attributes["inputs"]


async def test_async_span_records_error(exporter):
    @traced(name="boom")
    async def boom():
        raise ValueError("scheme in use")

    with pytest.raises(ValueError):
        await boom()

    (span,) = exporter.get_finished_spans()
    assert span.attributes["span_type"] == "function_call_async"
    assert span.status.status_code == StatusCode.ERROR


def test_service_methods_are_traced(exporter, service):
    service.retrieve_draft(5)

    names = [span.name for span in exporter.get_finished_spans()]
    assert names == ["workflow_schemes_retrieve_draft"]
