import inspect
import json
from functools import wraps
from typing import Any, Callable, Optional

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from ._utils import _SpanUtils

_tracer_instance: Optional[trace.Tracer] = None


def get_tracer() -> trace.Tracer:
    """Lazily initializes and returns the tracer instance."""
    global _tracer_instance
    if _tracer_instance is None:
        _tracer_instance = trace.get_tracer(__name__)
    return _tracer_instance


def _default_input_processor(inputs):
    """Default input processor that doesn't log any actual input data."""
    return {"redacted": "Input data not logged for privacy/security"}


def _default_output_processor(outputs):
    """Default output processor that doesn't log any actual output data."""
    return {"redacted": "Output data not logged for privacy/security"}


def _record_inputs(span, func, input_processor, args, kwargs) -> None:
    inputs = _SpanUtils.format_args_for_trace_json(
        inspect.signature(func), *args, **kwargs
    )
    if input_processor is not None:
        inputs = json.dumps(input_processor(json.loads(inputs)), default=str)
    span.set_attribute("inputs", inputs)


def _record_output(span, output_processor, result) -> None:
    output = result if output_processor is None else output_processor(result)
    span.set_attribute("output", json.dumps(output, default=str))


def _record_error(span, error: Exception) -> None:
    span.record_exception(error)
    span.set_status(Status(StatusCode.ERROR, str(error)))


def traced(
    name: Optional[str] = None,
    run_type: Optional[str] = None,
    span_type: Optional[str] = None,
    input_processor: Optional[Callable[..., Any]] = None,
    output_processor: Optional[Callable[..., Any]] = None,
    hide_input: bool = False,
    hide_output: bool = False,
):
    """Decorator that will trace function invocations with OpenTelemetry.

    Args:
        name: Span name, defaults to the function name
        run_type: Optional string to categorize the run type
        span_type: Optional string to categorize the span type
        input_processor: Optional function to process function inputs before recording
            Should accept a dictionary of inputs and return a processed dictionary
        output_processor: Optional function to process function outputs before recording
            Should accept the function output and return a processed value
        hide_input: If True, don't log any input data
        hide_output: If True, don't log any output data
    """
    if hide_input:
        input_processor = _default_input_processor
    if hide_output:
        output_processor = _default_output_processor

    def decorator(func):
        trace_name = name if name is not None else func.__name__

        def _start_span(default_span_type: str):
            span = get_tracer().start_as_current_span(trace_name)
            return span, (span_type if span_type is not None else default_span_type)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            span_cm, kind = _start_span("function_call_sync")
            with span_cm as span:
                span.set_attribute("span_type", kind)
                if run_type is not None:
                    span.set_attribute("run_type", run_type)
                _record_inputs(span, func, input_processor, args, kwargs)
                try:
                    result = func(*args, **kwargs)
                    _record_output(span, output_processor, result)
                    return result
                except Exception as e:
                    _record_error(span, e)
                    raise

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            span_cm, kind = _start_span("function_call_async")
            with span_cm as span:
                span.set_attribute("span_type", kind)
                if run_type is not None:
                    span.set_attribute("run_type", run_type)
                _record_inputs(span, func, input_processor, args, kwargs)
                try:
                    result = await func(*args, **kwargs)
                    _record_output(span, output_processor, result)
                    return result
                except Exception as e:
                    _record_error(span, e)
                    raise

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
