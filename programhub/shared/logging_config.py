# programhub/shared/logging_config.py
import sys
import logging
from typing import Optional

import structlog
from opentelemetry import trace

from programhub.shared.config import settings


def add_open_telemetry_spans(_, __, event_dict):
    """
    Processor to inject the current TraceID and SpanID into the log entry,
    so store and use-case logs can be matched with their spans.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def _stderr_logger_factory(*args):
    # Looked up per call so a replaced sys.stderr (captured test output) is honoured.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(log_format: Optional[str] = None, level: Optional[str] = None):
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).

    Logs go to stderr so that CLI commands can keep stdout for their JSON output.
    """
    log_format = log_format or settings.LOG_FORMAT
    level = (level or settings.LOG_LEVEL).upper()

    processors = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level)
        ),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )

    return structlog.get_logger(settings.APP_NAME)
