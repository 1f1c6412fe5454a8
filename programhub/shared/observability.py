# programhub/shared/observability.py
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from programhub.shared.config import settings


def setup_observability() -> TracerProvider:
    """
    Configures OpenTelemetry for the process.

    1. Sets the Global Tracer Provider.
    2. Prints spans to the console when DEBUG is on; otherwise spans are only
       used to generate Trace IDs for the structured logs.
    """
    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "service.environment": settings.APP_ENV.value,
    })

    provider = TracerProvider(resource=resource)

    if settings.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    return provider


def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...
    """
    return trace.get_tracer(name)
