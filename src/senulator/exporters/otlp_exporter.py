"""
OTLP exporter for generation diagnostics.

Provides a factory for an OTLP log exporter over HTTP.
"""

from typing import Any

from opentelemetry.exporter.otlp.proto.http._log_exporter import OTLPLogExporter

LOGS_PATH = "/v1/logs"


def logs_endpoint(endpoint: str) -> str:
    """Return the collector URL with the OTLP logs path appended once."""
    endpoint = endpoint.rstrip("/")
    if endpoint.endswith(LOGS_PATH):
        return endpoint
    return f"{endpoint}{LOGS_PATH}"


def create_otlp_log_exporter(
    endpoint: str = "http://localhost:4318",
    headers: dict[str, str] | None = None,
    **kwargs: Any,
) -> OTLPLogExporter:
    """
    Create an OTLP/HTTP log exporter.

    Args:
        endpoint: Collector base URL or full logs URL
        headers: Optional headers to include
        **kwargs: Additional exporter configuration

    Returns:
        Configured OTLPLogExporter
    """
    return OTLPLogExporter(endpoint=logs_endpoint(endpoint), headers=headers, **kwargs)
