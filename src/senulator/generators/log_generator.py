"""
Export generation diagnostics as OpenTelemetry log records.

Generation code logs through the standard ``logging`` module under the
``senulator`` namespace. GenerationLogger attaches an OTEL LoggingHandler to
that namespace so request, unit and failure messages reach a console, file or
OTLP log exporter, with any ``extra`` fields carried as attributes.
"""

import logging

from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor, LogRecordExporter
from opentelemetry.sdk.resources import Resource

from .. import __version__
from ..config import LOGGER_NAMESPACE, get_log_level


class GenerationLogger:
    """Bridge the senulator logger namespace into an OTEL LoggerProvider."""

    def __init__(
        self,
        exporter: LogRecordExporter,
        service_name: str = "senulator",
        level: int | str | None = None,
    ):
        """Initialize the provider, processor and logging handler."""
        resource = Resource.create(
            {
                "service.name": service_name,
                "service.version": __version__,
            }
        )
        self.provider = LoggerProvider(resource=resource)
        self.provider.add_log_record_processor(BatchLogRecordProcessor(exporter))

        self.handler = LoggingHandler(
            level=logging.DEBUG,
            logger_provider=self.provider,
        )

        self.logger = logging.getLogger(LOGGER_NAMESPACE)
        self.logger.setLevel(level if level is not None else get_log_level())
        self.logger.addHandler(self.handler)

    def log_summary(self, name: str, records: int, units: int) -> None:
        """Log the outcome of a generation run."""
        self.logger.info(
            f"Request {name} produced {records} records",
            extra={
                "event.name": "generation.complete",
                "request.name": name,
                "request.records": records,
                "request.units": units,
            },
        )

    def shutdown(self) -> None:
        """Flush pending log records and detach the handler."""
        self.logger.removeHandler(self.handler)
        self.provider.shutdown()
