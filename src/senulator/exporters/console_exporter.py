"""Console exporter for generation diagnostics."""

import sys

from opentelemetry.sdk._logs.export import ConsoleLogRecordExporter


def create_console_log_exporter():
    """
    Create a log exporter that prints OTEL log records.

    Records go to stderr so SenML written to stdout stays parseable.
    """
    return ConsoleLogRecordExporter(out=sys.stderr)
