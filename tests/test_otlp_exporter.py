"""Tests for the OTLP log exporter factory."""

import pytest
from opentelemetry.exporter.otlp.proto.http._log_exporter import OTLPLogExporter

from senulator import cli
from senulator.exporters.otlp_exporter import create_otlp_log_exporter, logs_endpoint


@pytest.mark.parametrize(
    "endpoint, expected",
    [
        ("http://localhost:4318", "http://localhost:4318/v1/logs"),
        ("http://localhost:4318/", "http://localhost:4318/v1/logs"),
        ("https://collector:4318/v1/logs", "https://collector:4318/v1/logs"),
    ],
)
def test_logs_endpoint_appends_path_once(endpoint: str, expected: str) -> None:
    """The logs path is added to a base URL and left alone on a full one."""
    assert logs_endpoint(endpoint) == expected


def test_create_otlp_log_exporter_returns_http_exporter() -> None:
    """The factory builds an OTLP/HTTP exporter without connecting."""
    exporter = create_otlp_log_exporter("http://localhost:4318", headers={"x-team": "metering"})
    try:
        assert isinstance(exporter, OTLPLogExporter)
    finally:
        exporter.shutdown()


def test_cli_otlp_option_uses_http_factory(monkeypatch: pytest.MonkeyPatch) -> None:
    """--log-exporter otlp builds the exporter from --endpoint."""
    seen = {}

    def fake_factory(endpoint):
        seen["endpoint"] = endpoint
        return "exporter"

    monkeypatch.setattr(cli, "create_otlp_log_exporter", fake_factory)
    args = cli.create_parser().parse_args(
        ["--log-exporter", "otlp", "--endpoint", "http://collector:4318", "list"]
    )
    assert cli._create_log_exporter(args) == "exporter"
    assert seen["endpoint"] == "http://collector:4318"
