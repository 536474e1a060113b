from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

import till.bootstrap as bootstrap
import till.infrastructure.observability.otel as otel


def test_configure_runtime_sets_up_logging_and_tracing(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    monkeypatch.setattr(bootstrap, "configure_logging", lambda: calls.append("logging"))
    monkeypatch.setattr(bootstrap, "configure_otel", lambda: calls.append("otel"))

    bootstrap.configure_runtime()

    assert calls == ["logging", "otel"]


def test_configure_otel_installs_provider_once(monkeypatch: pytest.MonkeyPatch) -> None:
    installed: list[object] = []
    monkeypatch.setattr(otel, "_OTEL_CONFIGURED", False)
    monkeypatch.setattr(otel.trace, "set_tracer_provider", installed.append)
    monkeypatch.setenv("OTEL_SERVICE_NAME", "till-test")
    monkeypatch.delenv("OTEL_EXPORTER_OTLP_ENDPOINT", raising=False)

    provider = otel.configure_otel()

    assert provider is not None
    assert provider.resource.attributes["service.name"] == "till-test"
    assert installed == [provider]
    assert otel.configure_otel() is None
    assert installed == [provider]
