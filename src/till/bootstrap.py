from __future__ import annotations

from till.infrastructure.observability.logging_config import configure_logging
from till.infrastructure.observability.otel import configure_otel


def configure_runtime() -> None:
    configure_logging()
    configure_otel()
