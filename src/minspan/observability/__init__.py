"""Observability helpers (structured logging)."""

from minspan.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "configure_logging",
]
