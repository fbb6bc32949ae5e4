"""Observability – structured logging."""

from feature_manifest.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
