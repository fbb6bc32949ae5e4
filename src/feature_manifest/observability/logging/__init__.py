"""Observability – structured logging helpers."""
from feature_manifest.observability.logging.factory import configure_logging
from feature_manifest.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
