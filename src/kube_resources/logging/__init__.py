"""Logging configuration for kube_resources."""

from kube_resources.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
