"""Observability – structured logging for optionkit."""
from optionkit.observability.logging import JsonLoggerFactory, Logger, get_logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
