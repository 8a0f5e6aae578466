"""Observability – structured logging ports and helpers."""
from optionkit.observability.logging.factory import JsonLoggerFactory
from optionkit.observability.logging.processors import get_logger
from optionkit.observability.logging.protocol import Logger

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "get_logger",
]
