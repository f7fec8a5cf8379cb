"""
Shared logging configuration for SVG switch processing.
"""

import sys
import structlog
import logging
from typing import Any, Dict, Optional
from contextvars import ContextVar

from shared.config import get_settings

# Context variables for the element under evaluation
element_id_var: ContextVar[Optional[str]] = ContextVar('element_id', default=None)
document_var: ContextVar[Optional[str]] = ContextVar('document', default=None)


def configure_logging(service_name: str, log_level: Optional[str] = None) -> None:
    """Configure structured logging for a service.

    The level defaults to the SVG_SWITCH_LOG_LEVEL setting.
    """
    if log_level is None:
        log_level = get_settings().log_level

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_service_context,
            add_element_context,
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    structlog.get_logger(service_name).debug("Logging configured", log_level=log_level)


def add_service_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add service context to log events."""
    # Extract service name from logger name
    logger_name = event_dict.get("logger", "")
    if "." in logger_name:
        service_name = logger_name.split(".")[0]
        event_dict["service"] = service_name

    return event_dict


def add_element_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add the element being evaluated to log events."""
    element_id = element_id_var.get()
    if element_id:
        event_dict["element_id"] = element_id

    document = document_var.get()
    if document:
        event_dict["document"] = document

    return event_dict


def set_element_context(element_id: Optional[str] = None, document: Optional[str] = None):
    """Set element context in logging."""
    if element_id:
        element_id_var.set(element_id)
    if document:
        document_var.set(document)


def clear_context():
    """Clear all context variables."""
    element_id_var.set(None)
    document_var.set(None)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
