"""
Shared error handling for SVG switch processing.
"""

from typing import Dict, Any, Optional


class SwitchProcessingException(Exception):
    """Base exception for switch processing."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RegistryError(SwitchProcessingException):
    """Registry construction errors."""

    def __init__(self, message: str = "Invalid registry", details: Optional[Dict[str, Any]] = None):
        super().__init__("REGISTRY_ERROR", message, details)


class AttributeValueError(SwitchProcessingException):
    """Invalid value for an attribute."""

    def __init__(self, attribute: str, message: str = "Invalid attribute value", details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        details.setdefault("attribute", attribute)
        self.attribute = attribute
        super().__init__("ATTRIBUTE_VALUE_ERROR", f'invalid value for attribute "{attribute}": {message}', details)
