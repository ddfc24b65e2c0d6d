"""Domain layer - pure message modelling with no I/O or framework dependencies.

Contents:
    * :mod:`.message` - Caller-facing Message value object
    * :mod:`.wire` - Message to Mandrill wire-format transformation
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .errors import ApiError, ConfigurationError, TransportError, ValidationError
from .message import Message, coerce_message
from .wire import RECIPIENT_TAGS, build_recipients, build_wire_message, build_wire_request

__all__ = [
    # Message
    "Message",
    "coerce_message",
    # Wire format
    "RECIPIENT_TAGS",
    "build_recipients",
    "build_wire_message",
    "build_wire_request",
    # Errors
    "ApiError",
    "ConfigurationError",
    "TransportError",
    "ValidationError",
]
