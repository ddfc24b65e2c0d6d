"""Pure transformation from :class:`Message` to the Mandrill wire format.

No I/O happens here. The functions return plain dicts ready for JSON
serialization by the transport adapter.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import ValidationError
from .message import Message, coerce_message

RECIPIENT_TAGS: tuple[str, str, str] = ("to", "cc", "bcc")


def _validate(message: Message) -> None:
    """Raise ValidationError for the first violated required-field rule."""
    if not message.from_address:
        raise ValidationError("Message has no sender (from_address)")
    if not message.to:
        raise ValidationError("Message has no 'to' recipients")
    if not message.subject:
        raise ValidationError("Message has no subject")
    if not message.text_body and not message.html_body:
        raise ValidationError("Message needs a text body or an HTML body")


def build_recipients(message: Message) -> list[dict[str, str]]:
    """Flatten to/cc/bcc into tagged recipient entries.

    Example:
        >>> msg = Message(to=("a@x.io", "b@x.io"), cc=("c@x.io",), bcc=("d@x.io",))
        >>> [(r["type"], r["email"]) for r in build_recipients(msg)]
        [('to', 'a@x.io'), ('to', 'b@x.io'), ('cc', 'c@x.io'), ('bcc', 'd@x.io')]
    """
    recipients: list[dict[str, str]] = []
    for tag, addresses in zip(RECIPIENT_TAGS, (message.to, message.cc, message.bcc), strict=True):
        recipients.extend({"type": tag, "email": address} for address in addresses)
    return recipients


def build_wire_message(message: Message | Mapping[str, Any] | None) -> dict[str, Any]:
    """Validate *message* and return the provider's ``message`` object.

    Args:
        message: A Message, a mapping understood by ``Message.from_mapping``,
            or None (always invalid).

    Returns:
        Dict with ``from_email``, ``to``, ``subject``, ``headers`` and the
        optional ``text``/``html`` bodies. Attachments are not carried.

    Raises:
        ValidationError: When a required field is missing.

    Example:
        >>> wire = build_wire_message({
        ...     "from": "no-reply@example.com",
        ...     "to": ["user@example.net"],
        ...     "subject": "hello",
        ...     "textBody": "plain",
        ... })
        >>> wire["from_email"], wire["headers"], "html" in wire
        ('no-reply@example.com', {}, False)
    """
    msg = coerce_message(message)
    _validate(msg)

    wire: dict[str, Any] = {
        "from_email": msg.from_address,
        "to": build_recipients(msg),
        "subject": msg.subject,
        "headers": {},
    }

    if msg.reply_to:
        wire["headers"]["Reply-To"] = msg.reply_to

    if msg.text_body:
        wire["text"] = msg.text_body

    if msg.html_body:
        wire["html"] = msg.html_body

    return wire


def build_wire_request(
    message: Message | Mapping[str, Any] | None,
    *,
    api_key: str,
    async_mode: bool = False,
    ip_pool: str | None = None,
) -> dict[str, Any]:
    """Wrap the wire message in the ``messages/send`` request envelope.

    Example:
        >>> req = build_wire_request(
        ...     {"from": "a@x.io", "to": ["b@x.io"], "subject": "s", "htmlBody": "<p>h</p>"},
        ...     api_key="k",
        ... )
        >>> sorted(req)
        ['async', 'key', 'message']
    """
    request: dict[str, Any] = {
        "key": api_key,
        "message": build_wire_message(message),
        "async": async_mode,
    }
    if ip_pool:
        request["ip_pool"] = ip_pool
    return request


__all__ = [
    "RECIPIENT_TAGS",
    "build_recipients",
    "build_wire_message",
    "build_wire_request",
]
