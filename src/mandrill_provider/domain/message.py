"""Caller-facing email message value object.

A :class:`Message` is deliberately permissive at construction time: any
combination of fields can be represented, including invalid ones. The
required-field checks run when the message is transformed into the wire
format so that a bad message is reported through the send callback rather
than raised at the call site.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .errors import ValidationError

# Accepted mapping keys per field, first match wins.
_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "from_address": ("from_address", "from"),
    "to": ("to",),
    "cc": ("cc",),
    "bcc": ("bcc",),
    "reply_to": ("reply_to", "replyTo", "replyto"),
    "subject": ("subject",),
    "text_body": ("text_body", "textBody"),
    "html_body": ("html_body", "htmlBody"),
    "attachments": ("attachments",),
}


def _as_address_tuple(value: Any) -> tuple[str, ...]:
    """Normalize an address field to a tuple.

    Examples:
        >>> _as_address_tuple(None)
        ()
        >>> _as_address_tuple("a@example.com")
        ('a@example.com',)
        >>> _as_address_tuple(["a@example.com", "b@example.com"])
        ('a@example.com', 'b@example.com')
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence):
        return tuple(value)
    raise ValidationError(f"Address list must be a string or a sequence, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class Message:
    """An email as the caller describes it.

    Attributes:
        from_address: Sender address.
        to: Primary recipients, in delivery order.
        cc: Carbon-copy recipients.
        bcc: Blind carbon-copy recipients.
        reply_to: Optional Reply-To address.
        subject: Subject line.
        text_body: Plain-text body.
        html_body: HTML body.
        attachments: Accepted for interface compatibility and ignored.

    Example:
        >>> msg = Message(from_address="no-reply@example.com", to=("user@example.net",), subject="Hi", text_body="x")
        >>> msg.cc
        ()
    """

    from_address: str = ""
    to: tuple[str, ...] = ()
    cc: tuple[str, ...] = ()
    bcc: tuple[str, ...] = ()
    reply_to: str | None = None
    subject: str | None = None
    text_body: str | None = None
    html_body: str | None = None
    attachments: tuple[Any, ...] = field(default=())

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> Message:
        """Build a Message from a plain mapping.

        Understands both snake_case keys and the camelCase spellings used by
        JSON producers (``from``, ``replyTo``, ``textBody``, ``htmlBody``).
        Single strings for ``to``/``cc``/``bcc`` become one-element tuples.
        ``None`` produces an empty message.

        Raises:
            ValidationError: When an address field has an unusable type.

        Example:
            >>> msg = Message.from_mapping({"from": "a@example.com", "to": ["b@example.com"], "replyTo": "c@example.com"})
            >>> msg.from_address, msg.to, msg.reply_to
            ('a@example.com', ('b@example.com',), 'c@example.com')
        """
        if data is None:
            return cls()

        values: dict[str, Any] = {}
        for name, keys in _KEY_ALIASES.items():
            for key in keys:
                if key in data:
                    values[name] = data[key]
                    break

        return cls(
            from_address=values.get("from_address") or "",
            to=_as_address_tuple(values.get("to")),
            cc=_as_address_tuple(values.get("cc")),
            bcc=_as_address_tuple(values.get("bcc")),
            reply_to=values.get("reply_to"),
            subject=values.get("subject"),
            text_body=values.get("text_body"),
            html_body=values.get("html_body"),
            attachments=tuple(values.get("attachments") or ()),
        )


def coerce_message(message: Message | Mapping[str, Any] | None) -> Message:
    """Return *message* as a :class:`Message`.

    Raises:
        ValidationError: When *message* is neither a Message, a mapping, nor None.

    Example:
        >>> coerce_message(None) == Message()
        True
    """
    if isinstance(message, Message):
        return message
    if message is None or isinstance(message, Mapping):
        return Message.from_mapping(message)
    raise ValidationError(f"Unsupported message type: {type(message).__name__}")


__all__ = [
    "Message",
    "coerce_message",
]
