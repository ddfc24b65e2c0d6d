"""Message value object: construction and mapping coercion."""

from __future__ import annotations

from typing import Any

import pytest

from mandrill_provider.domain.errors import ValidationError
from mandrill_provider.domain.message import Message, coerce_message


@pytest.mark.os_agnostic
def test_default_message_is_empty() -> None:
    """Every field defaults to its empty value."""
    msg = Message()

    assert msg.from_address == ""
    assert msg.to == ()
    assert msg.cc == ()
    assert msg.bcc == ()
    assert msg.reply_to is None
    assert msg.subject is None
    assert msg.text_body is None
    assert msg.html_body is None


@pytest.mark.os_agnostic
def test_message_is_immutable() -> None:
    """Once created, a Message cannot be modified."""
    msg = Message(subject="hi")

    with pytest.raises(AttributeError):
        msg.subject = "changed"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_from_mapping_reads_camel_case_keys(full_message: dict[str, Any]) -> None:
    """JSON-style keys map onto the snake_case fields."""
    msg = Message.from_mapping(full_message)

    assert msg.from_address == "no-reply@example.com"
    assert msg.to == ("user@example.net", "user@example.org")
    assert msg.cc == ("user2@example.net",)
    assert msg.bcc == ("user3@example.net",)
    assert msg.reply_to == "info@example.com"
    assert msg.subject == "testing, 123..."
    assert msg.text_body == "please disregard"
    assert msg.html_body == "<p>please disregard</p>"


@pytest.mark.os_agnostic
def test_from_mapping_reads_snake_case_keys() -> None:
    """Field names work as mapping keys too."""
    msg = Message.from_mapping(
        {
            "from_address": "a@example.com",
            "to": ["b@example.com"],
            "reply_to": "c@example.com",
            "subject": "s",
            "text_body": "t",
            "html_body": "<p>h</p>",
        }
    )

    assert msg.from_address == "a@example.com"
    assert msg.reply_to == "c@example.com"
    assert msg.text_body == "t"
    assert msg.html_body == "<p>h</p>"


@pytest.mark.os_agnostic
def test_from_mapping_accepts_lowercase_replyto() -> None:
    """The all-lowercase ``replyto`` spelling is understood."""
    assert Message.from_mapping({"replyto": "r@example.com"}).reply_to == "r@example.com"


@pytest.mark.os_agnostic
def test_from_mapping_wraps_single_address_string() -> None:
    """A lone string in an address field becomes a one-element tuple."""
    msg = Message.from_mapping({"to": "solo@example.com", "cc": "copy@example.com"})

    assert msg.to == ("solo@example.com",)
    assert msg.cc == ("copy@example.com",)


@pytest.mark.os_agnostic
def test_from_mapping_defaults_missing_address_lists_to_empty() -> None:
    """Absent or None address lists become empty tuples."""
    msg = Message.from_mapping({"to": None})

    assert msg.to == ()
    assert msg.cc == ()
    assert msg.bcc == ()


@pytest.mark.os_agnostic
def test_from_mapping_rejects_non_sequence_address_list() -> None:
    """An address list of an unusable type is a validation error."""
    with pytest.raises(ValidationError, match="Address list"):
        Message.from_mapping({"to": 42})


@pytest.mark.os_agnostic
def test_from_mapping_keeps_attachments_as_tuple() -> None:
    """Attachments are carried on the message even though they are never sent."""
    msg = Message.from_mapping({"attachments": [{"name": "a.txt"}]})

    assert msg.attachments == ({"name": "a.txt"},)


@pytest.mark.os_agnostic
def test_from_mapping_none_gives_empty_message() -> None:
    """None produces the default empty message."""
    assert Message.from_mapping(None) == Message()


@pytest.mark.os_agnostic
def test_coerce_message_passes_message_through() -> None:
    """An existing Message is returned unchanged."""
    msg = Message(subject="same")

    assert coerce_message(msg) is msg


@pytest.mark.os_agnostic
def test_coerce_message_rejects_unsupported_types() -> None:
    """Lists, numbers and other objects are not messages."""
    with pytest.raises(ValidationError, match="Unsupported message type"):
        coerce_message(["not", "a", "message"])  # type: ignore[arg-type]
