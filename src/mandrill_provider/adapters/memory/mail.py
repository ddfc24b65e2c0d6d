"""In-memory mail provider for testing.

Provides :class:`MailProviderSpy`, which satisfies the same MailProvider
Protocol as the production adapter but performs no network I/O.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ...domain.errors import ValidationError
from ...domain.message import Message
from ...domain.wire import build_wire_message
from ..mandrill.config import ProviderConfig

if TYPE_CHECKING:
    from ...application.ports import OnResult


def _empty_wire_list() -> list[dict[str, Any]]:
    """Create an empty typed list for wire message records."""
    return []


@dataclass
class MailProviderSpy:
    """Captures sends for test assertions.

    Messages go through the real wire transformation, so invalid messages
    are reported with the same ValidationError the production adapter uses.

    Attributes:
        sent_messages: Wire messages accepted by ``send``/``deliver``.
        config: ProviderConfig the spy was created from, when any.
        error: When set, every valid send reports this error.

    Example:
        >>> spy = MailProviderSpy()
        >>> outcomes = []
        >>> def on_result(error=None):
        ...     outcomes.append(error)
        >>> spy.send({"from": "a@x.io", "to": ["b@x.io"], "subject": "s", "textBody": "t"}, on_result)
        >>> len(spy.sent_messages), outcomes
        (1, [None])
    """

    sent_messages: list[dict[str, Any]] = field(default_factory=_empty_wire_list)
    config: ProviderConfig | None = None
    error: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.sent_messages.clear()
        self.error = None

    def send(
        self,
        message: Message | Mapping[str, Any] | None,
        on_result: OnResult | None = None,
    ) -> asyncio.Task[None] | None:
        """Record the message and report the configured outcome synchronously."""
        try:
            self.sent_messages.append(build_wire_message(message))
        except ValidationError as exc:
            if on_result is not None:
                on_result(exc)
            return None

        if on_result is None:
            return None
        if self.error is None:
            on_result()
        else:
            on_result(self.error)
        return None

    async def deliver(self, message: Message | Mapping[str, Any] | None) -> None:
        """Record the message and raise the configured error, if any."""
        self.sent_messages.append(build_wire_message(message))
        if self.error is not None:
            raise self.error

    def create_provider(self, config: ProviderConfig) -> MailProviderSpy:
        """Remember *config* and hand back this spy; satisfies CreateProvider."""
        self.config = config
        return self


__all__ = ["MailProviderSpy"]
