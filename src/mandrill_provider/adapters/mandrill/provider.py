"""Mandrill HTTP transport.

Provides :class:`MandrillProvider`, which turns a :class:`Message` into a
``messages/send`` request, posts it with httpx and reports the outcome
either by raising (:meth:`MandrillProvider.deliver`) or through a result
callback (:meth:`MandrillProvider.send`).
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx
import orjson

from mandrill_provider.domain.errors import ApiError, ConfigurationError, TransportError, ValidationError
from mandrill_provider.domain.message import Message
from mandrill_provider.domain.wire import build_wire_request

from .config import ProviderConfig, ProviderOptions, build_provider_config

if TYPE_CHECKING:
    from mandrill_provider.application.ports import OnResult

logger = logging.getLogger(__name__)

SEND_PATH = "/api/1.0/messages/send.json"


class MandrillProvider:
    """Send email through the Mandrill ``messages/send`` API.

    Construction validates the key and options but performs no I/O. Every
    send opens its own HTTP client, so one instance can serve concurrent
    sends. Besides the frozen :class:`ProviderConfig` the instance only
    holds references to its pending send tasks.

    Args:
        api_key: Mandrill API key. Must be a non-empty ``str``.
        options: ProviderOptions, a mapping of option names, or None.
        transport: Optional httpx transport used for every request.

    Raises:
        ConfigurationError: When the key is missing or not a string, or an
            option is invalid.

    Example:
        >>> provider = MandrillProvider("api-key")
        >>> str(provider.endpoint)
        'https://mandrillapp.com/api/1.0/messages/send.json'
        >>> MandrillProvider(None)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ConfigurationError: API key must be a non-empty string
    """

    def __init__(
        self,
        api_key: str,
        options: ProviderOptions | Mapping[str, Any] | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not isinstance(api_key, str) or not api_key.strip():
            raise ConfigurationError("API key must be a non-empty string")

        self._config = build_provider_config(api_key, options)
        self._transport = transport
        # Strong references; the event loop only keeps weak ones.
        self._pending: set[asyncio.Task[None]] = set()

        try:
            self._endpoint = httpx.URL(
                scheme="https" if self._config.use_secure_transport else "http",
                host=self._config.hostname,
                port=self._config.port,
                path=SEND_PATH,
            )
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"Invalid hostname {self._config.hostname!r}: {exc}") from exc

    @classmethod
    def from_config(
        cls,
        config: ProviderConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> MandrillProvider:
        """Build a provider from an already validated ProviderConfig."""
        options = config.model_dump(exclude={"api_key"}, exclude_unset=True)
        return cls(config.api_key, options, transport=transport)

    @property
    def config(self) -> ProviderConfig:
        return self._config

    @property
    def endpoint(self) -> httpx.URL:
        return self._endpoint

    def encode(self, message: Message | Mapping[str, Any] | None) -> bytes:
        """Validate, transform and serialize *message* to the JSON request body.

        Raises:
            ValidationError: When a required message field is missing.
        """
        request = build_wire_request(
            message,
            api_key=self._config.api_key,
            async_mode=self._config.async_mode,
            ip_pool=self._config.ip_pool,
        )
        return orjson.dumps(request)

    async def deliver(self, message: Message | Mapping[str, Any] | None) -> None:
        """Send *message* and raise on any failure.

        Raises:
            ValidationError: Message failed a required-field check; nothing was sent.
            TransportError: No HTTP response could be obtained.
            ApiError: The API answered with a status other than 200.
        """
        body = self.encode(message)
        await self._post(body)

    def send(
        self,
        message: Message | Mapping[str, Any] | None,
        on_result: OnResult | None = None,
    ) -> asyncio.Task[None] | None:
        """Send *message* without blocking and report through *on_result*.

        Inside a running event loop the round trip is scheduled as a task
        and the task is returned so callers may await it; the task itself
        never fails because of a send failure. Called from synchronous code,
        the round trip runs on a daemon thread with its own loop and None is
        returned. An invalid message is reported synchronously and nothing
        is scheduled. *on_result* is called at most once: with no argument
        on success, with the error otherwise.

        Without *on_result* the request is still sent and its outcome is
        only logged.
        """
        try:
            body = self.encode(message)
        except ValidationError as exc:
            if on_result is None:
                logger.debug("Dropping invalid message", extra={"reason": str(exc)})
            else:
                on_result(exc)
            return None

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._start_send_thread(body, on_result)
            return None

        task = loop.create_task(self._post_and_report(body, on_result))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def _start_send_thread(self, body: bytes, on_result: OnResult | None) -> None:
        def _run() -> None:
            asyncio.run(self._post_and_report(body, on_result))

        thread = threading.Thread(target=_run, name="mandrill-send", daemon=True)
        thread.start()

    async def _post_and_report(self, body: bytes, on_result: OnResult | None) -> None:
        error: Exception | None = None
        try:
            await self._post(body)
        except (TransportError, ApiError) as exc:
            error = exc

        if on_result is None:
            if error is not None:
                logger.warning("Unobserved email send failure", extra={"error": str(error)})
            return

        if error is None:
            on_result()
        else:
            on_result(error)

    async def _post(self, body: bytes) -> None:
        headers = {
            "Content-Type": "application/json",
            "Content-Length": str(len(body)),
        }

        logger.info(
            "Sending email",
            extra={
                "endpoint": str(self._endpoint),
                "content_length": len(body),
                "async_mode": self._config.async_mode,
                "ip_pool": self._config.ip_pool,
            },
        )

        response_data = ""
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._config.timeout) as client:
                async with client.stream("POST", self._endpoint, content=body, headers=headers) as response:
                    status_code = response.status_code
                    # The body of a 200 is never read.
                    if status_code != 200:
                        await response.aread()
                        response_data = response.text
        except httpx.RequestError as exc:
            logger.debug("Mandrill request failed", exc_info=True)
            raise TransportError(
                f"Request to {self._config.hostname}:{self._config.port} failed: {exc}",
                cause=exc,
            ) from exc

        if status_code == 200:
            logger.info("Email sent successfully", extra={"endpoint": str(self._endpoint)})
            return

        logger.error(
            "Mandrill rejected email",
            extra={"http_status_code": status_code, "http_response_data": response_data},
        )
        raise ApiError(status_code, response_data)

    def __repr__(self) -> str:
        return f"MandrillProvider(config={self._config!r})"


def create_provider(config: ProviderConfig) -> MandrillProvider:
    """Build a production MandrillProvider from *config*."""
    return MandrillProvider.from_config(config)


__all__ = [
    "SEND_PATH",
    "MandrillProvider",
    "create_provider",
]
