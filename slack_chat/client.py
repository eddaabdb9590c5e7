"""Slack Web API client holding credentials and the shared HTTP transport."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Coroutine
from typing import Any, TypeVar

import httpx

from slack_chat.core.errors import HttpRequestFailedError
from slack_chat.core.settings import Settings, settings as default_settings
from slack_chat.services.chat_service import ChatService

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _inside_running_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class SlackClient:
    """Entry point for Slack API operations.

    One client is meant to be created per process or session and shared. The
    ``*_async`` operations may run concurrently from any event loop, including
    successive ``asyncio.run`` calls. The blocking operations drive those
    coroutines on an event loop owned by the client, so they must not be
    called from inside a running event loop.

    A ``transport`` passed in is shared by every loop the client serves and
    must not hold loop-bound state. The default transport is built per loop.

    Example:
        >>> client = SlackClient("xoxb-...")
        >>> ts = client.chat.post_message_text("C123", "hello")
        >>> client.chat.delete("C123", ts)
        >>> client.close()
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        settings: Settings | None = None,
    ) -> None:
        resolved_settings = settings or default_settings
        if token is None:
            token = resolved_settings.slack_token
            if not token:
                raise RuntimeError("SLACK_TOKEN not configured")

        self.token = token
        self.base_url = base_url or resolved_settings.slack_api_base_url
        self.timeout = timeout if timeout is not None else resolved_settings.slack_timeout
        self._transport = transport

        # Pooled connections are bound to the loop that opened them, so each
        # running loop gets its own AsyncClient, created on first use.
        self._http_by_loop: dict[asyncio.AbstractEventLoop, httpx.AsyncClient] = {}
        self._http_lock = threading.Lock()
        self._loop = asyncio.new_event_loop()
        self._blocking_lock = threading.Lock()

        self.chat = ChatService(client=self)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SlackClient:
        """Build a client entirely from configuration."""
        return cls(settings=settings or default_settings)

    def __repr__(self) -> str:
        """Mask the token to prevent accidental exposure in logs/tracebacks."""
        return f"<{type(self).__name__} base_url={self.base_url!r}>"

    def _build_http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    def _http_for_running_loop(self) -> httpx.AsyncClient:
        loop = asyncio.get_running_loop()
        with self._http_lock:
            # A closed loop can never run its client's cleanup; drop it.
            for stale_loop in [known for known in self._http_by_loop if known.is_closed()]:
                del self._http_by_loop[stale_loop]
                logger.debug("Dropped HTTP client of closed event loop %r", stale_loop)

            http = self._http_by_loop.get(loop)
            if http is None:
                http = self._build_http()
                self._http_by_loop[loop] = http
            return http

    async def api_call(
        self,
        method: str,
        *,
        json: dict[str, Any] | None = None,
        data: dict[str, str] | None = None,
    ) -> Any:
        """POST to a Web API method with bearer auth and return the decoded JSON body.

        Raises:
            HttpRequestFailedError: the exchange failed, the status was not
                2xx, or the body was not JSON.
        """
        http = self._http_for_running_loop()
        request = http.build_request(
            "POST",
            method,
            json=json,
            data=data,
            headers={"Authorization": f"Bearer {self.token}"},
        )
        logger.debug("Calling Slack API method %s", method)

        try:
            response = await http.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise HttpRequestFailedError(str(exc)) from exc

        try:
            response.raise_for_status()
            await response.aread()
        except httpx.HTTPError as exc:
            raise HttpRequestFailedError(str(exc)) from exc
        finally:
            await response.aclose()

        logger.debug("Slack API method %s returned status %s", method, response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise HttpRequestFailedError(f"error decoding response body: {exc}") from exc

    def block_on(self, coroutine: Coroutine[Any, Any, T]) -> T:
        """Run a coroutine to completion on the client's own event loop.

        Raises:
            RuntimeError: called from inside a running event loop.
        """
        if _inside_running_loop():
            coroutine.close()
            raise RuntimeError(
                "Blocking Slack calls cannot run inside a running event loop; await the *_async form instead"
            )

        with self._blocking_lock:
            return self._loop.run_until_complete(coroutine)

    def _close_http(self, loop: asyncio.AbstractEventLoop, http: httpx.AsyncClient) -> None:
        if loop is self._loop:
            self.block_on(http.aclose())
        elif loop.is_running():
            asyncio.run_coroutine_threadsafe(http.aclose(), loop).result()
        else:
            loop.run_until_complete(http.aclose())

    def close(self) -> None:
        """Release every HTTP client whose loop is still open, then the owned event loop."""
        if self._loop.is_closed():
            return
        if _inside_running_loop():
            raise RuntimeError("SlackClient.close() cannot run inside a running event loop; await aclose() instead")

        with self._http_lock:
            open_clients = [(loop, http) for loop, http in self._http_by_loop.items() if not loop.is_closed()]
            self._http_by_loop.clear()

        for loop, http in open_clients:
            self._close_http(loop, http)
        self._loop.close()

    async def aclose(self) -> None:
        """Release every HTTP client held by the client."""
        loop = asyncio.get_running_loop()
        with self._http_lock:
            http = self._http_by_loop.pop(loop, None)
        if http is not None:
            await http.aclose()
        await asyncio.to_thread(self.close)

    def __enter__(self) -> SlackClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> SlackClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
