"""FastAPI stand-in for the Slack chat endpoints used by client tests."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qs

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

FAKE_BASE_URL = "http://slack.test/api"


@dataclass(slots=True)
class FakeSlackState:
    """Canned responses and recorded calls for the fake Slack app."""

    post_status: int = 200
    post_body: dict[str, Any] = field(
        default_factory=lambda: {"ok": True, "channel": "C123", "message": {"ts": "1234.5678"}}
    )
    delete_status: int = 200
    delete_body: dict[str, Any] = field(default_factory=lambda: {"ok": True})
    calls: list[dict[str, Any]] = field(default_factory=list)


def build_fake_slack_app(state: FakeSlackState) -> FastAPI:
    """Build an app answering chat.postMessage and chat.delete from state."""
    app = FastAPI()

    @app.post("/api/chat.postMessage")
    async def post_message(request: Request) -> JSONResponse:
        state.calls.append(
            {
                "method": "chat.postMessage",
                "authorization": request.headers.get("authorization"),
                "body": await request.json(),
            }
        )
        return JSONResponse(state.post_body, status_code=state.post_status)

    @app.post("/api/chat.delete")
    async def delete(request: Request) -> JSONResponse:
        # Parsed by hand so the fake does not need python-multipart.
        raw_form = parse_qs((await request.body()).decode("utf-8"))
        state.calls.append(
            {
                "method": "chat.delete",
                "authorization": request.headers.get("authorization"),
                "content_type": request.headers.get("content-type"),
                "form": {key: values[0] for key, values in raw_form.items()},
            }
        )
        return JSONResponse(state.delete_body, status_code=state.delete_status)

    return app


def build_fake_transport(state: FakeSlackState) -> httpx.ASGITransport:
    """Mount the fake app as an httpx transport."""
    return httpx.ASGITransport(app=build_fake_slack_app(state))


@contextmanager
def serve_fake_slack(state: FakeSlackState) -> Iterator[str]:
    """Serve the fake app over real sockets and yield its base URL."""
    server = uvicorn.Server(
        uvicorn.Config(build_fake_slack_app(state), host="127.0.0.1", port=0, log_level="warning")
    )
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    try:
        deadline = time.monotonic() + 10
        while not server.started:
            if not thread.is_alive() or time.monotonic() > deadline:
                raise RuntimeError("fake Slack server did not start")
            time.sleep(0.01)
        port = server.servers[0].sockets[0].getsockname()[1]
        yield f"http://127.0.0.1:{port}/api"
    finally:
        server.should_exit = True
        thread.join(timeout=10)
