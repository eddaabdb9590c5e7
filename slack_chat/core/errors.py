"""Error types raised by Slack API operations."""

from __future__ import annotations


class SlackApiError(Exception):
    """Base class for every failure surfaced by the client."""

    prefix = "Slack API error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class InvalidArgumentError(SlackApiError, ValueError):
    """Caller input violated a precondition, or the response had an unexpected shape."""

    prefix = "Invalid argument"


class UnexpectedResponseError(InvalidArgumentError):
    """Slack answered successfully at the HTTP level but not with the expected body."""


class HttpRequestFailedError(SlackApiError):
    """The HTTP exchange failed or the server returned a non-success status."""

    prefix = "HTTP request failed"
