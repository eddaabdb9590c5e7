"""Typed client for the Slack Web API chat methods."""

from slack_chat.client import SlackClient
from slack_chat.core.errors import (
    HttpRequestFailedError,
    InvalidArgumentError,
    SlackApiError,
    UnexpectedResponseError,
)
from slack_chat.core.settings import Settings
from slack_chat.interfaces.chat_provider import ChatProvider
from slack_chat.schemas.chat import (
    ChatPostMessageArguments,
    ChatPostMessageAttachment,
    ChatPostMessageField,
)
from slack_chat.services.chat_service import ChatService

__all__ = [
    "SlackClient",
    "ChatProvider",
    "ChatService",
    "ChatPostMessageArguments",
    "ChatPostMessageAttachment",
    "ChatPostMessageField",
    "Settings",
    "SlackApiError",
    "InvalidArgumentError",
    "UnexpectedResponseError",
    "HttpRequestFailedError",
]
