"""Chat operations for posting and deleting Slack messages."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from slack_chat.core.errors import InvalidArgumentError, UnexpectedResponseError
from slack_chat.interfaces.chat_provider import ChatProvider
from slack_chat.schemas.chat import ChatPostMessageArguments

if TYPE_CHECKING:
    from slack_chat.client import SlackClient

logger = logging.getLogger(__name__)

POST_MESSAGE_METHOD = "chat.postMessage"
DELETE_METHOD = "chat.delete"


class ChatService(ChatProvider):
    """Slack chat methods in coroutine and blocking forms.

    The coroutine forms do the work. Each blocking form runs its coroutine on
    the client's owned event loop and must not be called from a running loop.
    """

    def __init__(self, client: SlackClient) -> None:
        self.client = client

    async def post_message_async(self, arguments: ChatPostMessageArguments) -> str:
        """Send a message to a channel and return its ts.

        https://api.slack.com/methods/chat.postMessage
        """
        if not arguments.has_content():
            raise InvalidArgumentError("text, attachments, or blocks is required")

        body = await self.client.api_call(POST_MESSAGE_METHOD, json=arguments.to_payload())

        message = body.get("message") if isinstance(body, dict) else None
        ts = message.get("ts") if isinstance(message, dict) else None
        if not isinstance(ts, str):
            raise UnexpectedResponseError("No message ID in response")

        logger.debug("Posted Slack message %s to channel %s", ts, arguments.channel)
        return ts

    async def post_message_text_async(self, channel: str, text: str) -> str:
        """Send a text-only message to a channel and return its ts."""
        arguments = ChatPostMessageArguments(channel=channel, text=text)
        return await self.post_message_async(arguments)

    async def delete_async(self, channel: str, ts: str) -> None:
        """Delete a message from a channel.

        https://api.slack.com/methods/chat.delete
        """
        body = await self.client.api_call(DELETE_METHOD, data={"channel": channel, "ts": ts})
        if not isinstance(body, dict) or body.get("ok") is not True:
            raise UnexpectedResponseError("Failed to delete message")

        logger.debug("Deleted Slack message %s from channel %s", ts, channel)

    def post_message(self, arguments: ChatPostMessageArguments) -> str:
        """Blocking form of post_message_async."""
        return self.client.block_on(self.post_message_async(arguments))

    def post_message_text(self, channel: str, text: str) -> str:
        """Blocking form of post_message_text_async."""
        return self.client.block_on(self.post_message_text_async(channel, text))

    def delete(self, channel: str, ts: str) -> None:
        """Blocking form of delete_async."""
        self.client.block_on(self.delete_async(channel, ts))
