"""Interface contract for chat providers."""

from abc import ABC, abstractmethod

from slack_chat.schemas.chat import ChatPostMessageArguments


class ChatProvider(ABC):
    """Defines message posting and deletion behavior."""

    @abstractmethod
    async def post_message_async(self, arguments: ChatPostMessageArguments) -> str:
        """Post a message and return its ts."""
        raise NotImplementedError

    @abstractmethod
    async def post_message_text_async(self, channel: str, text: str) -> str:
        """Post a text-only message and return its ts."""
        raise NotImplementedError

    @abstractmethod
    async def delete_async(self, channel: str, ts: str) -> None:
        """Delete the message identified by ts from a channel."""
        raise NotImplementedError
