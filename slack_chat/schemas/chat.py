"""Schemas for the chat.postMessage request body."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChatPostMessageField(BaseModel):
    """A title/value pair rendered as a table cell inside an attachment."""

    model_config = ConfigDict(extra="forbid")

    title: str
    value: str
    short: bool


class ChatPostMessageAttachment(BaseModel):
    """Legacy secondary attachment shown below the message text."""

    model_config = ConfigDict(extra="forbid")

    fallback: str | None = None
    color: str | None = None
    pretext: str | None = None
    author_name: str | None = None
    author_link: str | None = None
    author_icon: str | None = None
    title: str | None = None
    title_link: str | None = None
    text: str | None = None
    fields: list[ChatPostMessageField] | None = None
    image_url: str | None = None
    thumb_url: str | None = None
    footer: str | None = None
    footer_icon: str | None = None
    ts: int | None = None


class ChatPostMessageArguments(BaseModel):
    """Arguments for the chat.postMessage API method.

    Only ``channel`` is required by the model. At least one of ``text``,
    ``blocks`` or ``attachments`` must also be set, which is checked when the
    message is posted.
    """

    model_config = ConfigDict(extra="forbid")

    channel: str = Field(..., description="Channel, private group or IM to post to. Encoded ID or name.")
    text: str | None = Field(default=None, description="Message text, or fallback text when blocks are used.")
    blocks: list[Any] | None = Field(default=None, description="Block Kit layout blocks.")
    attachments: list[ChatPostMessageAttachment] | None = None
    icon_emoji: str | None = Field(default=None, description="Emoji used as the icon. Overrides icon_url.")
    icon_url: str | None = None
    link_names: bool | None = Field(default=None, description="Find and link user groups.")
    metadata: dict[str, Any] | list[Any] | None = Field(
        default=None,
        description="Message metadata with event_type and event_payload.",
    )
    mrkdwn: bool | None = Field(default=None, description="Set to false to disable Slack markup parsing.")
    parse: str | None = None
    reply_broadcast: bool | None = Field(
        default=None,
        description="With thread_ts, also show the reply to everyone in the channel.",
    )
    thread_ts: str | None = Field(default=None, description="Parent message ts, making this message a reply.")
    username: str | None = None

    def has_content(self) -> bool:
        """Return True when text, blocks or attachments is set."""
        return self.text is not None or self.blocks is not None or self.attachments is not None

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON request body, leaving out every unset field."""
        return self.model_dump(mode="json", exclude_none=True)
