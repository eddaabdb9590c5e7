"""Live post-and-delete round trips against a real Slack workspace.

Skipped unless SLACK_TOKEN and SLACK_CHANNEL_ID are set.
"""

from __future__ import annotations

import unittest

from slack_chat import ChatPostMessageArguments, SlackClient
from slack_chat.core.settings import Settings

live_settings = Settings()


@unittest.skipUnless(
    live_settings.slack_token and live_settings.slack_channel_id,
    "SLACK_TOKEN and SLACK_CHANNEL_ID are required for live Slack tests",
)
class LiveSlackTestCase(unittest.TestCase):
    text = "Hello, Slack from Python!"

    def setUp(self) -> None:
        self.channel_id = live_settings.slack_channel_id
        self.client = SlackClient.from_settings(live_settings)
        self.addCleanup(self.client.close)

    def test_post_message_and_delete(self) -> None:
        arguments = ChatPostMessageArguments(channel=self.channel_id, text=self.text)

        ts = self.client.chat.post_message(arguments)
        self.assertTrue(ts)

        self.client.chat.delete(self.channel_id, ts)

    def test_post_message_text_and_delete(self) -> None:
        ts = self.client.chat.post_message_text(self.channel_id, self.text)
        self.assertTrue(ts)

        self.client.chat.delete(self.channel_id, ts)


@unittest.skipUnless(
    live_settings.slack_token and live_settings.slack_channel_id,
    "SLACK_TOKEN and SLACK_CHANNEL_ID are required for live Slack tests",
)
class LiveSlackAsyncTestCase(unittest.IsolatedAsyncioTestCase):
    async def test_post_message_text_and_delete_async(self) -> None:
        async with SlackClient.from_settings(live_settings) as client:
            ts = await client.chat.post_message_text_async(live_settings.slack_channel_id, "Hello again!")
            await client.chat.delete_async(live_settings.slack_channel_id, ts)


if __name__ == "__main__":
    unittest.main()
