"""Async Discord REST client singleton.

Creates a cached httpx.AsyncClient bound to the Discord API base URL with the
bot token from application settings. Only used by the setup routes; the
interactions endpoint never calls out.
"""

import logging
from collections.abc import Iterable

import httpx

from gorkbot.config import get_settings
from gorkbot.models.commands import ApplicationCommand, MessageCreate

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


class DiscordAPIError(Exception):
    """Discord answered a REST call with a non-2xx status."""

    def __init__(self, status_code: int, text: str) -> None:
        super().__init__(f"Discord API returned {status_code}: {text}")
        self.status_code = status_code
        self.text = text


async def get_discord_client() -> httpx.AsyncClient:
    """Return a cached async Discord client instance.

    Creates the client on first call using discord_bot_token and
    discord_api_base from settings. Subsequent calls return the cached instance.
    """
    global _client
    if _client is None:
        settings = get_settings()
        _client = httpx.AsyncClient(
            base_url=settings.discord_api_base,
            headers={"Authorization": f"Bot {settings.discord_bot_token}"},
            timeout=httpx.Timeout(10.0),
        )
    return _client


async def close_client() -> None:
    """Close and drop the cached client, if any."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None


def _raise_for_status(response: httpx.Response) -> None:
    if not response.is_success:
        logger.warning(
            "Discord API %s %s failed with %d",
            response.request.method,
            response.request.url.path,
            response.status_code,
        )
        raise DiscordAPIError(response.status_code, response.text)


async def register_commands(
    application_id: str, commands: Iterable[ApplicationCommand]
) -> None:
    """Overwrite the application's global slash commands with ``commands``.

    Raises DiscordAPIError on a non-2xx answer and httpx.HTTPError on
    transport failures.
    """
    client = await get_discord_client()
    response = await client.put(
        f"/applications/{application_id}/commands",
        json=[command.model_dump(mode="json") for command in commands],
    )
    _raise_for_status(response)
    logger.info("Registered slash commands for application %s", application_id)


async def send_message(channel_id: str, message: MessageCreate) -> None:
    """Post ``message`` to a channel as the bot.

    Raises DiscordAPIError on a non-2xx answer and httpx.HTTPError on
    transport failures.
    """
    client = await get_discord_client()
    response = await client.post(
        f"/channels/{channel_id}/messages",
        json=message.model_dump(mode="json", exclude_none=True),
    )
    _raise_for_status(response)
    logger.info("Sent message to channel %s", channel_id)
