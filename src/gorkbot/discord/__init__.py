"""Discord ingress: signature verification, interaction dispatch, and setup calls."""

from gorkbot.discord.client import DiscordAPIError, get_discord_client, reset_client
from gorkbot.discord.dispatcher import dispatch
from gorkbot.discord.router import router
from gorkbot.discord.setup import router as setup_router
from gorkbot.discord.signature import verify_signature

__all__ = [
    "DiscordAPIError",
    "dispatch",
    "get_discord_client",
    "reset_client",
    "router",
    "setup_router",
    "verify_signature",
]
