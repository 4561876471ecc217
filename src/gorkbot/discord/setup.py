"""One-off setup endpoints: register slash commands, post the button demo."""

import logging

import httpx
from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from gorkbot.config import get_settings
from gorkbot.discord.client import DiscordAPIError, register_commands, send_message
from gorkbot.discord.responses import ASK_GORK_CUSTOM_ID, COMMANDS, MAGIC_8_BALL
from gorkbot.models.commands import ActionRow, Button, Emoji, MessageCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["setup"])

ASK_GORK_MESSAGE = MessageCreate(
    content="Click the button to ask Gork!",
    components=[
        ActionRow(
            components=[
                Button(
                    label="Ask Gork",
                    custom_id=ASK_GORK_CUSTOM_ID,
                    emoji=Emoji(name=MAGIC_8_BALL),
                ),
            ],
        ),
    ],
)


@router.post("/register-commands")
async def register_commands_endpoint() -> Response:
    """Register /gork and /gork-ephemeral as global slash commands."""
    settings = get_settings()
    if not settings.discord_application_id or not settings.discord_bot_token:
        return PlainTextResponse(
            "Missing DISCORD_APPLICATION_ID or DISCORD_BOT_TOKEN", status_code=400
        )

    try:
        await register_commands(settings.discord_application_id, COMMANDS)
    except DiscordAPIError as exc:
        return PlainTextResponse(
            f"Failed to register commands: {exc.text}", status_code=exc.status_code
        )
    except httpx.HTTPError as exc:
        logger.error("Command registration failed: %s", exc, exc_info=True)
        return PlainTextResponse(f"Error: {exc}", status_code=500)

    return JSONResponse({"message": "Commands registered successfully!"})


@router.post("/send-button")
async def send_button_endpoint() -> Response:
    """Post a message with the "Ask Gork" button to the configured test channel."""
    settings = get_settings()
    if not settings.test_channel_id or not settings.discord_bot_token:
        return PlainTextResponse(
            "Missing TEST_CHANNEL_ID or DISCORD_BOT_TOKEN", status_code=400
        )

    try:
        await send_message(settings.test_channel_id, ASK_GORK_MESSAGE)
    except DiscordAPIError as exc:
        return PlainTextResponse(
            f"Failed to send message: {exc.text}", status_code=exc.status_code
        )
    except httpx.HTTPError as exc:
        logger.error("Button message failed: %s", exc, exc_info=True)
        return PlainTextResponse(f"Error: {exc}", status_code=500)

    return JSONResponse({"message": "Button message sent!"})
