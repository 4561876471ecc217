"""Canned replies and the slash commands that trigger them."""

import random

from gorkbot.models.commands import ApplicationCommand

# The two responses to randomly choose from
RESPONSES: tuple[str, ...] = (
    "Yeh, nah",
    "Nah, yeh",
)

MAGIC_8_BALL = "\U0001f3b1"

GORK_COMMAND = "gork"
GORK_EPHEMERAL_COMMAND = "gork-ephemeral"
ASK_GORK_CUSTOM_ID = "ask_gork"

COMMANDS: tuple[ApplicationCommand, ...] = (
    ApplicationCommand(
        name=GORK_COMMAND,
        description="Get a response from Gork",
    ),
    ApplicationCommand(
        name=GORK_EPHEMERAL_COMMAND,
        description="Get a private response from Gork (only you can see it)",
    ),
)


def pick_response() -> str:
    """Return one of RESPONSES, chosen uniformly at random."""
    return random.choice(RESPONSES)
