"""Data models for Discord interactions and outbound REST payloads."""

from gorkbot.models.commands import (
    ActionRow,
    ApplicationCommand,
    ApplicationCommandType,
    Button,
    ButtonStyle,
    ComponentType,
    Emoji,
    MessageCreate,
)
from gorkbot.models.interactions import (
    ApplicationCommandInteraction,
    CommandData,
    ComponentData,
    Interaction,
    InteractionResponse,
    InteractionResponseType,
    InteractionType,
    MessageComponentInteraction,
    MessageData,
    MessageFlags,
    PingInteraction,
    decode_interaction,
    parse_interaction,
)

__all__ = [
    "ActionRow",
    "ApplicationCommand",
    "ApplicationCommandInteraction",
    "ApplicationCommandType",
    "Button",
    "ButtonStyle",
    "CommandData",
    "ComponentData",
    "ComponentType",
    "Emoji",
    "Interaction",
    "InteractionResponse",
    "InteractionResponseType",
    "InteractionType",
    "MessageComponentInteraction",
    "MessageCreate",
    "MessageData",
    "MessageFlags",
    "PingInteraction",
    "decode_interaction",
    "parse_interaction",
]
