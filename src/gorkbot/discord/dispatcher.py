"""Interaction dispatch: map a decoded interaction to its response.

Pure and synchronous. Anything without a matching rule falls through to the
default arm, which raises UnrecognizedInteractionError.
"""

import logging
from collections.abc import Callable

from gorkbot.discord.responses import (
    ASK_GORK_CUSTOM_ID,
    GORK_COMMAND,
    GORK_EPHEMERAL_COMMAND,
    MAGIC_8_BALL,
    pick_response,
)
from gorkbot.errors import UnrecognizedInteractionError
from gorkbot.models.interactions import (
    ApplicationCommandInteraction,
    Interaction,
    InteractionResponse,
    InteractionResponseType,
    MessageComponentInteraction,
    MessageData,
    MessageFlags,
    PingInteraction,
)

logger = logging.getLogger(__name__)

# command name -> message flags
_COMMAND_FLAGS: dict[str, MessageFlags] = {
    GORK_COMMAND: MessageFlags.NONE,
    GORK_EPHEMERAL_COMMAND: MessageFlags.EPHEMERAL,
}


def _message(content: str, flags: MessageFlags) -> InteractionResponse:
    return InteractionResponse(
        type=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
        data=MessageData(content=content, flags=flags),
    )


def dispatch(
    interaction: Interaction,
    pick: Callable[[], str] = pick_response,
) -> InteractionResponse:
    """Build the response for an interaction.

    - PING: acknowledge with PONG (no data)
    - /gork: random reply visible to the channel
    - /gork-ephemeral: random reply visible only to the invoker
    - "ask_gork" button: random reply prefixed with the 8-ball, ephemeral
    - anything else: UnrecognizedInteractionError

    ``pick`` selects the reply text; tests pass a deterministic one.
    """
    if isinstance(interaction, PingInteraction):
        return InteractionResponse(type=InteractionResponseType.PONG)

    if isinstance(interaction, ApplicationCommandInteraction):
        flags = _COMMAND_FLAGS.get(interaction.data.name)
        if flags is not None:
            return _message(pick(), flags)
        logger.info("Unrecognized command %r", interaction.data.name)

    elif isinstance(interaction, MessageComponentInteraction):
        if interaction.data.custom_id == ASK_GORK_CUSTOM_ID:
            return _message(f"{MAGIC_8_BALL} {pick()}", MessageFlags.EPHEMERAL)
        logger.info("Unrecognized component %r", interaction.data.custom_id)

    raise UnrecognizedInteractionError(
        f"No handler for interaction type {getattr(interaction, 'type', None)!r}"
    )
