"""Discord interaction payloads (inbound) and interaction responses (outbound).

Inbound payloads are a tagged union keyed on ``type``. Only the fields the
dispatcher reads are modelled; everything else Discord sends (ids, tokens,
member info) is ignored.
"""

import json
from enum import IntEnum
from typing import Annotated, ClassVar, Union

from pydantic import BaseModel, Discriminator, Tag, TypeAdapter, ValidationError

from gorkbot.errors import MalformedPayloadError, UnrecognizedInteractionError


class InteractionType(IntEnum):
    """Kinds of inbound interaction handled by this service."""

    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3


class InteractionResponseType(IntEnum):
    """Kinds of interaction response sent back to Discord."""

    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4


class MessageFlags(IntEnum):
    """Message flag bits."""

    NONE = 0
    EPHEMERAL = 64  # only visible to the invoking user


class CommandData(BaseModel):
    name: str


class ComponentData(BaseModel):
    custom_id: str


class PingInteraction(BaseModel):
    """Handshake sent by Discord when the endpoint URL is saved."""

    type: ClassVar[InteractionType] = InteractionType.PING


class ApplicationCommandInteraction(BaseModel):
    """A slash command invocation."""

    type: ClassVar[InteractionType] = InteractionType.APPLICATION_COMMAND
    data: CommandData


class MessageComponentInteraction(BaseModel):
    """A click on a button (or other component) attached to a message."""

    type: ClassVar[InteractionType] = InteractionType.MESSAGE_COMPONENT
    data: ComponentData


_TYPE_CODES = frozenset(member.value for member in InteractionType)


def _interaction_tag(value: object) -> str | None:
    """Return the union tag for a raw payload, or None if ``type`` is not a known code.

    Booleans are rejected even though ``True == 1``.
    """
    if not isinstance(value, dict):
        return None
    code = value.get("type")
    if isinstance(code, bool) or not isinstance(code, (int, float)) or code not in _TYPE_CODES:
        return None
    return InteractionType(code).name


Interaction = Annotated[
    Union[
        Annotated[PingInteraction, Tag(InteractionType.PING.name)],
        Annotated[ApplicationCommandInteraction, Tag(InteractionType.APPLICATION_COMMAND.name)],
        Annotated[MessageComponentInteraction, Tag(InteractionType.MESSAGE_COMPONENT.name)],
    ],
    Discriminator(_interaction_tag),
]

_interaction_adapter: TypeAdapter[Interaction] = TypeAdapter(Interaction)


class MessageData(BaseModel):
    content: str
    flags: int = MessageFlags.NONE


class InteractionResponse(BaseModel):
    """Response body for an interaction. ``data`` is omitted for PONG."""

    type: InteractionResponseType
    data: MessageData | None = None

    def to_payload(self) -> dict:
        """Serialize for the wire, dropping ``data`` when it is not set."""
        return self.model_dump(mode="json", exclude_none=True)


def parse_interaction(payload: object) -> Interaction:
    """Validate an already-decoded JSON value as one of the known interactions.

    Raises UnrecognizedInteractionError if the value is not an object, has no
    known ``type``, or lacks the fields its type requires.
    """
    try:
        return _interaction_adapter.validate_python(payload)
    except ValidationError as exc:
        raise UnrecognizedInteractionError(str(exc)) from exc


def decode_interaction(raw_body: bytes) -> Interaction:
    """Decode a verified request body into a typed interaction.

    Raises MalformedPayloadError if the body is not JSON (including JSON
    nested too deeply to decode), and UnrecognizedInteractionError if it is
    JSON of an unknown shape.
    """
    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise MalformedPayloadError(str(exc)) from exc
    return parse_interaction(payload)
