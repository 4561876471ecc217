"""Outbound Discord REST payloads: slash command definitions and component messages."""

from enum import IntEnum

from pydantic import BaseModel


class ApplicationCommandType(IntEnum):
    CHAT_INPUT = 1


class ComponentType(IntEnum):
    ACTION_ROW = 1
    BUTTON = 2


class ButtonStyle(IntEnum):
    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5


class ApplicationCommand(BaseModel):
    """A global slash command definition, as sent to the bulk-overwrite endpoint."""

    name: str
    description: str
    type: ApplicationCommandType = ApplicationCommandType.CHAT_INPUT


class Emoji(BaseModel):
    name: str


class Button(BaseModel):
    type: ComponentType = ComponentType.BUTTON
    style: ButtonStyle = ButtonStyle.PRIMARY
    label: str
    custom_id: str
    emoji: Emoji | None = None


class ActionRow(BaseModel):
    type: ComponentType = ComponentType.ACTION_ROW
    components: list[Button]


class MessageCreate(BaseModel):
    """Body for creating a channel message."""

    content: str
    components: list[ActionRow] = []
