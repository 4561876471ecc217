"""Tests for interaction models, enums, and decoding."""

import pytest

from gorkbot.errors import MalformedPayloadError, UnrecognizedInteractionError
from gorkbot.models.interactions import (
    ApplicationCommandInteraction,
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


def test_interaction_type_values():
    """InteractionType members carry Discord's numeric codes."""
    assert InteractionType.PING == 1
    assert InteractionType.APPLICATION_COMMAND == 2
    assert InteractionType.MESSAGE_COMPONENT == 3


def test_response_type_and_flag_values():
    """Response types and flags carry Discord's numeric codes."""
    assert InteractionResponseType.PONG == 1
    assert InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE == 4
    assert MessageFlags.NONE == 0
    assert MessageFlags.EPHEMERAL == 64


def test_parse_ping():
    """type 1 parses as a PingInteraction."""
    assert isinstance(parse_interaction({"type": 1}), PingInteraction)


def test_parse_command():
    """type 2 parses as a command interaction carrying data.name."""
    interaction = parse_interaction({"type": 2, "data": {"name": "gork"}})
    assert isinstance(interaction, ApplicationCommandInteraction)
    assert interaction.data.name == "gork"


def test_parse_component():
    """type 3 parses as a component interaction carrying data.custom_id."""
    interaction = parse_interaction({"type": 3, "data": {"custom_id": "ask_gork"}})
    assert isinstance(interaction, MessageComponentInteraction)
    assert interaction.data.custom_id == "ask_gork"


def test_parse_ignores_extra_fields():
    """Fields Discord sends that the dispatcher never reads are ignored."""
    interaction = parse_interaction(
        {
            "type": 2,
            "id": "1",
            "token": "tok",
            "version": 1,
            "data": {"id": "2", "name": "gork", "type": 1, "options": []},
        }
    )
    assert isinstance(interaction, ApplicationCommandInteraction)


@pytest.mark.parametrize(
    "payload",
    [
        {"type": 99},
        {"type": True},
        {"type": False},
        {"type": 1.5},
        {"type": [1]},
        {"type": 4, "data": {"name": "gork"}},
        {},
        {"type": 2},
        {"type": 2, "data": {"custom_id": "ask_gork"}},
        {"type": 3, "data": {"name": "gork"}},
        "ping",
        None,
        [],
    ],
)
def test_parse_rejects_unknown_shapes(payload: object):
    """Unknown types and missing fields raise UnrecognizedInteractionError."""
    with pytest.raises(UnrecognizedInteractionError):
        parse_interaction(payload)


def test_decode_valid_body():
    """decode_interaction parses raw bytes."""
    interaction = decode_interaction(b'{"type": 1}')
    assert isinstance(interaction, PingInteraction)


@pytest.mark.parametrize("body", [b"", b"{", b"not json", b"\xff\xfe"])
def test_decode_malformed_body(body: bytes):
    """Bodies that are not JSON raise MalformedPayloadError."""
    with pytest.raises(MalformedPayloadError):
        decode_interaction(body)


def test_decode_unknown_type():
    """Valid JSON of an unknown shape raises UnrecognizedInteractionError."""
    with pytest.raises(UnrecognizedInteractionError):
        decode_interaction(b'{"type": 99}')


def test_pong_payload_has_no_data():
    """A PONG serializes to exactly {"type": 1}."""
    response = InteractionResponse(type=InteractionResponseType.PONG)
    assert response.to_payload() == {"type": 1}


def test_message_payload():
    """A message response serializes content and flags as plain values."""
    response = InteractionResponse(
        type=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
        data=MessageData(content="Yeh, nah", flags=MessageFlags.EPHEMERAL),
    )
    assert response.to_payload() == {
        "type": 4,
        "data": {"content": "Yeh, nah", "flags": 64},
    }


def test_message_flags_default_to_zero():
    """MessageData defaults to a channel-visible message."""
    assert MessageData(content="x").flags == 0


def test_parse_accepts_float_type_code():
    """A JSON number equal to a known code (1.0) is treated like the integer."""
    assert isinstance(parse_interaction({"type": 1.0}), PingInteraction)


def test_decode_rejects_boolean_type():
    """``true`` is not the integer 1, even though Python compares them equal."""
    with pytest.raises(UnrecognizedInteractionError):
        decode_interaction(b'{"type": true}')


def test_decode_deeply_nested_body():
    """JSON nested past the decoder's recursion limit is malformed, not a crash."""
    body = b"[" * 200_000 + b"]" * 200_000
    with pytest.raises(MalformedPayloadError):
        decode_interaction(body)


def test_interaction_models_carry_their_type_code():
    """Each variant exposes its InteractionType code."""
    assert PingInteraction.type is InteractionType.PING
    assert ApplicationCommandInteraction.type is InteractionType.APPLICATION_COMMAND
    assert MessageComponentInteraction.type is InteractionType.MESSAGE_COMPONENT
