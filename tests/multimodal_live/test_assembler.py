import base64
import binascii

import pytest

from multimodal_live.assembler import AssembledTurn, assemble_model_turn, is_audio_part


def audio_part(data: bytes, mime_type: str = "audio/pcm;rate=24000") -> dict:
    return {"inlineData": {"mimeType": mime_type, "data": base64.b64encode(data).decode()}}


@pytest.mark.parametrize(
    ("part", "expected"),
    [
        ({"inlineData": {"mimeType": "audio/pcm;rate=16000", "data": ""}}, True),
        ({"inlineData": {"mimeType": "audio/pcm", "data": ""}}, True),
        ({"inlineData": {"mimeType": "audio/wav", "data": ""}}, False),
        ({"inlineData": {"mimeType": "image/jpeg", "data": ""}}, False),
        ({"text": "audio/pcm"}, False),
    ],
)
def test_is_audio_part(part, expected):
    assert is_audio_part(part) is expected


def test_assemble_model_turn_partitions_in_order():
    parts = [
        audio_part(b"a"),
        {"text": "one"},
        audio_part(b"b"),
        {"inlineData": {"mimeType": "image/png", "data": "cG5n"}},
        {"text": "two"},
        audio_part(b"c"),
    ]

    turn = assemble_model_turn(parts)

    assert turn.audio == [b"a", b"b", b"c"]
    assert turn.other_parts == [parts[1], parts[3], parts[4]]
    assert turn.parts == parts
    assert turn.content == {"modelTurn": {"parts": parts}}


def test_assemble_model_turn_empty():
    turn = assemble_model_turn([])

    assert turn == AssembledTurn(parts=[])
    assert turn.content is None


def test_assemble_model_turn_audio_without_data():
    parts = [{"inlineData": {"mimeType": "audio/pcm", "data": ""}}, audio_part(b"x")]

    turn = assemble_model_turn(parts)

    assert turn.audio == [b"x"]
    assert turn.other_parts == []
    assert turn.content == {"modelTurn": {"parts": parts}}


def test_assemble_model_turn_invalid_base64():
    with pytest.raises(binascii.Error):
        assemble_model_turn([{"inlineData": {"mimeType": "audio/pcm", "data": "abc"}}])


def test_assemble_model_turn_rejects_non_alphabet_characters():
    with pytest.raises(binascii.Error):
        assemble_model_turn([{"inlineData": {"mimeType": "audio/pcm", "data": "AAAA!!!!"}}])
