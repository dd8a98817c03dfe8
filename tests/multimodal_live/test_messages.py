import json

import pytest
from google.genai import types as genai_types

from multimodal_live.messages import (
    DEFAULT_SYSTEM_PROMPT,
    build_client_content,
    build_realtime_input,
    build_setup_message,
    build_tool_response,
    decode_frame,
    decode_message,
    describe_media_chunks,
    to_wire,
)
from multimodal_live.types.messages import (
    ServerContentMessage,
    SetupCompleteMessage,
    ToolCallCancellationMessage,
    ToolCallMessage,
    UnrecognizedMessage,
)


def test_build_setup_message_default_prompt():
    config = {"model": "x"}

    message = build_setup_message(config)

    assert message == {"setup": {"model": "x"}, "systemPrompt": DEFAULT_SYSTEM_PROMPT}
    assert message["setup"] is not config


@pytest.mark.parametrize("system_prompt", [None, ""])
def test_build_setup_message_empty_prompt_falls_back(system_prompt):
    config = {"model": "x"}
    if system_prompt is not None:
        config["systemPrompt"] = system_prompt

    assert build_setup_message(config)["systemPrompt"] == DEFAULT_SYSTEM_PROMPT


def test_build_setup_message_custom_prompt():
    message = build_setup_message({"model": "x", "systemPrompt": "Answer in French."})

    assert message["systemPrompt"] == "Answer in French."


def test_build_client_content_round_trip():
    message = build_client_content([{"text": "one"}, {"text": "two"}], turn_complete=False)

    decoded = json.loads(json.dumps(message))
    (turn,) = decoded["clientContent"]["turns"]

    assert turn["role"] == "user"
    assert turn["parts"] == [{"text": "one"}, {"text": "two"}]
    assert decoded["clientContent"]["turnComplete"] is False


def test_build_client_content_single_part():
    message = build_client_content({"text": "hi"})

    assert message == {"clientContent": {"turns": [{"role": "user", "parts": [{"text": "hi"}]}], "turnComplete": True}}


def test_build_client_content_genai_part():
    message = build_client_content(genai_types.Part(text="hi"))

    assert message["clientContent"]["turns"][0]["parts"] == [{"text": "hi"}]


def test_to_wire_genai_blob_uses_camel_case():
    blob = genai_types.Blob(mime_type="audio/pcm;rate=16000", data=b"\x00\x01")

    wire = to_wire(blob)

    assert wire == {"mimeType": "audio/pcm;rate=16000", "data": "AAE="}


def test_to_wire_passthrough():
    value = {"text": "hi"}

    assert to_wire(value) is value


def test_build_realtime_input():
    chunks = [{"mimeType": "audio/pcm;rate=16000", "data": "AAAA"}]

    assert build_realtime_input(chunks) == {"realtimeInput": {"mediaChunks": chunks}}


def test_build_tool_response_passthrough():
    tool_response = {"functionResponses": [{"id": "1", "name": "f", "response": {"ok": True}}]}

    assert build_tool_response(tool_response) == {"toolResponse": tool_response}


@pytest.mark.parametrize(
    ("mime_types", "expected"),
    [
        (["audio/pcm;rate=16000"], "audio"),
        (["image/jpeg"], "video"),
        (["audio/pcm", "image/png"], "audio + video"),
        (["text/plain"], "unknown"),
        ([], "unknown"),
    ],
)
def test_describe_media_chunks(mime_types, expected):
    chunks = [{"mimeType": mime_type, "data": ""} for mime_type in mime_types]

    assert describe_media_chunks(chunks) == expected


def test_decode_frame():
    assert decode_frame(b'{"setupComplete": {}}') == {"setupComplete": {}}

    with pytest.raises(ValueError):
        decode_frame(b"\xff\xfe not json")


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"toolCall": {"functionCalls": []}}, ToolCallMessage(tool_call={"functionCalls": []})),
        ({"toolCallCancellation": {"ids": ["a"]}}, ToolCallCancellationMessage(tool_call_cancellation={"ids": ["a"]})),
        ({"setupComplete": {}}, SetupCompleteMessage()),
        ({"serverContent": {"turnComplete": True}}, ServerContentMessage(server_content={"turnComplete": True})),
        ({"goAway": {"timeLeft": "1s"}}, UnrecognizedMessage(payload={"goAway": {"timeLeft": "1s"}})),
        ({"serverContent": None}, UnrecognizedMessage(payload={"serverContent": None})),
        ("setupComplete", UnrecognizedMessage(payload="setupComplete")),
    ],
)
def test_decode_message(payload, expected):
    assert decode_message(payload) == expected


def test_decode_message_priority():
    payload = {
        "serverContent": {"interrupted": True},
        "setupComplete": {},
        "toolCallCancellation": {"ids": []},
        "toolCall": {"functionCalls": []},
    }

    assert isinstance(decode_message(payload), ToolCallMessage)

    del payload["toolCall"]
    assert isinstance(decode_message(payload), ToolCallCancellationMessage)

    del payload["toolCallCancellation"]
    assert isinstance(decode_message(payload), SetupCompleteMessage)

    del payload["setupComplete"]
    assert isinstance(decode_message(payload), ServerContentMessage)


def test_server_content_message_flags():
    message = ServerContentMessage(
        server_content={"interrupted": False, "turnComplete": True, "modelTurn": {"parts": [{"text": "a"}]}}
    )

    assert message.interrupted is False
    assert message.turn_complete is True
    assert message.model_turn == {"parts": [{"text": "a"}]}

    assert ServerContentMessage(server_content={}).model_turn is None
