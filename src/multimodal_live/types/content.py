"""Content-related type definitions for the live protocol.

These types are modeled after the Gemini API wire format (camelCase keys).

- Docs: https://ai.google.dev/api/caching#Content
"""

from typing import Any, Literal

from typing_extensions import TypedDict

AUDIO_PCM_MIME_PREFIX = "audio/pcm"
"""MIME type prefix identifying raw PCM audio parts."""


class Blob(TypedDict):
    """Raw media bytes carried inline.

    Attributes:
        mimeType: IANA MIME type of the data (e.g., "audio/pcm;rate=16000", "image/jpeg").
        data: Base64-encoded payload.
    """

    mimeType: str
    data: str


class FunctionCall(TypedDict, total=False):
    """A function invocation predicted by the model.

    Attributes:
        id: Identifier used to correlate the function response.
        name: Name of the function to call.
        args: Function arguments.
    """

    id: str
    name: str
    args: dict[str, Any]


class FunctionResponse(TypedDict, total=False):
    """The result of a function invocation sent back to the model.

    Attributes:
        id: Identifier of the function call this responds to.
        name: Name of the function that was called.
        response: Function output.
    """

    id: str
    name: str
    response: dict[str, Any]


class Part(TypedDict, total=False):
    """A single piece of multi-part content.

    Exactly one of the fields is normally set. Parts with `inlineData` are inline-data parts; everything else (text,
    function calls, executable code, ...) is passed through untouched.

    Attributes:
        text: Text content.
        inlineData: Inline media bytes.
        functionCall: A function call predicted by the model.
        functionResponse: A function result supplied by the client.
    """

    text: str
    inlineData: Blob
    functionCall: FunctionCall
    functionResponse: FunctionResponse


Role = Literal["user", "model"]
"""Producer of a content turn."""


class Content(TypedDict):
    """A single turn of multi-part content.

    Attributes:
        role: Producer of the content.
        parts: Ordered parts of the turn.
    """

    role: Role
    parts: list[Part]
