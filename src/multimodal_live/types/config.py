"""Session configuration types."""

from typing import Any, Literal

from typing_extensions import NotRequired, TypedDict

from .content import Content

Modality = Literal["TEXT", "AUDIO", "IMAGE"]


class SpeechConfig(TypedDict, total=False):
    """Voice settings for audio responses.

    Attributes:
        voiceConfig: Provider voice selection, e.g. {"prebuiltVoiceConfig": {"voiceName": "Aoede"}}.
    """

    voiceConfig: dict[str, Any]


class GenerationConfig(TypedDict, total=False):
    """Generation parameters applied to the whole session.

    - Docs: https://ai.google.dev/api/generate-content#generationconfig
    """

    candidateCount: int
    maxOutputTokens: int
    temperature: float
    topP: float
    topK: int
    presencePenalty: float
    frequencyPenalty: float
    responseModalities: list[Modality]
    speechConfig: SpeechConfig


class LiveConfig(TypedDict):
    """Configuration sent once as the setup handshake.

    Attributes:
        model: Model resource name, e.g. "models/gemini-2.0-flash-exp".
        generationConfig: Generation parameters.
        systemInstruction: System instruction content.
        tools: Tool declarations made available to the model.
        systemPrompt: Optional system prompt. A built-in prompt is sent when omitted.
    """

    model: str
    generationConfig: NotRequired[GenerationConfig]
    systemInstruction: NotRequired[Content]
    tools: NotRequired[list[dict[str, Any]]]
    systemPrompt: NotRequired[str]
