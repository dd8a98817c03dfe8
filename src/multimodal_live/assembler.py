"""Reassembly of model turn parts into audio buffers and content."""

import base64
import logging
from dataclasses import dataclass, field

from .types.content import AUDIO_PCM_MIME_PREFIX, Part
from .types.messages import ContentEnvelope

logger = logging.getLogger(__name__)


def is_audio_part(part: Part) -> bool:
    """Whether the part is inline PCM audio."""
    inline_data = part.get("inlineData")
    return bool(inline_data) and inline_data.get("mimeType", "").startswith(AUDIO_PCM_MIME_PREFIX)


@dataclass
class AssembledTurn:
    """A model turn split for consumption.

    Attributes:
        parts: Every part in original order.
        audio: Decoded audio buffers in encounter order.
        other_parts: Non-audio parts in original order.
    """

    parts: list[Part]
    audio: list[bytes] = field(default_factory=list)
    other_parts: list[Part] = field(default_factory=list)

    @property
    def content(self) -> ContentEnvelope | None:
        """Envelope carrying all parts, or None when the turn is empty."""
        if not self.parts:
            return None
        return {"modelTurn": {"parts": self.parts}}


def assemble_model_turn(parts: list[Part]) -> AssembledTurn:
    """Partition parts and decode audio payloads.

    Audio parts without a payload are kept in `parts` but yield no buffer.

    Args:
        parts: Model turn parts in wire order.

    Returns:
        The assembled turn.

    Raises:
        binascii.Error: If an audio payload is not valid base64.
    """
    turn = AssembledTurn(parts=list(parts))

    for part in turn.parts:
        if not is_audio_part(part):
            turn.other_parts.append(part)
            continue

        data = part["inlineData"].get("data")
        if data:
            turn.audio.append(base64.b64decode(data, validate=True))

    logger.debug("parts=<%d>, audio=<%d> | assembled model turn", len(turn.parts), len(turn.audio))
    return turn
