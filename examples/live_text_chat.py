#!/usr/bin/env python3
"""Gemini Live API text conversation example.

Sends typed user turns over a live connection and prints the model's text replies as they stream in. Audio buffers
are counted rather than played.

Requirements:
- pip install -e .
- GOOGLE_API_KEY environment variable

Usage:
    python examples/live_text_chat.py
"""

import asyncio
import logging
import os

from multimodal_live import (
    AudioEvent,
    CloseEvent,
    ContentEvent,
    LogEventHandler,
    MultimodalLiveClient,
    SetupCompleteEvent,
    TurnCompleteEvent,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

MODEL = "models/gemini-2.0-flash-exp"


async def text_conversation_example() -> None:
    """Chat with the model over a single live connection."""
    print("Gemini Live API - Text Conversation Example")
    print("=" * 50)

    if not os.getenv("GOOGLE_API_KEY"):
        print("Error: Please set GOOGLE_API_KEY environment variable")
        return

    client = MultimodalLiveClient(hooks=[LogEventHandler()])
    ready = asyncio.Event()
    turn_done = asyncio.Event()
    audio_bytes = 0

    def on_setup_complete(event: SetupCompleteEvent) -> None:
        ready.set()

    def on_content(event: ContentEvent) -> None:
        print(event.text, end="", flush=True)

    def on_audio(event: AudioEvent) -> None:
        nonlocal audio_bytes
        audio_bytes += len(event.data)

    def on_turn_complete(event: TurnCompleteEvent) -> None:
        turn_done.set()

    def on_close(event: CloseEvent) -> None:
        print(f"\nConnection closed by server: {event.reason}")
        ready.set()
        turn_done.set()

    for callback in (on_setup_complete, on_content, on_audio, on_turn_complete, on_close):
        client.events.add_callback(callback)

    await client.connect({"model": MODEL, "generationConfig": {"responseModalities": ["TEXT"]}})

    try:
        await ready.wait()
        print("Connected. Type 'quit' to exit.\n")

        while client.is_connected:
            user_input = (await asyncio.to_thread(input, "You: ")).strip()
            if user_input.lower() in ["quit", "exit", "q"]:
                break
            if not user_input:
                continue

            turn_done.clear()
            await client.send({"text": user_input})
            await turn_done.wait()
            print("\n")

    except KeyboardInterrupt:
        print("\nConversation interrupted by user")
    finally:
        await client.disconnect()
        print(f"Conversation ended. Received {audio_bytes} bytes of audio.")


if __name__ == "__main__":
    asyncio.run(text_conversation_example())
