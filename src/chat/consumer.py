"""Chat stream consumer.

Sends a question to the backend and folds the streamed answer into the
transcript one event at a time. Failures are turned into transcript content,
never raised to the caller.
"""

import logging

import httpx

from src.api.backend import BackendClient
from src.chat.transcript import TranscriptStore
from src.streaming.events import parse_event
from src.streaming.frames import aiter_frames

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = (
    "Sorry, I couldn't connect to the server. Make sure the backend is running."
)


class ChatStreamConsumer:
    """Drives one chat exchange at a time against a transcript store."""

    def __init__(self, store: TranscriptStore, backend: BackendClient) -> None:
        self._store = store
        self._backend = backend

    @property
    def is_streaming(self) -> bool:
        return self._store.is_streaming

    async def send_message(self, text: str) -> None:
        """Send a message and stream the answer into the transcript.

        Does nothing for blank input or while another answer is streaming.

        Args:
            text: Raw user input; surrounding whitespace is dropped.
        """
        message = text.strip()
        if not message or self._store.is_streaming:
            return

        self._store.append_user(message)
        self._store.open_assistant()

        frames_seen = 0
        try:
            async with self._backend.stream_chat(message) as response:
                async for payload in aiter_frames(response.aiter_bytes()):
                    frames_seen += 1
                    event = parse_event(payload)
                    if event is not None:
                        self._store.apply(event)
        except httpx.HTTPStatusError as e:
            logger.error(f"Chat request rejected: HTTP {e.response.status_code}")
            self._store.replace_open_content(CONNECTION_ERROR_MESSAGE)
        except httpx.RequestError as e:
            if frames_seen:
                logger.warning(f"Chat stream interrupted after {frames_seen} frames: {e}")
            else:
                logger.error(f"Chat request failed: {e}")
                self._store.replace_open_content(CONNECTION_ERROR_MESSAGE)
        finally:
            self._store.close_turn()
