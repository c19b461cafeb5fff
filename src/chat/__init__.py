"""Chat transcript and streaming answer consumption.

Responsibilities:
    - Ordered transcript with one open (streaming) assistant turn
    - Sending questions and applying streamed sources/tokens in order
    - Substituting a readable message when the backend is unreachable
"""

from src.chat.consumer import CONNECTION_ERROR_MESSAGE, ChatStreamConsumer
from src.chat.transcript import TranscriptError, TranscriptStore

__all__ = [
    "CONNECTION_ERROR_MESSAGE",
    "ChatStreamConsumer",
    "TranscriptError",
    "TranscriptStore",
]
