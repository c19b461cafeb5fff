"""Decoding of the chat response stream.

Responsibilities:
    - Reassembling ``data:`` lines across network chunk boundaries
    - Preserving multi-byte characters split between chunks
    - Tolerant classification of payloads into sources/token events
"""

from src.streaming.events import parse_event
from src.streaming.frames import FRAME_PREFIX, FrameBuffer, aiter_frames, decode_chunk

__all__ = ["FRAME_PREFIX", "FrameBuffer", "aiter_frames", "decode_chunk", "parse_event"]
