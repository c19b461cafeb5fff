"""Line framing for the chat response stream.

The backend writes one ``data: <json>`` line per event. Network chunks do not
respect line boundaries (or even UTF-8 character boundaries), so decoding
carries an explicit ``FrameBuffer`` from one chunk to the next.
"""

import codecs
import logging
from collections.abc import AsyncIterator
from typing import NamedTuple

logger = logging.getLogger(__name__)

FRAME_PREFIX = "data: "


class FrameBuffer(NamedTuple):
    """Decoder state carried between chunks of one response body.

    Attributes:
        text: Decoded text after the last line break seen so far.
        undecoded: Trailing bytes of an incomplete UTF-8 sequence.
    """

    text: str = ""
    undecoded: bytes = b""


def decode_chunk(buffer: FrameBuffer, chunk: bytes) -> tuple[FrameBuffer, list[str]]:
    """Decode one network chunk into complete frame payloads.

    Args:
        buffer: State returned by the previous call (``FrameBuffer()`` to start).
        chunk: Raw bytes as received.

    Returns:
        The new buffer and the payloads of every complete ``data:`` line,
        in arrival order.
    """
    data = buffer.undecoded + chunk
    # final=False keeps an incomplete multi-byte sequence out of `decoded`
    decoded, consumed = codecs.utf_8_decode(data, "replace", False)

    lines = (buffer.text + decoded).split("\n")
    partial = lines.pop()

    frames = [line[len(FRAME_PREFIX):] for line in lines if line.startswith(FRAME_PREFIX)]
    return FrameBuffer(partial, data[consumed:]), frames


async def aiter_frames(chunks: AsyncIterator[bytes]) -> AsyncIterator[str]:
    """Yield frame payloads from an async stream of raw byte chunks.

    A trailing line without a line break is dropped when the stream ends.
    """
    buffer = FrameBuffer()
    async for chunk in chunks:
        buffer, frames = decode_chunk(buffer, chunk)
        for frame in frames:
            yield frame

    if buffer.text or buffer.undecoded:
        logger.debug(f"Discarding unterminated stream tail ({len(buffer.text)} chars)")
