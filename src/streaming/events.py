"""Classification of frame payloads into protocol events."""

import json
import logging

from pydantic import ValidationError

from src.models.schemas import SourcesEvent, TokenEvent, protocol_event_adapter

logger = logging.getLogger(__name__)


def parse_event(payload: str) -> SourcesEvent | TokenEvent | None:
    """Parse a frame payload into a protocol event.

    Malformed payloads never raise: invalid JSON, non-object values, unknown
    ``type`` values and events with missing fields all yield ``None``.

    Args:
        payload: Text following the ``data: `` prefix.

    Returns:
        The decoded event, or None if the frame should be skipped.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        logger.debug(f"Skipping malformed frame: {e}")
        return None

    if not isinstance(data, dict) or data.get("type") not in ("sources", "token"):
        return None

    try:
        return protocol_event_adapter.validate_python(data)
    except ValidationError as e:
        logger.debug(f"Skipping invalid {data['type']} event: {e.error_count()} error(s)")
        return None
