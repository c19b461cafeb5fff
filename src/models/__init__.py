"""Pydantic models for the transcript, the stream protocol and uploads.

Provides type safety and validation for everything crossing the wire.

Models:
    - ConversationTurn: One entry of the chat transcript
    - SourcesEvent / TokenEvent: Events decoded from the chat stream
    - LocalFile: A file picked by the user for upload
    - UploadOutcome: Per-file upload result
    - StoredFileRecord: A file held by the backend registry
"""

from src.models.schemas import (
    ChatRequest,
    ConversationTurn,
    FileListResponse,
    LocalFile,
    ProtocolEvent,
    SourcesEvent,
    StoredFileRecord,
    TokenEvent,
    UploadErrorResponse,
    UploadOutcome,
    UploadResponse,
    protocol_event_adapter,
)

__all__ = [
    "ChatRequest",
    "ConversationTurn",
    "FileListResponse",
    "LocalFile",
    "ProtocolEvent",
    "SourcesEvent",
    "StoredFileRecord",
    "TokenEvent",
    "UploadErrorResponse",
    "UploadOutcome",
    "UploadResponse",
    "protocol_event_adapter",
]
