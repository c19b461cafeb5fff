from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator


def _display_time() -> str:
    return datetime.now().strftime("%I:%M %p")


class ConversationTurn(BaseModel):
    """A single entry in the chat transcript.

    Attributes:
        role: Who produced the turn (user or assistant).
        content: The message text; grows while an assistant turn streams.
        citations: Source document names attached to an assistant answer.
        time: Display timestamp captured when the turn was created.
    """

    role: Literal["user", "assistant"]
    content: str = ""
    citations: list[str] = Field(default_factory=list)
    time: str = Field(default_factory=_display_time)


class SourcesEvent(BaseModel):
    """Citation set for the answer being streamed."""

    type: Literal["sources"]
    sources: list[str]


class TokenEvent(BaseModel):
    """A fragment of answer text."""

    type: Literal["token"]
    content: str


ProtocolEvent = Annotated[SourcesEvent | TokenEvent, Field(discriminator="type")]

protocol_event_adapter: TypeAdapter[SourcesEvent | TokenEvent] = TypeAdapter(ProtocolEvent)


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        message: User's question, already trimmed.
    """

    message: str = Field(..., min_length=1)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class LocalFile(BaseModel):
    """A file picked by the user, not yet sent to the backend.

    Attributes:
        name: Original file name.
        media_type: MIME type reported by the browser (may be empty).
        content: Raw file bytes.
    """

    name: str
    media_type: str = ""
    content: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.content)


class UploadResponse(BaseModel):
    """Body of a successful upload response."""

    filename: str
    content_type: str
    size_bytes: int = Field(ge=0)
    chunks_embedded: int = Field(ge=0)


class UploadErrorResponse(BaseModel):
    """Body of a rejected upload response."""

    detail: str | None = None


class UploadOutcome(BaseModel):
    """Terminal result of uploading one file.

    Attributes:
        succeeded: Whether the backend accepted and indexed the file.
        filename: Server-reported name on success, local name on failure.
        media_type: MIME type of the file.
        size_bytes: File size in bytes.
        chunks_indexed: Number of chunks the backend embedded (0 on failure).
        error_message: Human-readable reason, present only on failure.
    """

    model_config = ConfigDict(frozen=True)

    succeeded: bool
    filename: str
    media_type: str
    size_bytes: int = Field(ge=0)
    chunks_indexed: int = Field(default=0, ge=0)
    error_message: str | None = None

    @model_validator(mode="after")
    def check_error_message(self) -> "UploadOutcome":
        """Require an error message exactly when the upload failed."""
        if self.succeeded and self.error_message is not None:
            raise ValueError("error_message must be absent for a successful upload")
        if not self.succeeded and not self.error_message:
            raise ValueError("error_message is required for a failed upload")
        return self


class StoredFileRecord(BaseModel):
    """A file already held by the backend registry."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="file_id")
    filename: str
    media_type: str = Field(alias="content_type")
    size_bytes: int = Field(ge=0)
    uploaded_at: datetime | None = None


class FileListResponse(BaseModel):
    """Body of the file registry listing."""

    files: list[StoredFileRecord]
