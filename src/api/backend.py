"""HTTP client for the chat backend.

Wraps the three endpoints the client consumes:

- ``POST /chat``: streamed answer as ``data: <json>`` lines
- ``POST /upload``: multipart upload of a single file
- ``GET /files``: registry of previously stored files

Each call opens its own ``httpx.AsyncClient`` so that no connection state
outlives an operation. A transport can be injected for tests.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from pydantic import ValidationError

from src.api.config import ClientConfig, get_client_config
from src.models.schemas import ChatRequest, FileListResponse, LocalFile, StoredFileRecord

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Raised when the backend cannot produce a usable response."""

    pass


class BackendClient:
    """Thin async client for the chat backend endpoints."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the backend client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport (used by tests).
        """
        self._config = config or get_client_config()
        self._transport = transport

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=timeout,
            transport=self._transport,
        )

    @asynccontextmanager
    async def stream_chat(self, message: str) -> AsyncIterator[httpx.Response]:
        """Open a streamed chat response.

        Args:
            message: The user's message.

        Yields:
            The response, whose body has not been read yet.

        Raises:
            httpx.HTTPStatusError: If the backend rejects the request.
            httpx.RequestError: If the backend cannot be reached.
        """
        request = ChatRequest(message=message)
        async with (
            self._client(self._config.chat_timeout) as client,
            client.stream(
                "POST",
                "/chat",
                json=request.model_dump(),
                headers={"Accept": "text/event-stream"},
            ) as response,
        ):
            response.raise_for_status()
            yield response

    async def upload_file(self, file: LocalFile) -> httpx.Response:
        """Send one file as a multipart upload.

        Args:
            file: The file to upload.

        Returns:
            The backend response, whatever its status.

        Raises:
            httpx.RequestError: If no response was received.
        """
        async with self._client(self._config.upload_timeout) as client:
            return await client.post(
                "/upload",
                files={"file": (file.name, file.content, file.media_type or None)},
            )

    async def list_files(self) -> list[StoredFileRecord]:
        """Fetch the backend's registry of stored files.

        Returns:
            All stored files in server order.

        Raises:
            BackendError: On transport failure, non-success status or an
                unparseable body.
        """
        try:
            async with self._client(self._config.chat_timeout) as client:
                response = await client.get("/files")
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise BackendError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise BackendError(f"Connection failed: {e}") from e

        try:
            return FileListResponse.model_validate_json(response.content).files
        except ValidationError as e:
            raise BackendError(f"Invalid file list: {e.error_count()} error(s)") from e
