"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - fake_backend: In-process FastAPI stand-in for the chat backend
    - backend_client: BackendClient wired to fake_backend over ASGITransport
    - make_chat_backend: Factory for a BackendClient whose /chat response
      arrives in caller-chosen byte chunks (httpx MockTransport)

The chat backend is an external collaborator; these fakes implement only
the wire contract the client consumes.
"""

import asyncio
import uuid
from collections.abc import AsyncIterator, Callable
from datetime import UTC, datetime

import httpx
import pytest
from fastapi import FastAPI, UploadFile
from fastapi.responses import JSONResponse, Response, StreamingResponse
from httpx import ASGITransport

from src.api.backend import BackendClient
from src.api.config import ClientConfig
from src.models.schemas import ChatRequest

TEST_BASE_URL = "http://test"


class FakeBackend:
    """Minimal chat backend: /chat, /upload and /files.

    Attributes:
        chat_body: Raw bytes streamed back for every chat request.
        rejections: Filename -> response returned instead of accepting the upload.
        files_status: Status code for GET /files (non-200 returns an error body).
        stored: Registry records served by GET /files.
    """

    def __init__(self) -> None:
        self.app = FastAPI()
        self.chat_body = b""
        self.chat_messages: list[str] = []
        self.rejections: dict[str, Response] = {}
        self.uploads: list[str] = []
        self.files_status = 200
        self.files_requests = 0
        self.stored: list[dict] = []
        self._register_routes()

    def _register_routes(self) -> None:
        @self.app.post("/chat")
        async def chat(request: ChatRequest) -> StreamingResponse:
            self.chat_messages.append(request.message)

            async def body() -> AsyncIterator[bytes]:
                yield self.chat_body

            return StreamingResponse(body(), media_type="text/event-stream")

        @self.app.post("/upload")
        async def upload(file: UploadFile) -> Response:
            content = await file.read()
            self.uploads.append(file.filename)
            if file.filename in self.rejections:
                return self.rejections[file.filename]

            content_type = file.content_type or "application/octet-stream"
            self.stored.append({
                "file_id": str(uuid.uuid4()),
                "filename": file.filename,
                "content_type": content_type,
                "size_bytes": len(content),
                "uploaded_at": datetime.now(UTC).isoformat(),
            })
            return JSONResponse({
                "filename": file.filename,
                "content_type": content_type,
                "size_bytes": len(content),
                "chunks_embedded": max(1, len(content) // 100),
            })

        @self.app.get("/files")
        async def files() -> JSONResponse:
            self.files_requests += 1
            if self.files_status != 200:
                return JSONResponse({"detail": "unavailable"}, status_code=self.files_status)
            return JSONResponse({"files": self.stored})


class ChunkedStream(httpx.AsyncByteStream):
    """Response body delivered in fixed chunks, optionally failing at the end."""

    def __init__(
        self,
        chunks: list[bytes],
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self._chunks = chunks
        self._error = error
        self._gate = gate

    async def __aiter__(self) -> AsyncIterator[bytes]:
        if self._gate is not None:
            await self._gate.wait()
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error


def make_config() -> ClientConfig:
    return ClientConfig(api_base_url=TEST_BASE_URL, chat_timeout=5.0, upload_timeout=5.0)


@pytest.fixture
def fake_backend() -> FakeBackend:
    """Return a fresh fake backend for each test."""
    return FakeBackend()


@pytest.fixture
def backend_client(fake_backend: FakeBackend) -> BackendClient:
    """Create a BackendClient talking to the fake backend in-process.

    Args:
        fake_backend: The backend to route requests to.

    Returns:
        Client using httpx ASGITransport.
    """
    return BackendClient(config=make_config(), transport=ASGITransport(app=fake_backend.app))


@pytest.fixture
def make_chat_backend() -> Callable[..., tuple[BackendClient, list[httpx.Request]]]:
    """Factory for a BackendClient with a hand-chunked /chat response.

    The returned callable accepts ``chunks`` plus optional ``status``,
    ``error`` (raised after the last chunk), ``connect_error`` (raised
    instead of responding) and ``gate`` (an event the body waits on).
    It returns the client and the list of requests it receives.
    """

    def factory(
        chunks: list[bytes],
        status: int = 200,
        error: Exception | None = None,
        connect_error: bool = False,
        gate: asyncio.Event | None = None,
    ) -> tuple[BackendClient, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if connect_error:
                raise httpx.ConnectError("Connection refused", request=request)
            return httpx.Response(
                status,
                headers={"Content-Type": "text/event-stream"},
                stream=ChunkedStream(chunks, error=error, gate=gate),
            )

        client = BackendClient(config=make_config(), transport=httpx.MockTransport(handler))
        return client, requests

    return factory
