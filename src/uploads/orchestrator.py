"""Sequential batch upload with per-file outcomes.

Files in a batch are sent one after another so that outcomes line up with
input order. Every file produces exactly one ``UploadOutcome``; a failure of
one file never stops the rest of the batch. Once the batch is done the file
registry is refreshed, and its success or failure does not touch the
recorded outcomes.
"""

import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from src.api.backend import BackendClient
from src.models.schemas import LocalFile, UploadErrorResponse, UploadOutcome, UploadResponse
from src.observable import Observable
from src.uploads.registry import FileRegistry

logger = logging.getLogger(__name__)

UPLOAD_FAILED_MESSAGE = "Upload failed"
NETWORK_ERROR_MESSAGE = "Network error: is the backend running?"


def _failed(file: LocalFile, message: str) -> UploadOutcome:
    return UploadOutcome(
        succeeded=False,
        filename=file.name,
        media_type=file.media_type,
        size_bytes=file.size_bytes,
        chunks_indexed=0,
        error_message=message,
    )


def _error_detail(response: httpx.Response) -> str:
    """Extract the backend's ``detail`` message, or a generic fallback."""
    try:
        body = UploadErrorResponse.model_validate_json(response.content)
    except ValidationError:
        return UPLOAD_FAILED_MESSAGE
    return body.detail or UPLOAD_FAILED_MESSAGE


class UploadOrchestrator(Observable):
    """Uploads batches of files and keeps a log of their outcomes.

    Attributes:
        results: Outcomes of all batches so far, most recent batch first.
        is_uploading: True while a batch (including its registry refresh) runs.
    """

    def __init__(self, backend: BackendClient, registry: FileRegistry) -> None:
        super().__init__()
        self._backend = backend
        self._registry = registry
        self.results: list[UploadOutcome] = []
        self.is_uploading = False

    async def upload_file(self, file: LocalFile) -> UploadOutcome:
        """Upload a single file and describe how it went.

        Args:
            file: The file to send.

        Returns:
            The outcome; this method never raises for backend failures.
        """
        try:
            response = await self._backend.upload_file(file)
        except httpx.RequestError as e:
            logger.error(f"Upload of {file.name} failed: {e}")
            return _failed(file, NETWORK_ERROR_MESSAGE)

        if not response.is_success:
            message = _error_detail(response)
            logger.warning(f"Upload of {file.name} rejected (HTTP {response.status_code}): {message}")
            return _failed(file, message)

        try:
            data = UploadResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Unexpected upload response for {file.name}: {e.error_count()} error(s)")
            return _failed(file, UPLOAD_FAILED_MESSAGE)

        logger.info(f"Uploaded {data.filename} ({data.chunks_embedded} chunks)")
        return UploadOutcome(
            succeeded=True,
            filename=data.filename,
            media_type=data.content_type,
            size_bytes=data.size_bytes,
            chunks_indexed=data.chunks_embedded,
        )

    async def upload_batch(self, files: Sequence[LocalFile]) -> list[UploadOutcome]:
        """Upload files one at a time, then refresh the registry once.

        Args:
            files: Files in the order they were picked.

        Returns:
            One outcome per file, in input order.
        """
        if not files:
            return []

        self.is_uploading = True
        self._notify()
        try:
            outcomes: list[UploadOutcome] = []
            for file in files:
                outcomes.append(await self.upload_file(file))

            self.results = outcomes + self.results
            self._notify()

            await self._registry.refresh()
        finally:
            self.is_uploading = False
            self._notify()

        return outcomes
