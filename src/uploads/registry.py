"""Client-side mirror of the backend's stored-file registry."""

import logging

from src.api.backend import BackendClient, BackendError
from src.models.schemas import StoredFileRecord
from src.observable import Observable

logger = logging.getLogger(__name__)


class FileRegistry(Observable):
    """Last known list of stored files, replaced wholesale on refresh.

    A failed refresh keeps the previous list; stale data is preferred over
    an empty one. When refreshes overlap, only the most recently started one
    may replace the list.
    """

    def __init__(self, backend: BackendClient) -> None:
        super().__init__()
        self._backend = backend
        self.files: list[StoredFileRecord] = []
        self.is_loading = True
        self._initialized = False
        self._latest_request = 0

    async def initialize(self) -> None:
        """Run the session-start refresh. Later calls do nothing."""
        if self._initialized:
            return
        self._initialized = True
        try:
            await self.refresh()
        finally:
            self.is_loading = False
            self._notify()

    async def refresh(self) -> bool:
        """Replace the cached list with the backend's current one.

        Returns:
            True if the cache was updated, False if it was left unchanged.
        """
        self._latest_request += 1
        request_id = self._latest_request
        try:
            files = await self._backend.list_files()
        except BackendError as e:
            logger.warning(f"Failed to refresh file registry: {e}")
            return False

        if request_id != self._latest_request:
            logger.debug(f"Discarding superseded file listing #{request_id}")
            return False

        self.files = files
        logger.debug(f"File registry refreshed: {len(files)} files")
        self._notify()
        return True
