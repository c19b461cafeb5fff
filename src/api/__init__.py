"""HTTP access to the chat backend.

Async httpx client with streaming support and environment-driven config.

Endpoints consumed:
    - POST /chat: Streamed answer with sources and tokens
    - POST /upload: Document upload for indexing
    - GET /files: Registry of stored documents
"""

from src.api.backend import BackendClient, BackendError
from src.api.config import ClientConfig, get_client_config

__all__ = ["BackendClient", "BackendError", "ClientConfig", "get_client_config"]
