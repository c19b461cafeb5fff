"""Document uploads and the stored-file registry.

Responsibilities:
    - Sequential multi-file upload with one outcome per file
    - Mapping backend responses and transport errors to outcomes
    - Mirroring the backend's file list, refreshed after each batch
"""

from src.uploads.orchestrator import (
    NETWORK_ERROR_MESSAGE,
    UPLOAD_FAILED_MESSAGE,
    UploadOrchestrator,
)
from src.uploads.registry import FileRegistry

__all__ = [
    "NETWORK_ERROR_MESSAGE",
    "UPLOAD_FAILED_MESSAGE",
    "FileRegistry",
    "UploadOrchestrator",
]
