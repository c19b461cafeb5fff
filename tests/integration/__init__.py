"""Integration tests for components working together as a system.

Coverage:
    - Chat streaming from request to final transcript
    - Chunk boundary handling and stream failures
    - Sequential batch uploads and per-file outcomes
    - File registry refresh and failure handling

The backend is replaced by an in-process FastAPI app (ASGITransport) or by
httpx MockTransport when exact chunking or transport errors are needed.
"""
