"""Test package for the Digital Clone client.

Unit tests cover isolated logic; integration tests run the chat and upload
workflows over HTTP against an in-process fake backend.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end workflow tests over httpx transports

Leverages pytest with pytest-check for soft assertions.
"""
