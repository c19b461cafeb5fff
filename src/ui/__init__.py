"""NiceGUI interface - thin visualization layer for chat and uploads.

Responsibilities:
    - Chat transcript display with live streaming updates and citations
    - Multi-file upload with per-file outcomes
    - Listing of documents already stored by the backend

Contains minimal business logic. Observes the chat and upload stores and
re-renders on change.
"""
