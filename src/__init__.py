"""Digital Clone - browser client for a retrieval-augmented chat backend.

Combines httpx for streamed HTTP, NiceGUI for the web interface,
and Pydantic for data validation.

Components:
    - api: Backend HTTP client and configuration
    - streaming: Frame reassembly and event parsing for chat responses
    - chat: Transcript store and streaming answer consumer
    - uploads: Sequential batch uploads and the stored-file registry
    - ui: Web pages for chatting and uploading
    - models: Transcript, protocol and upload schemas
"""

__version__ = "0.1.0"
