"""Unit tests for individual components in isolation.

Ensures fast execution with no network access.

Coverage:
    - streaming/: Frame reassembly and event parsing
    - chat/: Transcript store invariants and observers
    - models/: Pydantic validation of transcript and upload schemas
    - api/: Client configuration
    - ui/: Display formatting helpers

Follows single responsibility per test function. Leverages pytest-check for
multiple assertions per test.
"""
