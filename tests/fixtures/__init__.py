"""Test fixtures for Wiki.js publisher tests.

This module provides:
- Fake GraphQL responses for search, list, create and update
- A recording Reporter for asserting on notices
"""

from .wikijs_responses import (
    RecordingReporter,
    create_data,
    list_data,
    make_response,
    search_data,
    update_data,
)

__all__ = [
    'RecordingReporter',
    'create_data',
    'list_data',
    'make_response',
    'search_data',
    'update_data',
]
