"""Data models for local documents and Wiki.js pages."""

from wikijs_publisher.models.document_reference import DocumentReference
from wikijs_publisher.models.remote_page import RemotePage

__all__ = ['DocumentReference', 'RemotePage']
