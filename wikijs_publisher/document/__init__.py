"""Reading local Markdown documents for publishing.

This package turns a Markdown file inside a vault directory into a
DocumentReference: title from the file name, remote path from the
vault-relative location, body and tags from the file content.
"""

from .document_reader import DocumentReader
from .errors import DocumentError, FrontmatterError
from .frontmatter_handler import FrontmatterHandler

__all__ = [
    'DocumentError',
    'DocumentReader',
    'FrontmatterError',
    'FrontmatterHandler',
]
