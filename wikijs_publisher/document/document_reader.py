"""Build a DocumentReference from a Markdown file in a vault.

The title is the file name without `.md`, matched case-insensitively. The
remote path is the file's location relative to the vault root, with the
extension removed and a leading slash: `<vault>/notes/Intro.md` publishes to `/notes/Intro`.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from wikijs_publisher.models.document_reference import DocumentReference

from .errors import DocumentError
from .frontmatter_handler import FrontmatterHandler

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = '.md'


class DocumentReader:
    """Reads the document to publish from disk.

    Example:
        >>> reader = DocumentReader(vault_root="./vault")
        >>> doc = reader.read("./vault/notes/Intro.md")
        >>> doc.path
        '/notes/Intro'
    """

    def __init__(self, vault_root: Optional[Union[str, Path]] = None):
        """Initialize the reader.

        Args:
            vault_root: Directory remote paths are relative to (current directory if None)
        """
        self.vault_root = Path(vault_root or '.').resolve()

    def remote_path(self, file_path: Union[str, Path]) -> str:
        """Compute the Wiki.js path for a file inside the vault.

        Raises:
            DocumentError: If the file is outside the vault root
        """
        resolved = Path(file_path).resolve()
        try:
            relative = resolved.relative_to(self.vault_root)
        except ValueError:
            raise DocumentError(
                str(file_path),
                f"File is outside the vault root {self.vault_root}"
            )

        relative_str = relative.as_posix()
        if relative_str.lower().endswith(MARKDOWN_SUFFIX):
            relative_str = relative_str[:-len(MARKDOWN_SUFFIX)]
        return f"/{relative_str}"

    def read(self, file_path: Union[str, Path]) -> DocumentReference:
        """Read a Markdown file into a DocumentReference.

        Args:
            file_path: Path to the Markdown file

        Returns:
            DocumentReference with title, path, body and raw tags

        Raises:
            DocumentError: If the file is missing, unreadable, not Markdown or outside the vault
            FrontmatterError: If the frontmatter is malformed
        """
        path = Path(file_path)
        if path.suffix.lower() != MARKDOWN_SUFFIX:
            raise DocumentError(str(file_path), "Not a Markdown (.md) file")

        try:
            content = path.read_text(encoding='utf-8')
        except FileNotFoundError:
            raise DocumentError(str(file_path), "File not found")
        except PermissionError:
            raise DocumentError(str(file_path), "Permission denied")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentError(str(file_path), str(e))

        frontmatter, body = FrontmatterHandler.split(str(file_path), content)
        remote_path = self.remote_path(path)

        doc = DocumentReference(
            title=path.stem,
            path=remote_path,
            content=body,
            tags=FrontmatterHandler.get_tags(frontmatter),
        )
        logger.debug(f"Read document '{doc.title}' -> {doc.path}")
        return doc
