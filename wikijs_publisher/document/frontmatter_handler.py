"""YAML frontmatter parsing for markdown files.

This module splits a markdown file into its YAML frontmatter and body.
Only the `tags` field is used for publishing; other fields are returned
untouched so callers can inspect them.
"""

import re
from typing import Any, Dict, Tuple

import yaml

from .errors import FrontmatterError


class FrontmatterHandler:
    """Handles YAML frontmatter operations for markdown files.

    Frontmatter format:
        ---
        tags:
          - guide
          - draft
        ---
        # Body starts here

    A file without a leading `---` block has no frontmatter and no tags.
    """

    # Regex pattern to match YAML frontmatter (between --- delimiters)
    FRONTMATTER_PATTERN = re.compile(
        r'^---\s*\n(.*?)\n?---\s*(?:\n|$)',
        re.DOTALL
    )

    TAGS_FIELD = 'tags'

    # Maximum allowed depth for YAML structures
    MAX_YAML_DEPTH = 10

    @classmethod
    def _validate_yaml_depth(cls, obj, current_depth: int = 0, max_depth: int = MAX_YAML_DEPTH) -> None:
        """Reject YAML structures nested deeper than max_depth.

        Raises:
            FrontmatterError: If depth exceeds maximum
        """
        if current_depth > max_depth:
            raise FrontmatterError(
                "<yaml>",
                f"YAML structure exceeds maximum depth of {max_depth}"
            )

        if isinstance(obj, dict):
            for value in obj.values():
                cls._validate_yaml_depth(value, current_depth + 1, max_depth)
        elif isinstance(obj, list):
            for item in obj:
                cls._validate_yaml_depth(item, current_depth + 1, max_depth)

    @classmethod
    def split(cls, file_path: str, content: str) -> Tuple[Dict[str, Any], str]:
        """Split markdown content into frontmatter and body.

        Args:
            file_path: Path to the file (for error messages)
            content: Full markdown content including frontmatter

        Returns:
            Tuple of (frontmatter dict, body); the dict is empty without frontmatter

        Raises:
            FrontmatterError: If frontmatter is malformed or has invalid YAML
        """
        match = cls.FRONTMATTER_PATTERN.match(content)
        if not match:
            return {}, content

        frontmatter_str = match.group(1)
        body = content[match.end():]

        try:
            frontmatter = yaml.safe_load(frontmatter_str)
        except yaml.YAMLError as e:
            raise FrontmatterError(
                file_path,
                f"Invalid YAML syntax: {str(e)}"
            )

        if frontmatter is None:
            return {}, body

        if not isinstance(frontmatter, dict):
            raise FrontmatterError(
                file_path,
                f"Frontmatter must be a YAML dictionary, got {type(frontmatter).__name__}"
            )

        try:
            cls._validate_yaml_depth(frontmatter)
        except FrontmatterError as e:
            raise FrontmatterError(file_path, e.message)

        return frontmatter, body

    @classmethod
    def get_tags(cls, frontmatter: Dict[str, Any]) -> Any:
        """Return the raw tags value (list, scalar or None)."""
        return frontmatter.get(cls.TAGS_FIELD)
