"""Publish orchestration: resolve, then create or update.

This module provides the Publisher class that takes a DocumentReference,
looks up whether Wiki.js already has a page with its title, and issues the
matching create or update mutation. Every outcome is reported through the
Reporter as exactly one notice; errors never escape publish().
"""

import logging
from typing import Any, List, Optional

from wikijs_publisher.models.document_reference import DocumentReference
from wikijs_publisher.models.remote_page import RemotePage
from wikijs_publisher.settings.models import Settings
from wikijs_publisher.wikijs_client.errors import PublisherError, RemoteError
from wikijs_publisher.wikijs_client.graphql_client import GraphQLClient
from wikijs_publisher.wikijs_client.page_resolver import PageResolver

from .models import PublishAction, PublishResult
from .mutations import ExistingPage, NewPage, PageTarget, build_page_mutation
from .reporter import Reporter

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


def normalize_tags(raw_tags: Any) -> List[str]:
    """Turn a frontmatter tags value into a clean list of strings.

    A scalar becomes a one-element list, every tag is trimmed, and tags that
    are empty after trimming are dropped. None yields an empty list.
    Applying it to its own output returns the same list.

    Args:
        raw_tags: Tags value from frontmatter (list, tuple, scalar or None)

    Returns:
        List of trimmed tag strings in their original order

    Example:
        >>> normalize_tags([" guide", "draft "])
        ['guide', 'draft']
        >>> normalize_tags("guide")
        ['guide']
    """
    if raw_tags is None:
        return []
    if not isinstance(raw_tags, (list, tuple)):
        raw_tags = [raw_tags]

    tags = []
    for tag in raw_tags:
        if tag is None:
            continue
        text = str(tag).strip()
        if text:
            tags.append(text)
    return tags


class Publisher:
    """Publishes documents to Wiki.js.

    Example:
        >>> publisher = Publisher(settings, reporter)
        >>> result = publisher.publish(doc)
        >>> result.succeeded
        True
    """

    def __init__(
        self,
        settings: Settings,
        reporter: Reporter,
        client: Optional[GraphQLClient] = None,
        resolver: Optional[PageResolver] = None,
    ):
        """Initialize the publisher.

        Args:
            settings: Connection settings; read, never modified
            reporter: Receives notices and diagnostic lines
            client: GraphQL client (built from settings if None)
            resolver: Page resolver (built on the client if None)
        """
        self.settings = settings
        self.reporter = reporter
        self.client = client or GraphQLClient(settings)
        self.resolver = resolver or PageResolver(self.client)

    def _diagnostic(self, text: str) -> None:
        # Debug mode routes diagnostics to the reporter instead of the logger
        if self.settings.debug:
            self.reporter.log(text)
        else:
            logger.debug(text)

    def publish(self, doc: DocumentReference) -> PublishResult:
        """Create or update the Wiki.js page for a document.

        Args:
            doc: Document to publish

        Returns:
            PublishResult describing the outcome; a notice has already been shown
        """
        try:
            tags = normalize_tags(doc.tags)
            self._diagnostic(f"Publishing '{doc.title}' ({doc.path}) with tags {tags}")

            page_id = self.resolver.find_id_by_title(doc.title)
            target: PageTarget
            if page_id is not None:
                self._diagnostic(f"Found existing page {page_id}, updating")
                target = ExistingPage(page_id)
            else:
                self._diagnostic(f"No existing page, creating at {doc.path}")
                target = NewPage(doc.path)

            page = self._apply(target, doc, tags)

        except PublisherError as e:
            logger.error(f"Publish failed for '{doc.title}': {e}")
            return self._fail(e)

        except Exception as e:
            logger.exception(f"Unexpected error publishing '{doc.title}'")
            return self._fail(e)

        action = PublishAction(target.operation)
        if action is PublishAction.CREATE:
            message = "Published to Wiki.js (page created)"
        else:
            message = "Published to Wiki.js (page updated)"
        if page is not None:
            logger.info(f"Created page {page.id} at {page.path}")
        self.reporter.notify(message)
        return PublishResult(succeeded=True, message=message, action=action, page=page)

    def _apply(
        self,
        target: PageTarget,
        doc: DocumentReference,
        tags: List[str],
    ) -> Optional[RemotePage]:
        """Send the mutation for target and check its responseResult.

        Returns:
            Created page for a NewPage target, None for an update

        Raises:
            RemoteError: If responseResult.succeeded is not true
        """
        mutation = build_page_mutation(target, doc.title, doc.content, tags)
        data = self.client.send(mutation.query, mutation.variables)

        outcome = (data.get('pages') or {}).get(mutation.operation) or {}
        response_result = outcome.get('responseResult') or {}
        self._diagnostic(f"{mutation.operation} responseResult: {response_result}")

        if not response_result.get('succeeded'):
            raise RemoteError(
                response_result.get('message') or UNKNOWN_ERROR,
                error_code=response_result.get('errorCode'),
            )

        page_data = outcome.get('page')
        if target.returns_page and page_data:
            return RemotePage.from_api(page_data)
        return None

    def test_connection(self) -> PublishResult:
        """List pages to check the URL and token, reporting the page count.

        Returns:
            PublishResult with page_count set on success
        """
        try:
            pages = self.resolver.list_pages()
        except PublisherError as e:
            logger.error(f"Connection test failed: {e}")
            return self._fail(e, prefix="Connection test failed")
        except Exception as e:
            logger.exception("Unexpected error during connection test")
            return self._fail(e, prefix="Connection test failed")

        message = f"Connection succeeded: {len(pages)} page(s) found"
        self.reporter.notify(message)
        return PublishResult(succeeded=True, message=message, page_count=len(pages))

    def _fail(self, error: Exception, prefix: str = "Publish failed") -> PublishResult:
        message = f"{prefix}: {error}"
        self.reporter.notify(message)
        return PublishResult(succeeded=False, message=message, error=error)
