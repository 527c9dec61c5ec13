"""Page lookups against the Wiki.js GraphQL API.

Resolution is by free-text title search. The first search result is taken
as the match without checking that its title is identical, so a title that
partially matches another page can resolve to that page.
"""

import logging
from typing import List, Optional

from wikijs_publisher.models.remote_page import RemotePage

from .errors import RemoteError
from .graphql_client import GraphQLClient

logger = logging.getLogger(__name__)

# Locale used for search and for every page written
LOCALE = "zh"

SEARCH_QUERY = """
query SearchPages($query: String!, $locale: String!) {
    pages {
        search(query: $query, locale: $locale) {
            results {
                id
                title
                path
            }
            totalHits
        }
    }
}
"""

LIST_QUERY = """
query ListPages {
    pages {
        list(orderBy: TITLE) {
            id
            path
            title
        }
    }
}
"""


class PageResolver:
    """Finds remote pages through a GraphQLClient.

    Example:
        >>> resolver = PageResolver(client)
        >>> page_id = resolver.find_id_by_title("Intro")
    """

    def __init__(self, client: GraphQLClient):
        self._client = client

    def find_id_by_title(self, title: str) -> Optional[int]:
        """Return the ID of the first page found for a title, or None.

        Args:
            title: Title used as the free-text search query

        Returns:
            ID of the first search result, or None if there are no results

        Raises:
            ConfigurationError, TransportError, RemoteError: From the client
        """
        data = self._client.send(SEARCH_QUERY, {'query': title, 'locale': LOCALE})

        search = (data.get('pages') or {}).get('search') or {}
        results = search.get('results') or []
        if not results:
            logger.debug(f"No page found for title '{title}'")
            return None

        page_id = int(results[0]['id'])
        logger.debug(f"Title '{title}' resolved to page {page_id}")
        return page_id

    def list_pages(self) -> List[RemotePage]:
        """List all pages ordered by title.

        Raises:
            RemoteError: If the response carries no page list
        """
        data = self._client.send(LIST_QUERY, {})

        pages = (data.get('pages') or {}).get('list')
        if pages is None:
            raise RemoteError("Unable to fetch the page list")

        return [RemotePage.from_api(page) for page in pages]
