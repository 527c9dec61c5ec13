"""Create/update mutation builder for Wiki.js pages.

Both page mutations share one template. The target variant decides the
operation name, the identifying argument (path for a new page, id for an
existing one) and whether the created page is selected in the response.
The fixed publishing fields are written once, so create and update cannot
drift apart.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Union

from wikijs_publisher.wikijs_client.page_resolver import LOCALE

MUTATION_TEMPLATE = """
mutation {name}({declarations}) {{
    pages {{
        {operation}(
            {key_argument},
            title: $title,
            content: $content,
            tags: $tags,
            locale: "{locale}",
            description: "",
            isPublished: true,
            editor: "markdown",
            isPrivate: false
        ) {{
            responseResult {{
                succeeded
                errorCode
                slug
                message
            }}{page_selection}
        }}
    }}
}}
"""

PAGE_SELECTION = """
            page {
                id
                path
                title
            }"""

SHARED_DECLARATIONS = "$title: String!, $content: String!, $tags: [String]!"


@dataclass(frozen=True)
class NewPage:
    """No remote page exists yet; it will be created at path."""
    path: str

    operation = "create"
    operation_name = "CreatePage"
    key_declaration = "$path: String!"
    key_argument = "path: $path"
    returns_page = True

    def key_variables(self) -> Dict[str, Any]:
        return {'path': self.path}


@dataclass(frozen=True)
class ExistingPage:
    """A remote page was resolved; it will be updated in place."""
    id: int

    operation = "update"
    operation_name = "UpdatePage"
    key_declaration = "$id: Int!"
    key_argument = "id: $id"
    returns_page = False

    def key_variables(self) -> Dict[str, Any]:
        return {'id': self.id}


PageTarget = Union[NewPage, ExistingPage]


@dataclass(frozen=True)
class PageMutation:
    """A ready-to-send mutation.

    Attributes:
        operation: Field under `pages` holding the result ("create" or "update")
        query: GraphQL mutation text
        variables: Variables for the mutation
    """
    operation: str
    query: str
    variables: Dict[str, Any]


def build_page_mutation(
    target: PageTarget,
    title: str,
    content: str,
    tags: List[str],
) -> PageMutation:
    """Build the create or update mutation for a target.

    Args:
        target: NewPage(path) or ExistingPage(id)
        title: Page title
        content: Markdown content
        tags: Normalized tag list

    Returns:
        PageMutation ready for GraphQLClient.send

    Example:
        >>> m = build_page_mutation(ExistingPage(42), "Intro", "# Intro", ["guide"])
        >>> m.operation, m.variables["id"]
        ('update', 42)
    """
    query = MUTATION_TEMPLATE.format(
        name=target.operation_name,
        declarations=f"{target.key_declaration}, {SHARED_DECLARATIONS}",
        operation=target.operation,
        key_argument=target.key_argument,
        locale=LOCALE,
        page_selection=PAGE_SELECTION if target.returns_page else "",
    )

    variables: Dict[str, Any] = dict(target.key_variables())
    variables.update({
        'title': title,
        'content': content,
        'tags': list(tags),
    })

    return PageMutation(operation=target.operation, query=query, variables=variables)
