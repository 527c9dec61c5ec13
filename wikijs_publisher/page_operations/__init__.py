"""Page publishing operations for Wiki.js.

This package decides between creating and updating a page, builds the
matching mutation, and reports the outcome through a Reporter.
"""

from .models import PublishAction, PublishResult
from .mutations import ExistingPage, NewPage, PageMutation, build_page_mutation
from .publisher import Publisher, normalize_tags
from .reporter import LoggingReporter, Reporter

__all__ = [
    'ExistingPage',
    'LoggingReporter',
    'NewPage',
    'PageMutation',
    'Publisher',
    'PublishAction',
    'PublishResult',
    'Reporter',
    'build_page_mutation',
    'normalize_tags',
]
