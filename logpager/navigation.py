"""Navigation intents shared by the presenters."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .paginator import InvalidPageIndex, PageView, Paginator


class NavigationIntent(Enum):
    """A user request to move within the document.

    Values are the command names a host view sends to request the move.
    """
    NEXT = "requestNextPage"
    PREVIOUS = "requestPreviousPage"
    FIRST = "jumpToFirstPage"
    LAST = "jumpToLastPage"
    PAGE = "jumpToPage"


def parse_intent(command: str) -> NavigationIntent:
    """Map a command name to its intent.

    Raises:
        ValueError: If the command is not a known navigation command.
    """
    try:
        return NavigationIntent(command)
    except ValueError:
        raise ValueError(f"Unknown navigation command: {command!r}") from None


def navigate(paginator: Paginator, intent: NavigationIntent,
             page: Optional[int] = None) -> PageView:
    """Apply ``intent`` to ``paginator`` and return the resulting view."""
    if intent is NavigationIntent.NEXT:
        return paginator.go_next()
    if intent is NavigationIntent.PREVIOUS:
        return paginator.go_previous()
    if intent is NavigationIntent.FIRST:
        return paginator.go_to_first()
    if intent is NavigationIntent.LAST:
        return paginator.go_to_last()
    if page is None:
        raise InvalidPageIndex(page)
    return paginator.go_to_page(page)
