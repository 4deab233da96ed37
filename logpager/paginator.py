"""Pagination engine for large plain-text documents.

The Paginator holds the full text of one file in memory and slices it into
fixed-size character windows. Every navigation call returns a fresh
:class:`PageView` describing the visible slice together with the state of
the navigation controls (which buttons are enabled, which page numbers are
shown).

Navigation is clamped at the core: moving past either end of the document
leaves the page index on the first or last page instead of producing an
invalid slice.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .constants import PagerConstants

logger = logging.getLogger(__name__)


class PaginatorError(Exception):
    """Base class for pagination errors."""


class UninitializedDocument(PaginatorError):
    """Raised when navigating before any document has been loaded."""

    def __init__(self):
        super().__init__("No document has been loaded")


class InvalidPageIndex(PaginatorError, ValueError):
    """Raised when a requested page index is negative or not an integer."""

    def __init__(self, page):
        super().__init__(f"Invalid page index: {page!r}")
        self.page = page


@dataclass(frozen=True)
class Document:
    """The full text of a loaded file."""
    text: str
    source: Optional[str] = None

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class PageView:
    """Snapshot of one page and the navigation state around it.

    ``last_page`` is the highest valid page index and is the inclusive upper
    bound of ``visible_pages``. Use ``total_pages`` for the page count.
    """
    content: str
    previous_disabled: bool
    next_disabled: bool
    current_page: int
    last_page: int
    visible_pages: tuple[int, ...]

    @property
    def total_pages(self) -> int:
        return self.last_page + 1

    def is_active(self, page: int) -> bool:
        """Return True if ``page`` is the page being shown."""
        return page == self.current_page


def last_page_index(length: int, page_size: int) -> int:
    """Return the index of the last page for a document of ``length`` chars.

    This is ``ceil(length / page_size) - 1``, so a document whose length is
    an exact multiple of the page size ends on a full page rather than on
    an empty one. An empty document has a single (empty) page 0.
    """
    if length <= 0:
        return 0
    return (length - 1) // page_size


def visible_page_window(current: int, last: int, size: int) -> tuple[int, ...]:
    """Select the contiguous run of page indices to show as controls.

    The window starts one page before ``current`` and holds up to ``size``
    pages. Near the end of the document it shifts left so it stays full
    whenever the document has enough pages.
    """
    start = max(current - 1, 0)
    end = min(start + size - 1, last)
    if end - start + 1 < size:
        start = max(end - size + 1, 0)
    return tuple(range(start, end + 1))


class Paginator:
    """Owns a document and the current page position within it."""

    def __init__(self, page_size: int = PagerConstants.PAGE_SIZE,
                 max_visible_pages: int = PagerConstants.MAX_VISIBLE_PAGES):
        """Create an empty paginator.

        Args:
            page_size: Number of characters per page. Must be positive.
            max_visible_pages: Maximum number of page indices reported in
                ``PageView.visible_pages``. Must be positive.

        Raises:
            ValueError: If either argument is not a positive integer.
        """
        if not isinstance(page_size, int) or isinstance(page_size, bool) or page_size <= 0:
            raise ValueError(f"page_size must be a positive integer, got {page_size!r}")
        if (not isinstance(max_visible_pages, int) or isinstance(max_visible_pages, bool)
                or max_visible_pages <= 0):
            raise ValueError(
                f"max_visible_pages must be a positive integer, got {max_visible_pages!r}")
        self._page_size = page_size
        self._max_visible_pages = max_visible_pages
        self._document: Optional[Document] = None
        self._page_index = 0

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def page_index(self) -> int:
        return self._page_index

    @property
    def document(self) -> Optional[Document]:
        return self._document

    @property
    def is_loaded(self) -> bool:
        return self._document is not None

    @property
    def last_page(self) -> int:
        """Highest valid page index for the loaded document."""
        return last_page_index(self._require_document().length, self._page_size)

    def load(self, text: str, source: Optional[str] = None) -> PageView:
        """Replace the document and return the view of its first page.

        Args:
            text: Full file content, already read by the caller.
            source: Optional path or name the text came from.

        Raises:
            TypeError: If ``text`` is not a string. The previous document
                and position are left untouched.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        self._document = Document(text=text, source=source)
        self._page_index = 0
        logger.debug(f"Loaded {len(text)} characters from {source or '<text>'}, "
                     f"{self.last_page + 1} page(s) of {self._page_size}")
        return self.current_view()

    def page_bounds(self) -> tuple[int, int]:
        """Return ``(start, end)`` character offsets of the current page."""
        length = self._require_document().length
        start = self._page_index * self._page_size
        end = min(start + self._page_size, length)
        return start, end

    def current_view(self) -> PageView:
        """Compute the view for the current page without changing state."""
        document = self._require_document()
        start, end = self.page_bounds()
        last = last_page_index(document.length, self._page_size)
        return PageView(
            content=document.text[start:end],
            previous_disabled=self._page_index <= 0,
            next_disabled=end == document.length,
            current_page=self._page_index,
            last_page=last,
            visible_pages=visible_page_window(self._page_index, last, self._max_visible_pages),
        )

    def go_next(self) -> PageView:
        """Advance one page; a no-op on the last page."""
        return self._move_to(self._require_index() + 1)

    def go_previous(self) -> PageView:
        """Go back one page; a no-op on the first page."""
        return self._move_to(self._require_index() - 1)

    def go_to_first(self) -> PageView:
        self._require_document()
        return self._move_to(0)

    def go_to_last(self) -> PageView:
        return self._move_to(self.last_page)

    def go_to_page(self, page: int) -> PageView:
        """Jump to ``page``, clamping indices beyond the last page.

        Raises:
            InvalidPageIndex: If ``page`` is negative or not an integer.
        """
        self._require_document()
        if not isinstance(page, int) or isinstance(page, bool) or page < 0:
            raise InvalidPageIndex(page)
        return self._move_to(page)

    def _move_to(self, page: int) -> PageView:
        clamped = max(0, min(page, self.last_page))
        if clamped != page:
            logger.debug(f"Clamped page {page} to {clamped}")
        self._page_index = clamped
        return self.current_view()

    def _require_index(self) -> int:
        self._require_document()
        return self._page_index

    def _require_document(self) -> Document:
        if self._document is None:
            raise UninitializedDocument()
        return self._document
