"""Logpager - page through large plain-text files in the terminal."""

from .paginator import (
    Document,
    InvalidPageIndex,
    PageView,
    Paginator,
    PaginatorError,
    UninitializedDocument,
)
from .loader import LoadError, read_text_file
from .navigation import NavigationIntent, navigate

__all__ = [
    'Document',
    'InvalidPageIndex',
    'LoadError',
    'NavigationIntent',
    'PageView',
    'Paginator',
    'PaginatorError',
    'UninitializedDocument',
    'navigate',
    'read_text_file',
]
