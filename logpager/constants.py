"""Constants and configuration defaults for the logpager viewer."""

class PagerConstants:
    """Central configuration constants for the pager."""

    # Paging
    PAGE_SIZE = 1024 * 1024  # Characters per page
    MAX_VISIBLE_PAGES = 10  # Numbered page controls shown at once

    # File loading
    READ_CHUNK_SIZE = 64 * 1024  # Characters per read() while loading
    FILE_ENCODING = "utf-8"

    # Display
    TAB_SIZE = 8
    MIN_TERMINAL_WIDTH = 40  # Narrowest terminal the control bar fits in
    MIN_TERMINAL_HEIGHT = 5  # Content rows + control bar + status line
    RESERVED_ROWS = 2  # Control bar and status line

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Status messages
    OPENED_MESSAGE = "Opened {}"
    NO_DOCUMENT_MESSAGE = "No document loaded"
    INVALID_PAGE_MESSAGE = "Invalid page: {}"
    TERMINAL_TOO_SMALL_MESSAGE = "Terminal too small! Need at least {}x{}."
    CURRENT_SIZE_MESSAGE = "Current size: {}x{}."
