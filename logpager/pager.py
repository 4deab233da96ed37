"""Main controller for the terminal pager."""

import logging
import os
import select
import signal
import sys
import termios
from typing import Optional

from .commands import CommandRegistry, QuitCommand
from .config import PagerSettings
from .constants import PagerConstants
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .loader import LoadError, read_text_file
from .navigation import NavigationIntent, navigate
from .paginator import InvalidPageIndex, PageView, Paginator
from .terminal import TerminalInterface
from .view import Control, build_controls, page_controls, wrap_content

logger = logging.getLogger(__name__)

HELP_LINES = [
    "",
    "PAGES                          OTHER",
    "  →  PgDn  n  Space  Next        ↑ ↓       Scroll page",
    "  ←  PgUp  p         Previous    Ctrl-O    Open file",
    "  Home  <            First       F1  ?     Help",
    "  End   >            Last        q Ctrl-Q  Quit",
    "  1..9  0            Shown page",
    "  g                  Go to page",
]


class Pager:
    """Full-screen terminal pager for one document at a time."""

    def __init__(self, settings: Optional[PagerSettings] = None):
        """Initialize the pager components."""
        self.settings = settings or PagerSettings()
        self.paginator = Paginator(self.settings.page_size, self.settings.max_visible_pages)
        self.terminal = TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.command_registry = CommandRegistry()
        self.page_view: Optional[PageView] = None
        self.controls: list[Control] = []
        self.scroll_offset = 0
        self.running = False
        self.error_mode = False  # True when the terminal is too small
        self.status_message: Optional[str] = None
        self.prompt_mode: Optional[str] = None  # None, 'goto_page' or 'open_file'
        self.prompt_input = ""
        self.help_visible = False
        self._shown_document = None
        # Wrapped lines for the page on screen, keyed by (view, width)
        self._wrapped_view: Optional[PageView] = None
        self._wrapped_width = 0
        self._wrapped_lines: list[str] = []
        # Resize signaling pipe, open only while run() is active
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None

    @property
    def has_document(self) -> bool:
        return self.paginator.is_loaded

    def open_file(self, path: str) -> bool:
        """Load ``path`` and show its first page.

        On failure the previous document and position stay on screen and
        the error is shown on the status line.

        Returns:
            True if the file was loaded
        """
        try:
            text = read_text_file(path, chunk_size=self.settings.chunk_size)
        except LoadError as e:
            logger.warning(str(e))
            self.status_message = str(e)
            return False
        self._show(self.paginator.load(text, source=path))
        logger.info(f"Opened {path}: {len(text)} characters, {self.page_view.total_pages} page(s)")
        self.status_message = PagerConstants.OPENED_MESSAGE.format(path)
        return True

    def navigate(self, intent: NavigationIntent, page: Optional[int] = None):
        """Apply a navigation intent and show the resulting page."""
        self._show(navigate(self.paginator, intent, page))

    def select_visible_page(self, slot: int):
        """Jump to the page behind the ``slot``-th numbered control on screen."""
        shown = self.terminal.fit_controls(self.controls, self.terminal.width)
        numbered = page_controls(shown)
        if 0 <= slot < len(numbered):
            self.navigate(NavigationIntent.PAGE, numbered[slot].page)

    def scroll(self, lines: int):
        """Scroll the content area, staying within the page."""
        max_offset = max(0, len(self._content_lines()) - self.terminal.content_height)
        self.scroll_offset = max(0, min(self.scroll_offset + lines, max_offset))

    def report_no_document(self):
        self.status_message = PagerConstants.NO_DOCUMENT_MESSAGE

    def start_prompt(self, mode: str):
        self.prompt_mode = mode
        self.prompt_input = ""

    def show_help(self):
        """Show the help screen."""
        self.help_visible = True

    def hide_help(self):
        """Hide the help screen and return to the page."""
        self.help_visible = False

    def _show(self, view: PageView):
        document = self.paginator.document
        if (self.page_view is None or view.current_page != self.page_view.current_page
                or document is not self._shown_document):
            self.scroll_offset = 0
        self._shown_document = document
        self.page_view = view
        self.controls = build_controls(view)

    def _content_lines(self) -> list[str]:
        if self.page_view is None:
            return []
        width = max(1, self.terminal.width)
        if self._wrapped_view is not self.page_view or self._wrapped_width != width:
            self._wrapped_lines = wrap_content(self.page_view.content, width, self.settings.tab_size)
            self._wrapped_view = self.page_view
            self._wrapped_width = width
        return self._wrapped_lines

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        if self._resize_pipe_w is not None:
            os.write(self._resize_pipe_w, PagerConstants.RESIZE_PIPE_MARKER)

    def _close_resize_pipe(self):
        for fd in (self._resize_pipe_r, self._resize_pipe_w):
            if fd is not None:
                os.close(fd)
        self._resize_pipe_r = self._resize_pipe_w = None

    def run(self):
        """Run the main pager loop."""
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        self.terminal.setup()
        self.running = True
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)

        try:
            with self.terminal.term.cbreak():
                # Disable flow control so Ctrl-Q reaches us
                old_settings = None
                try:
                    old_settings = termios.tcgetattr(sys.stdin)
                    new_settings = list(old_settings)
                    new_settings[0] &= ~(termios.IXON | termios.IXOFF)
                    termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
                except (termios.error, AttributeError, OSError):
                    old_settings = None

                try:
                    need_draw = True
                    while self.running:
                        if need_draw:
                            self._draw()
                            need_draw = False

                        ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                        if self._resize_pipe_r in ready:
                            os.read(self._resize_pipe_r, 1024)
                            # Keep the scroll position valid for the new size
                            self.scroll(0)
                            need_draw = True
                        elif 0 in ready:
                            key_event = self.keyboard.get_key_event(timeout=0)
                            if key_event:
                                self._handle_key_event(key_event)
                                need_draw = True
                finally:
                    if old_settings:
                        try:
                            termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                        except (termios.error, OSError):
                            pass
        except KeyboardInterrupt:
            # Ctrl-C quits
            pass
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            self._close_resize_pipe()
            self.terminal.cleanup()

    def _terminal_too_small(self) -> bool:
        return (self.terminal.width < PagerConstants.MIN_TERMINAL_WIDTH
                or self.terminal.height < PagerConstants.MIN_TERMINAL_HEIGHT)

    def _status_text(self) -> str:
        if self.status_message:
            return f" {self.status_message}"
        if self.page_view is None:
            return " Ctrl-O to open a file | F1 for help"
        document = self.paginator.document
        start, end = self.paginator.page_bounds()
        name = os.path.basename(document.source) if document.source else "<text>"
        return (f" {name}  page {self.page_view.current_page + 1}/{self.page_view.total_pages}"
                f"  chars {start}-{end} of {document.length}  | F1 for help")

    def _prompt_text(self) -> str:
        if self.prompt_mode == 'goto_page':
            return f" Go to page: {self.prompt_input}"
        return f" Open file: {self.prompt_input}"

    def _draw(self):
        """Draw the current pager state to the terminal."""
        self.error_mode = self._terminal_too_small()
        if self.error_mode:
            self.terminal.draw_error_message(
                PagerConstants.TERMINAL_TOO_SMALL_MESSAGE.format(
                    PagerConstants.MIN_TERMINAL_WIDTH, PagerConstants.MIN_TERMINAL_HEIGHT),
                PagerConstants.CURRENT_SIZE_MESSAGE.format(self.terminal.width, self.terminal.height),
            )
            return
        if self.help_visible:
            self.terminal.draw_help("LOGPAGER HELP", HELP_LINES)
            return

        rows = self.terminal.content_height
        lines = self._content_lines()[self.scroll_offset:self.scroll_offset + rows]
        self.terminal.draw_page(lines, self.controls, self._status_text())
        if self.prompt_mode:
            self.terminal.draw_prompt(self._prompt_text())

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        if self.error_mode:
            # Only quitting makes sense until the terminal is resized
            command = self.command_registry.get_command(key_event.key_type, key_event.value)
            if isinstance(command, QuitCommand):
                command.execute(self, key_event)
            return

        if self.help_visible:
            self.hide_help()
            return

        if self.prompt_mode:
            self._handle_prompt(key_event)
            return

        # Clear status message on any keypress outside prompts
        self.status_message = None
        self.command_registry.execute(self, key_event)

    def _handle_prompt(self, key_event: KeyEvent):
        """Handle keypress while a prompt is open."""
        if (key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape') or \
           (key_event.key_type == KeyType.CTRL and key_event.value == 'g'):
            self.prompt_mode = None
            self.prompt_input = ""
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'enter':
            mode, value = self.prompt_mode, self.prompt_input.strip()
            self.prompt_mode = None
            self.prompt_input = ""
            if value:
                self._submit_prompt(mode, value)
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'backspace':
            self.prompt_input = self.prompt_input[:-1]
        elif key_event.key_type == KeyType.REGULAR:
            char = key_event.value
            if char.isprintable():
                self.prompt_input += char

    def _submit_prompt(self, mode: str, value: str):
        if mode == 'open_file':
            self.open_file(os.path.expanduser(value))
            return
        try:
            # Pages are numbered from 1 on screen
            self.navigate(NavigationIntent.PAGE, int(value) - 1)
        except (ValueError, InvalidPageIndex):
            self.status_message = PagerConstants.INVALID_PAGE_MESSAGE.format(value)
