"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional
import sys
import select

from curtsies import Input

from .constants import PagerConstants
from .view import Control, page_controls


class TerminalInterface:
    """Handles terminal I/O for the pager."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None

    def setup(self):
        """Enter fullscreen mode and start raw key input."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.hide_cursor, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._input is None:
            self._input = Input(keynames='curtsies')
            self._input.__enter__()

    def cleanup(self):
        """Stop key input and restore the terminal."""
        if self._input is not None:
            try:
                self._input.__exit__(None, None, None)
            finally:
                self._input = None
        if self.is_fullscreen:
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def clear_screen(self):
        """Clear the entire screen."""
        print(self.term.home + self.term.clear, end='', flush=True)

    def fit_controls(self, controls: list[Control], width: int) -> list[Control]:
        """Choose the controls that fit on a bar ``width`` columns wide.

        First, Previous, Next and Last are kept. Numbered page controls are
        dropped starting with the one farthest from the active page, so the
        active page goes last. If even the bare navigation controls do not
        fit, controls are dropped from the end.
        """
        def bar_width(items):
            return sum(len(c.label) + 2 for c in items) + max(0, len(items) - 1)

        kept = list(controls)
        numbered = page_controls(kept)
        if numbered:
            anchor = next((c.page for c in numbered if c.active), numbered[0].page)
            while numbered and bar_width(kept) > width:
                farthest = max(numbered, key=lambda c: (abs(c.page - anchor), c.page))
                numbered.remove(farthest)
                kept.remove(farthest)
        while kept and bar_width(kept) > width:
            kept.pop()
        return kept

    def render_controls(self, controls: list[Control], width: int) -> str:
        """Compose the control bar as a styled string at most ``width`` wide.

        Disabled controls are dimmed and the active page is shown in
        reverse video. See :meth:`fit_controls` for what is left out.
        """
        out = []
        for control in self.fit_controls(controls, width):
            text = f"[{control.label}]"
            if control.active:
                out.append(self.term.reverse + text + self.term.normal)
            elif not control.enabled:
                out.append(self.term.dim + text + self.term.normal)
            else:
                out.append(text)
        return ' '.join(out)

    def draw_page(self, lines: list[str], controls: list[Control], status: str):
        """Draw content lines, the control bar and the status line.

        Args:
            lines: Display lines for the content area, already wrapped to
                the terminal width and cut to the visible rows.
            controls: Navigation controls for the bar below the content.
            status: Text for the bottom line.
        """
        width = self.term.width
        print(self.term.home + self.term.clear, end='')
        for y, line in enumerate(lines[:self.content_height]):
            print(self.term.move(y, 0) + line[:width], end='')
        print(self.term.move(self.term.height - 2, 0) + self.render_controls(controls, width), end='')
        print(self.term.move(self.term.height - 1, 0) + status[:width].ljust(width), end='', flush=True)

    def draw_prompt(self, prompt: str):
        """Show an input prompt on the status line with a visible cursor."""
        width = self.term.width
        print(self.term.move(self.term.height - 1, 0) + prompt[:width].ljust(width), end='')
        print(self.term.move(self.term.height - 1, min(len(prompt), width - 1))
              + self.term.normal_cursor, end='', flush=True)

    def draw_error_message(self, message1: str, message2: str = ""):
        """Draw an error message in the center of the screen."""
        print(self.term.home + self.term.clear, end='')
        center_y = self.term.height // 2
        box_width = max(len(message1), len(message2)) + 4
        left_margin = max(0, (self.term.width - box_width) // 2)

        print(self.term.move(center_y - 2, left_margin) + "╔" + "═" * (box_width - 2) + "╗", end='')
        print(self.term.move(center_y - 1, left_margin) + "║ " + message1.center(box_width - 4) + " ║", end='')
        if message2:
            print(self.term.move(center_y, left_margin) + "║ " + message2.center(box_width - 4) + " ║", end='')
            print(self.term.move(center_y + 1, left_margin) + "╚" + "═" * (box_width - 2) + "╝", end='')
        else:
            print(self.term.move(center_y, left_margin) + "╚" + "═" * (box_width - 2) + "╝", end='')

        help_text = "q to quit | Resize terminal to continue"
        print(self.term.move(self.term.height - 1, max(0, (self.term.width - len(help_text)) // 2)),
              end='')
        print(help_text, end='', flush=True)

    def draw_help(self, title: str, help_lines: list[str]):
        """Draw a centered help screen."""
        print(self.term.home + self.term.clear, end='')
        width = self.term.width
        height = self.term.height
        print(f"{self.term.move(1, max(0, (width - len(title)) // 2))}"
              f"{self.term.bold}{title}{self.term.normal}", end='')

        content_start_y = max(3, (height - len(help_lines)) // 2)
        left_margin = max(0, (width - max(len(line) for line in help_lines)) // 2)
        for i, line in enumerate(help_lines):
            print(f"{self.term.move(content_start_y + i, left_margin)}{line}", end='')

        print(f"{self.term.move(height - 1, 0)} Press any key to continue", end='')
        print(self.term.hide_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single key name from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name as a string, or None if nothing arrived.
        """
        if self._input is None:
            return None
        if timeout is not None:
            r, _, _ = select.select([sys.stdin], [], [], float(timeout))
            if not r:
                return None
        evt = next(self._input)
        return str(evt) if evt is not None else None

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height

    @property
    def content_height(self):
        """Rows available for page content (excluding control bar and status)."""
        return max(0, self.term.height - PagerConstants.RESERVED_ROWS)
