"""Presentation helpers: the navigation control bar and content layout."""

from dataclasses import dataclass
from typing import Optional

from .constants import PagerConstants
from .navigation import NavigationIntent
from .paginator import PageView


@dataclass(frozen=True)
class Control:
    """One entry in the navigation bar."""
    label: str
    intent: NavigationIntent
    page: Optional[int] = None
    enabled: bool = True
    active: bool = False  # The numbered control for the page on screen


def build_controls(view: PageView) -> list[Control]:
    """Build the control bar for a page view.

    Order is First, Previous, one control per visible page (labelled
    1-based), Next, Last. The current page's control is active and disabled
    so it cannot be reselected.
    """
    controls = [
        Control("<< First", NavigationIntent.FIRST, enabled=not view.previous_disabled),
        Control("Previous", NavigationIntent.PREVIOUS, enabled=not view.previous_disabled),
    ]
    for page in view.visible_pages:
        active = view.is_active(page)
        controls.append(Control(str(page + 1), NavigationIntent.PAGE, page=page,
                                enabled=not active, active=active))
    controls.append(Control("Next", NavigationIntent.NEXT, enabled=not view.next_disabled))
    controls.append(Control("Last >>", NavigationIntent.LAST, enabled=not view.next_disabled))
    return controls


def page_controls(controls: list[Control]) -> list[Control]:
    """Return only the numbered page controls, in display order."""
    return [c for c in controls if c.intent is NavigationIntent.PAGE]


def _printable(line: str) -> str:
    # Show control characters in caret notation so they cannot drive the terminal
    if line.isprintable():
        return line
    out = []
    for ch in line:
        o = ord(ch)
        if o < 32:
            out.append('^' + chr(o + 64))
        elif o == 127:
            out.append('^?')
        else:
            out.append(ch)
    return ''.join(out)


def wrap_content(content: str, width: int, tab_size: int = PagerConstants.TAB_SIZE) -> list[str]:
    """Break page content into display lines no wider than ``width``.

    Lines are split on newlines (a trailing CR is dropped), tabs are
    expanded, and long lines are hard-wrapped. A final newline does not add
    an extra empty line.
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if not content:
        return []

    raw_lines = content.split('\n')
    if content.endswith('\n'):
        raw_lines.pop()

    lines: list[str] = []
    for raw in raw_lines:
        if raw.endswith('\r'):
            raw = raw[:-1]
        line = _printable(raw.expandtabs(tab_size))
        if not line:
            lines.append("")
            continue
        for i in range(0, len(line), width):
            lines.append(line[i:i + width])
    return lines
