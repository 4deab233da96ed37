"""Textual front end: page content with a bar of real buttons."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Footer, Header, Static

from .config import PagerSettings
from .constants import PagerConstants
from .loader import LoadError, read_text_file
from .navigation import NavigationIntent, navigate
from .paginator import PageView, Paginator
from .view import Control, build_controls

logger = logging.getLogger(__name__)


class ControlButton(Button):
    """A button bound to one navigation control."""

    def __init__(self, control: Control):
        super().__init__(
            control.label,
            variant="primary" if control.active else "default",
            disabled=not control.enabled,
        )
        self.control = control


class LogPagerApp(App):
    """Textual app paging through one text file."""

    CSS = """
    #content-scroll {
        height: 1fr;
        padding: 0 1;
    }
    #controls {
        height: auto;
    }
    #controls Button {
        min-width: 5;
        margin: 0 1 0 0;
    }
    """

    BINDINGS = [
        Binding("right,n", "next_page", "Next", priority=True),
        Binding("left,p", "previous_page", "Previous", priority=True),
        Binding("home", "first_page", "First", priority=True),
        Binding("end", "last_page", "Last", priority=True),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, filename: Optional[str] = None, settings: Optional[PagerSettings] = None):
        super().__init__()
        self.filename = filename
        self.settings = settings or PagerSettings()
        self.paginator = Paginator(self.settings.page_size, self.settings.max_visible_pages)
        self.page_view: Optional[PageView] = None

    def compose(self) -> ComposeResult:
        """Create widgets."""
        yield Header()
        with VerticalScroll(id="content-scroll"):
            yield Static("", id="content", markup=False)
        yield Horizontal(id="controls")
        yield Footer()

    async def on_mount(self) -> None:
        """Load the file given on the command line."""
        if self.filename:
            await self.open_file(self.filename)
        else:
            self.sub_title = PagerConstants.NO_DOCUMENT_MESSAGE

    async def open_file(self, path: str) -> bool:
        """Load ``path``; on failure keep the current page and notify."""
        try:
            text = read_text_file(path, chunk_size=self.settings.chunk_size)
        except LoadError as e:
            logger.warning(str(e))
            self.notify(str(e), severity="error")
            return False
        self.sub_title = path
        await self.show_view(self.paginator.load(text, source=path))
        return True

    async def show_view(self, view: PageView) -> None:
        """Display a page and rebuild the control bar for it."""
        page_changed = self.page_view is None or self.page_view.current_page != view.current_page
        self.page_view = view
        self.query_one("#content", Static).update(view.content)
        if page_changed:
            self.query_one("#content-scroll", VerticalScroll).scroll_home(animate=False)

        bar = self.query_one("#controls", Horizontal)
        await bar.remove_children()
        await bar.mount_all([ControlButton(control) for control in build_controls(view)])

    async def apply(self, intent: NavigationIntent, page: Optional[int] = None) -> None:
        if not self.paginator.is_loaded:
            self.notify(PagerConstants.NO_DOCUMENT_MESSAGE, severity="warning")
            return
        await self.show_view(navigate(self.paginator, intent, page))

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, ControlButton):
            control = event.button.control
            await self.apply(control.intent, control.page)

    async def action_next_page(self) -> None:
        await self.apply(NavigationIntent.NEXT)

    async def action_previous_page(self) -> None:
        await self.apply(NavigationIntent.PREVIOUS)

    async def action_first_page(self) -> None:
        await self.apply(NavigationIntent.FIRST)

    async def action_last_page(self) -> None:
        await self.apply(NavigationIntent.LAST)
