"""Command pattern implementation for pager actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType
from .navigation import NavigationIntent

if TYPE_CHECKING:
    from .pager import Pager
    from .keyboard import KeyEvent


class PagerCommand(ABC):
    """Base class for pager commands."""

    @abstractmethod
    def execute(self, pager: 'Pager', key_event: 'KeyEvent') -> None:
        """Execute the command.

        Args:
            pager: Pager instance
            key_event: The key event that triggered this command
        """
        pass


class DocumentCommand(PagerCommand):
    """Base class for commands that need a loaded document."""

    def execute(self, pager: 'Pager', key_event: 'KeyEvent') -> None:
        if not pager.has_document:
            pager.report_no_document()
            return
        self._run(pager, key_event)

    @abstractmethod
    def _run(self, pager: 'Pager', key_event: 'KeyEvent'):
        """Perform the action on the loaded document."""
        pass


class NavigateCommand(DocumentCommand):
    """Move to another page."""

    def __init__(self, intent: NavigationIntent):
        self.intent = intent

    def _run(self, pager, key_event):
        pager.navigate(self.intent)


class SelectVisiblePageCommand(DocumentCommand):
    """Jump to the n-th numbered control currently shown (0-based slot)."""

    def __init__(self, slot: int):
        self.slot = slot

    def _run(self, pager, key_event):
        pager.select_visible_page(self.slot)


class ScrollCommand(DocumentCommand):
    """Scroll the content area within the current page."""

    def __init__(self, lines: int):
        self.lines = lines

    def _run(self, pager, key_event):
        pager.scroll(self.lines)


class GotoPageCommand(DocumentCommand):
    def _run(self, pager, key_event):
        pager.start_prompt('goto_page')


class OpenFileCommand(PagerCommand):
    def execute(self, pager, key_event):
        pager.start_prompt('open_file')


class HelpCommand(PagerCommand):
    def execute(self, pager, key_event):
        pager.show_help()


class QuitCommand(PagerCommand):
    def execute(self, pager, key_event):
        pager.running = False


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], PagerCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        next_page = NavigateCommand(NavigationIntent.NEXT)
        previous_page = NavigateCommand(NavigationIntent.PREVIOUS)
        first_page = NavigateCommand(NavigationIntent.FIRST)
        last_page = NavigateCommand(NavigationIntent.LAST)

        # Page navigation
        for key in ((KeyType.SPECIAL, 'right'), (KeyType.SPECIAL, 'page_down'),
                    (KeyType.REGULAR, 'n'), (KeyType.REGULAR, ' ')):
            self.register(key, next_page)
        for key in ((KeyType.SPECIAL, 'left'), (KeyType.SPECIAL, 'page_up'),
                    (KeyType.REGULAR, 'p')):
            self.register(key, previous_page)
        self.register((KeyType.SPECIAL, 'home'), first_page)
        self.register((KeyType.REGULAR, '<'), first_page)
        self.register((KeyType.SPECIAL, 'end'), last_page)
        self.register((KeyType.REGULAR, '>'), last_page)

        # Numbered page controls: 1..9 then 0 for the tenth
        for slot, digit in enumerate('1234567890'):
            self.register((KeyType.REGULAR, digit), SelectVisiblePageCommand(slot))

        # Scrolling within a page
        self.register((KeyType.SPECIAL, 'up'), ScrollCommand(-1))
        self.register((KeyType.SPECIAL, 'down'), ScrollCommand(1))

        # Prompts
        self.register((KeyType.REGULAR, 'g'), GotoPageCommand())
        self.register((KeyType.CTRL, 'o'), OpenFileCommand())

        # System commands
        self.register((KeyType.SPECIAL, 'f1'), HelpCommand())
        self.register((KeyType.REGULAR, '?'), HelpCommand())
        self.register((KeyType.REGULAR, 'q'), QuitCommand())
        self.register((KeyType.CTRL, 'q'), QuitCommand())

    def register(self, key: Tuple[KeyType, str], command: PagerCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[PagerCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, pager: 'Pager', key_event: 'KeyEvent') -> bool:
        """Execute the command bound to the key event.

        Returns:
            True if a command was bound to the key
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None:
            return False
        command.execute(pager, key_event)
        return True
