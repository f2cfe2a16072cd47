# =============================================================================
# Pager Screen
# =============================================================================
# The only screen of spoolview: one message, full screen.
#
# This is the session loop. For every key event it:
#   1. translates the key into a Command (pager/keys.py)
#   2. asks the Navigator for the next state
#   3. renders a full Frame for that state and draws it
#
# A synthetic NOOP command is fed on mount so the first message shows up
# before any key is pressed.
# =============================================================================

import logging

from textual import events
from textual.app import ComposeResult
from textual.screen import Screen

from spoolview.pager import Command, Navigator, NavigatorState, command_for_key
from spoolview.rendering import Frame, render_frame
from spoolview.spool import MailStore
from spoolview.ui.widgets.frame_view import FrameView

logger = logging.getLogger(__name__)


class PagerScreen(Screen):
    """
    Full-screen message pager.

    The screen owns the navigation state for the whole session. The
    MailStore is only read.

    Keys:
        - PgUp/PgDn: Previous/next message
        - Home/End: First/last message
        - Up/Down: Scroll one line
        - d, d: Delete (asks for confirmation; not carried out)
        - q/Esc: Quit
    """

    def __init__(self, store: MailStore) -> None:
        """
        Initialize the pager screen.

        Args:
            store: The messages to page through. Must not be empty.

        Raises:
            EmptyMailboxError: If the store has no messages.
        """
        super().__init__()
        self._store = store
        self._navigator = Navigator(store)
        self._state = self._navigator.start()

    def compose(self) -> ComposeResult:
        """Compose the pager layout."""
        yield FrameView(id="frame")

    def on_mount(self) -> None:
        """Draw the first frame."""
        self.apply(Command.NOOP)

    def on_key(self, event: events.Key) -> None:
        """Feed every key press to the navigator."""
        event.stop()
        self.apply(command_for_key(event.key))

    def on_resize(self, event: events.Resize) -> None:
        """Redraw for the new viewport height."""
        self.draw()

    # -------------------------------------------------------------------------
    # Session Loop
    # -------------------------------------------------------------------------

    def apply(self, command: Command) -> None:
        """
        Apply a command and redraw.

        Args:
            command: The command to apply.
        """
        self._state = self._navigator.step(self._state, command)

        if self._state.finished:
            logger.info("Quit requested")
            self.app.exit()
            return

        if self._state.delete_requested:
            message = self._store.get(self._state.current_message)
            logger.info(f"Delete confirmed for message {self._state.current_message + 1} ({message.mailbox})")
            self.notify("Deleting mail is not supported", severity="warning")

        self.draw()

    def draw(self) -> None:
        """Render and draw the frame for the current state."""
        self.query_one(FrameView).show_frame(self.render_current())

    def render_current(self) -> Frame:
        """Render the frame for the current state."""
        return render_frame(
            self._store.get(self._state.current_message),
            self._state,
            len(self._store),
            self.app.size.height,
        )

    @property
    def state(self) -> NavigatorState:
        """Get the current navigation state."""
        return self._state
