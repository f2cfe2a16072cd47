# =============================================================================
# Frame Rendering
# =============================================================================
# Builds a full-screen frame for one pager state.
#
# Rendering is pure: it takes the message, the state and the viewport
# height and returns text. The Textual widget (ui/widgets/frame_view.py)
# only draws it. Every key event produces a new full frame; nothing is
# diffed.
#
# Body lines are never wrapped. A message longer than the viewport is
# cut at the bottom, a shorter one simply leaves empty rows.
# =============================================================================

from dataclasses import dataclass, field

from spoolview.core import Message
from spoolview.pager.keys import HELP_TEXT
from spoolview.pager.navigator import NavigatorState

# Rows taken by the status and metadata lines
HEADER_HEIGHT = 2

DELETE_PROMPT = "Delete this message? Press d again to confirm, any other key to cancel"


@dataclass(frozen=True)
class Frame:
    """
    The text of one screen.

    Attributes:
        status: Status row (position and key help).
        meta: Metadata row (To and Date headers).
        body: Body rows, at most viewport height - HEADER_HEIGHT.
    """
    status: str
    meta: str
    body: list[str] = field(default_factory=list)

    @property
    def lines(self) -> list[str]:
        """All rows of the frame, top to bottom."""
        return [self.status, self.meta, *self.body]


def status_line(state: NavigatorState, total_messages: int) -> str:
    """Return the status row for a state."""
    position = f"message {state.current_message + 1}/{total_messages}"
    if state.delete_armed:
        return f"{position}    {DELETE_PROMPT}"
    return f"{position}    {HELP_TEXT}"


def render_frame(
    message: Message,
    state: NavigatorState,
    total_messages: int,
    viewport_height: int,
) -> Frame:
    """
    Render the frame for the current message.

    Args:
        message: The message at `state.current_message`.
        state: Current pager state.
        total_messages: Number of messages in the store.
        viewport_height: Terminal rows available, headers included.

    Returns:
        The frame to draw.

    Example:
        >>> frame = render_frame(message, NavigatorState(), 3, 24)
        >>> frame.status.split("    ")[0]
        'message 1/3'
    """
    body_height = max(viewport_height - HEADER_HEIGHT, 0)
    start = state.current_line

    return Frame(
        status=status_line(state, total_messages),
        meta=f"{message.to}    {message.date}",
        body=message.lines[start:start + body_height],
    )
