# =============================================================================
# Frame View Widget
# =============================================================================
# Draws a rendered Frame at fixed rows:
#
#   row 1    status    (underlined, like a title bar)
#   row 2    metadata  (To / Date)
#   row 3+   body
#
# The body is drawn as plain rich Text: message content is never parsed
# as markup, and long lines are cropped instead of wrapped, so one
# message line is always one screen row.
# =============================================================================

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static

from spoolview.rendering import Frame


class FrameView(Vertical):
    """
    A widget displaying one pager frame.

    Usage:
        >>> view = FrameView()
        >>> view.show_frame(frame)
    """

    DEFAULT_CSS = """
    FrameView {
        height: 1fr;
    }

    FrameView > #frame-status {
        height: 1;
        text-style: underline;
    }

    FrameView > #frame-meta {
        height: 1;
        color: $text-muted;
    }

    FrameView > #frame-body {
        height: 1fr;
        overflow: hidden;
    }
    """

    def __init__(self, **kwargs) -> None:
        """
        Initialize the frame view.

        Args:
            **kwargs: Additional arguments passed to Vertical.
        """
        super().__init__(**kwargs)
        self._frame: Frame | None = None

    def compose(self) -> ComposeResult:
        """Compose the widget."""
        yield Static("", id="frame-status")
        yield Static("", id="frame-meta")
        yield Static("", id="frame-body")

    def show_frame(self, frame: Frame) -> None:
        """
        Replace everything on screen with a new frame.

        Args:
            frame: The frame to draw.
        """
        self._frame = frame
        self.query_one("#frame-status", Static).update(_plain(frame.status))
        self.query_one("#frame-meta", Static).update(_plain(frame.meta))
        self.query_one("#frame-body", Static).update(_plain("\n".join(frame.body)))

    @property
    def frame(self) -> Frame | None:
        """Get the frame currently on screen."""
        return self._frame


def _plain(text: str) -> Text:
    """Wrap user content as unstyled, non-wrapping text."""
    return Text(text, no_wrap=True, overflow="crop")
