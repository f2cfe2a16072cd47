# =============================================================================
# UI Module
# =============================================================================
# Textual-based user interface for spoolview.
#
# Structure:
#   - screens/: Full-screen views (the pager)
#   - widgets/: Reusable UI components (the frame view)
#
# Textual owns the terminal: it switches to the alternate screen, puts
# the terminal in raw mode and restores both when the app exits, on
# every exit path.
# =============================================================================

# Screen exports
from spoolview.ui.screens.pager import PagerScreen

# Widget exports
from spoolview.ui.widgets.frame_view import FrameView

__all__ = ["PagerScreen", "FrameView"]
