# =============================================================================
# UI Widgets
# =============================================================================
# Reusable UI components for spoolview.
#
#   - FrameView: Draws a rendered Frame (status, metadata, body)
# =============================================================================

from spoolview.ui.widgets.frame_view import FrameView

__all__ = ["FrameView"]
