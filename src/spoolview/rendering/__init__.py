# =============================================================================
# Rendering Module
# =============================================================================
# Turns the pager state into the exact text to put on screen.
#
# A frame is:
#   - Row 1: status ("message 3/12" + key help, or the delete prompt)
#   - Row 2: metadata (To: and Date: of the message)
#   - Row 3+: message body from the current line, one row per line
# =============================================================================

from spoolview.rendering.frame import HEADER_HEIGHT, Frame, render_frame

__all__ = ["HEADER_HEIGHT", "Frame", "render_frame"]
