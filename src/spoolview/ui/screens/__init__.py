# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views for the application.
#
#   - PagerScreen: One message at a time, full screen
# =============================================================================

from spoolview.ui.screens.pager import PagerScreen

__all__ = ["PagerScreen"]
