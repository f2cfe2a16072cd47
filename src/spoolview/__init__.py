# =============================================================================
# spoolview: A Terminal Pager for Local Mail Spools
# =============================================================================
#
# spoolview reads the flat mbox-style spool files found in /var/mail (one
# file per user) and lets you page through them without leaving the
# terminal.
#
# Features:
#   - Single mailbox or whole spool directory browsing
#   - Message paging (PgUp/PgDn, Home/End) and line scrolling (Up/Down)
#   - Compact To/Date header for every message
#   - Unreadable mailboxes are skipped, not fatal
#   - XDG Base Directory compliant config and logs
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "spoolview"

# Main entry point - this is what gets called by the 'spoolview' command
from spoolview.app import main

__all__ = ["main", "__version__", "__app_name__"]
