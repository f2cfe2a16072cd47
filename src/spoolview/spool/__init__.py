# =============================================================================
# Spool Module
# =============================================================================
# Reading mbox-style spool files.
#
# Provides:
#   - Boundary scanning for the "From " separator line
#   - MailStore: the ordered messages of one file or a whole spool directory
#
# Spool files are opened read-only and never written.
# =============================================================================

from spoolview.spool.scanner import ScanState, find_boundaries, split_messages
from spoolview.spool.store import MailStore, SkippedMailbox, SpoolError

__all__ = [
    "MailStore",
    "ScanState",
    "SkippedMailbox",
    "SpoolError",
    "find_boundaries",
    "split_messages",
]
