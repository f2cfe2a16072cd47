# =============================================================================
# spoolview Core Module
# =============================================================================
# Core domain models and helpers. These are pure Python with no external
# dependencies, so they can be imported anywhere without causing circular
# dependency issues.
#
#   - Message: One mail from a spool file, stored byte-for-byte
#   - headers: Header lookup and display normalization
# =============================================================================

from spoolview.core.headers import UNKNOWN, display_date, display_to, find_field, split_lines
from spoolview.core.message import Message

__all__ = [
    "Message",
    "UNKNOWN",
    "display_date",
    "display_to",
    "find_field",
    "split_lines",
]
