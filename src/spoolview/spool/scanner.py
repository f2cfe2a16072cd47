# =============================================================================
# Separator Scanner
# =============================================================================
# Splits the raw text of a spool file into messages.
#
# In a spool file every message starts with a sender line:
#
#     From alice@example.com  Mon Jan  1 10:00:00 2024
#
# Unfortunately "From " also turns up in ordinary text ("From what I
# can tell..."), and we don't get mbox ">From" quoting to help us.
# The rule used here:
#
#   A line starting with "From " is a boundary only when the line right
#   before it is empty.
#
# Real separators always follow the blank line that ends the previous
# message. A body line that happens to start with "From " after a blank
# line is still taken as a boundary; that mis-split is accepted.
#
# The scanner walks the text line by line with two states:
#
#     AFTER_BLANK_LINE --"From ..."--> boundary, IN_BODY
#     AFTER_BLANK_LINE --other text--> IN_BODY
#     IN_BODY          --""---------> AFTER_BLANK_LINE
#
# Messages are cut so that joining them back with "\n\n" gives the
# original text exactly.
# =============================================================================

from enum import Enum, auto
from typing import Iterator

# Literal token that opens every message
FROM_LINE = "From "

# Text between two messages (the newline ending the last line + the blank line)
SEPARATOR = "\n\n"


class ScanState(Enum):
    """States of the boundary scanner."""
    AFTER_BLANK_LINE = auto()   # Previous line was empty
    IN_BODY = auto()            # Previous line had text (or start of file)


def find_boundaries(text: str) -> Iterator[int]:
    """
    Yield the offset of every message boundary in a spool text.

    Each offset points at the "F" of a "From " line that follows an
    empty line. The first line of the text is never a boundary: it is
    the start of the first message, not a split point.

    Args:
        text: Full text of a spool file.

    Yields:
        Boundary offsets, in increasing order.

    Example:
        >>> list(find_boundaries("From a\\nHi\\n\\nFrom b\\nBye\\n"))
        [11]
    """
    state = ScanState.IN_BODY
    offset = 0

    # Only "\n" ends a line; a stray "\r" stays part of the line text
    for line in text.split("\n"):
        if state is ScanState.AFTER_BLANK_LINE and line.startswith(FROM_LINE):
            yield offset

        if line:
            state = ScanState.IN_BODY
        elif offset > 0:
            # An empty first line has no line break in front of it
            state = ScanState.AFTER_BLANK_LINE

        offset += len(line) + 1


def split_messages(text: str) -> list[str]:
    """
    Split a spool text into message texts.

    The round trip is exact:

        messages[0] + "".join("\\n\\n" + m for m in messages[1:]) == text

    Args:
        text: Full text of a spool file.

    Returns:
        Message texts in file order. Empty text gives an empty list; text
        without any boundary gives a single message.
    """
    if not text:
        return []

    messages = []
    start = 0
    for boundary in find_boundaries(text):
        # Drop the "\n\n" in front of the boundary; it belongs to neither side
        messages.append(text[start:boundary - len(SEPARATOR)])
        start = boundary
    messages.append(text[start:])

    return messages
