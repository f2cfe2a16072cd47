# =============================================================================
# Header Extraction
# =============================================================================
# Finds header lines in raw message text for the pager's metadata row.
#
# Spool messages are not MIME-decoded here; a header is simply the first
# line that starts with the header name. The first match wins, scanning
# from the top, so a "To:" quoted in the body never shadows the real one.
# =============================================================================

# Shown when a message has no matching header line
UNKNOWN = "Unknown"

TO_PREFIX = "To: "
DATE_PREFIX = "Date: "

# "Date: Mon, 1 Jan 2024 10:00:00" - anything after is timezone noise
DATE_TOKENS = 6


def split_lines(text: str) -> list[str]:
    """
    Split message text into lines.

    Only "\\n" ends a line (form feeds and other Unicode separators stay
    inside the line) and a trailing "\\r" is dropped, so CRLF spools read
    the same as LF ones. A final newline does not add an empty line.

    Example:
        >>> split_lines("To: a\\r\\nbody\\x0cmore\\n")
        ['To: a', 'body\\x0cmore']
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def find_field(text: str, prefix: str, default: str | None = None) -> str | None:
    """
    Find the first line of a message that starts with a header prefix.

    Args:
        text: Raw message text.
        prefix: Header prefix including the colon and space (e.g. "Date: ").
        default: Value returned when no line matches.

    Returns:
        The matching line with surrounding whitespace stripped, or default.

    Example:
        >>> find_field("From x\\nTo: bob\\n\\nhi", "To: ")
        'To: bob'
    """
    for line in split_lines(text):
        if line.startswith(prefix):
            return line.strip()
    return default


def display_to(text: str) -> str:
    """Return the "To:" line of a message, or "Unknown"."""
    return find_field(text, TO_PREFIX, UNKNOWN)


def display_date(text: str) -> str:
    """
    Return a compact "Date:" line for display.

    Only the first six whitespace-separated tokens are kept, which drops
    the numeric offset and any zone comment, e.g.
    "Date: Mon, 1 Jan 2024 10:00:00 +0000 (UTC)" -> "Date: Mon, 1 Jan 2024 10:00:00".
    """
    date = find_field(text, DATE_PREFIX, UNKNOWN)
    return " ".join(date.split()[:DATE_TOKENS])
