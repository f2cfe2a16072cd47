# =============================================================================
# Message Model
# =============================================================================
# Represents a single mail taken from a spool file.
#
# A spool message is just text: the headers, a blank line and the body.
# We keep that text exactly as it appeared in the file. Trimming only
# happens when lines are computed for display, so nothing is lost if the
# text is trimmed twice.
# =============================================================================

from dataclasses import dataclass
from functools import cached_property

from spoolview.core.headers import display_date, display_to, split_lines


@dataclass(frozen=True)
class Message:
    """
    Represents one message from a mail spool.

    Attributes:
        text: The exact text of the message (headers + body), untrimmed.
        mailbox: Name of the spool file the message was read from
                 (usually the owning user's name).

    Example:
        >>> message = Message("From alice  Mon Jan  1 10:00:00 2024\\nHi\\n", "alice")
        >>> message.line_count
        2
    """
    text: str
    mailbox: str = ""

    @cached_property
    def lines(self) -> list[str]:
        """Lines of the message as displayed (surrounding whitespace trimmed)."""
        return split_lines(self.text.strip())

    @property
    def line_count(self) -> int:
        """Number of displayable lines."""
        return len(self.lines)

    @property
    def to(self) -> str:
        """The "To:" header line, or "Unknown"."""
        return display_to(self.text)

    @property
    def date(self) -> str:
        """The "Date:" header line shortened to six tokens, or "Unknown"."""
        return display_date(self.text)

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"{self.mailbox}: {self.to} ({self.date})"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"Message(mailbox={self.mailbox!r}, lines={self.line_count})"
