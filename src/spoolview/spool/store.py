# =============================================================================
# Mail Store
# =============================================================================
# Holds the ordered messages of one spool file or of a whole spool
# directory (/var/mail by default, one file per user).
#
# Loading rules:
#   - Single mailbox: any read problem is fatal (SpoolError).
#   - Directory: each mailbox is loaded on its own. One unreadable or
#     undecodable file must not stop us from browsing the others, so
#     failures are recorded in `skipped` and logged instead of raised.
#     Only an unreadable directory is fatal.
#
# The message order is fixed once loaded: file order within a mailbox,
# mailboxes in name order.
# =============================================================================

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from spoolview.core import Message
from spoolview.spool.scanner import split_messages

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedMailbox:
    """
    A mailbox that could not be loaded in directory mode.

    Attributes:
        name: File name of the mailbox (the user name).
        reason: Why it was skipped (the error message).
    """
    name: str
    reason: str


@dataclass
class MailStore:
    """
    The ordered messages of a mail session.

    Usage:
        >>> store = MailStore.from_path("/var/mail/alice")
        >>> len(store)
        3
        >>> store.get(0).to
        'To: alice@example.com'

    Attributes:
        messages: Messages in display order.
        skipped: Mailboxes left out in directory mode, with the reason.
    """
    messages: list[Message] = field(default_factory=list)
    skipped: list[SkippedMailbox] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def from_path(cls, path: str | Path) -> "MailStore":
        """
        Load every message of one spool file.

        Args:
            path: Path to the spool file.

        Returns:
            A MailStore with the file's messages in file order (empty if
            the file is empty).

        Raises:
            SpoolError: If the file is missing, unreadable or not UTF-8.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SpoolError(f"Cannot read mailbox {path}: {e}") from e

        messages = [Message(chunk, path.name) for chunk in split_messages(text)]
        logger.debug(f"Loaded {len(messages)} message(s) from {path}")
        return cls(messages=messages)

    @classmethod
    def from_directory(
        cls,
        path: str | Path,
        skip: Iterable[str] = (),
    ) -> "MailStore":
        """
        Load every mailbox in a spool directory.

        Args:
            path: The spool directory (e.g. /var/mail).
            skip: Mailbox (user) names to leave out.

        Returns:
            A MailStore with the messages of all loadable mailboxes.
            Mailboxes that failed to load are listed in `skipped`.

        Raises:
            SpoolError: If the directory itself cannot be read.
        """
        path = Path(path)
        skip = set(skip)

        try:
            entries = sorted(path.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            raise SpoolError(f"Cannot read mail directory {path}: {e}") from e

        store = cls()
        for entry in entries:
            if entry.name in skip:
                logger.debug(f"Skipping mailbox {entry.name} (skip list)")
                continue

            try:
                mailbox = cls.from_path(entry)
            except SpoolError as e:
                logger.warning(f"Skipping mailbox {entry.name}: {e}")
                store.skipped.append(SkippedMailbox(entry.name, str(e.__cause__ or e)))
                continue

            store.messages.extend(mailbox.messages)

        logger.info(
            f"Loaded {len(store)} message(s) from {path} "
            f"({len(store.skipped)} mailbox(es) skipped)"
        )
        return store

    @classmethod
    def open(
        cls,
        path: str | Path,
        user: str | None = None,
        skip: Iterable[str] = (),
    ) -> "MailStore":
        """
        Load a single user's mailbox or the whole directory.

        Args:
            path: The spool directory.
            user: If given, only `path/user` is loaded (errors are fatal).
            skip: Mailbox names to leave out in directory mode.
        """
        if user:
            return cls.from_path(Path(path) / user)
        return cls.from_directory(path, skip)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def get(self, index: int) -> Message:
        """
        Return the message at `index`.

        Raises:
            IndexError: Unless 0 <= index < len(store). Negative indexes
                        are not accepted.
        """
        if not 0 <= index < len(self.messages):
            raise IndexError(f"Message index {index} out of range (0..{len(self.messages) - 1})")
        return self.messages[index]

    def __getitem__(self, index: int) -> Message:
        return self.get(index)

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"MailStore(messages={len(self.messages)}, skipped={len(self.skipped)})"


# =============================================================================
# Exceptions
# =============================================================================

class SpoolError(Exception):
    """Raised when a mailbox file or the mail directory cannot be read."""
    pass
