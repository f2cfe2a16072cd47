# =============================================================================
# Navigator
# =============================================================================
# A pure state machine over (current message, current line).
#
# Rules:
#   - Moving between messages always resets the line offset to 0.
#   - Indexes are clamped, never wrapped: PgUp on the first message and
#     PgDn on the last one do nothing.
#   - The line offset stays within the current message's lines.
#   - Delete is a two-step confirm: the first "d" arms, a second "d"
#     requests the delete, anything else disarms. Nothing is deleted
#     here; the caller only gets `delete_requested`.
#   - After Quit the state is final and ignores further commands.
#
# The Navigator is only defined over a non-empty store: with zero
# messages "last message" would be -1, so that case is refused up front.
# =============================================================================

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spoolview.spool import MailStore


class Command(Enum):
    """Navigation commands understood by the Navigator."""
    NEXT_MESSAGE = auto()       # PgDn
    PREV_MESSAGE = auto()       # PgUp
    FIRST_MESSAGE = auto()      # Home
    LAST_MESSAGE = auto()       # End
    LINE_DOWN = auto()          # Down
    LINE_UP = auto()            # Up
    QUIT = auto()               # q / Esc
    DELETE = auto()             # d
    NOOP = auto()               # Synthetic; forces the first frame
    OTHER = auto()              # Any unbound key


class DeleteState(Enum):
    """Delete confirmation state."""
    IDLE = auto()
    ARMED = auto()              # First "d" pressed, waiting for the second


# Commands that move to another message (line offset goes back to 0)
MESSAGE_COMMANDS = frozenset({
    Command.NEXT_MESSAGE,
    Command.PREV_MESSAGE,
    Command.FIRST_MESSAGE,
    Command.LAST_MESSAGE,
})


@dataclass(frozen=True)
class NavigatorState:
    """
    Position of the pager.

    Attributes:
        current_message: Index into the MailStore, in [0, total_messages).
        current_line: First body line shown, in [0, total_lines - 1]
                      (0 for a message without lines).
        delete: Delete confirmation state.
        delete_requested: True only in the state produced by the
                          confirming second delete.
        finished: True once Quit has been received.
    """
    current_message: int = 0
    current_line: int = 0
    delete: DeleteState = DeleteState.IDLE
    delete_requested: bool = False
    finished: bool = False

    @property
    def delete_armed(self) -> bool:
        """Returns True while waiting for the delete confirmation."""
        return self.delete is DeleteState.ARMED


def transition(
    state: NavigatorState,
    command: Command,
    total_messages: int,
    total_lines: int,
) -> NavigatorState:
    """
    Apply one command to a pager state.

    Args:
        state: The current state.
        command: The command to apply.
        total_messages: Number of messages in the store (must be > 0).
        total_lines: Line count of the message at `state.current_message`.

    Returns:
        The new state. `state` itself is never modified.

    Raises:
        EmptyMailboxError: If total_messages is 0.
    """
    if total_messages <= 0:
        raise EmptyMailboxError("Cannot navigate an empty mailbox")

    if state.finished:
        return state

    # delete_requested only lives for one transition
    state = replace(state, delete_requested=False)

    if command is Command.NOOP:
        return state

    if command is Command.QUIT:
        return replace(state, delete=DeleteState.IDLE, finished=True)

    if command is Command.DELETE:
        if state.delete is DeleteState.ARMED:
            return replace(state, delete=DeleteState.IDLE, delete_requested=True)
        return replace(state, delete=DeleteState.ARMED)

    # Every other key cancels a pending delete
    state = replace(state, delete=DeleteState.IDLE)
    last_message = total_messages - 1
    last_line = max(total_lines - 1, 0)

    if command in MESSAGE_COMMANDS:
        if command is Command.NEXT_MESSAGE:
            current = min(state.current_message + 1, last_message)
        elif command is Command.PREV_MESSAGE:
            current = max(state.current_message - 1, 0)
        elif command is Command.FIRST_MESSAGE:
            current = 0
        else:
            current = last_message
        return replace(state, current_message=current, current_line=0)

    if command is Command.LINE_DOWN:
        return replace(state, current_line=min(state.current_line + 1, last_line))

    if command is Command.LINE_UP:
        return replace(state, current_line=max(state.current_line - 1, 0))

    return state


class Navigator:
    """
    Drives `transition` with the totals of a MailStore.

    Usage:
        >>> navigator = Navigator(store)
        >>> state = navigator.start()
        >>> state = navigator.step(state, Command.NEXT_MESSAGE)
        >>> state.current_message
        1
    """

    def __init__(self, store: "MailStore") -> None:
        """
        Initialize the navigator.

        Args:
            store: The messages to navigate. The store is only read.
        """
        self.store = store

    @property
    def total_messages(self) -> int:
        """Number of messages in the store."""
        return len(self.store)

    def start(self) -> NavigatorState:
        """
        Return the initial state (first message, first line).

        Raises:
            EmptyMailboxError: If the store has no messages.
        """
        if not self.total_messages:
            raise EmptyMailboxError("No mail")
        return NavigatorState()

    def step(self, state: NavigatorState, command: Command) -> NavigatorState:
        """Apply a command using the current message's line count."""
        if not self.total_messages:
            raise EmptyMailboxError("No mail")
        total_lines = self.store.get(state.current_message).line_count
        return transition(state, command, self.total_messages, total_lines)


# =============================================================================
# Exceptions
# =============================================================================

class EmptyMailboxError(Exception):
    """Raised when navigation is attempted on a store without messages."""
    pass
