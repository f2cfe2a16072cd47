# =============================================================================
# Pager Module
# =============================================================================
# The pager state machine and the key bindings that drive it.
#
# The Navigator knows nothing about terminals: it turns a state and a
# Command into a new state. The UI translates key events into Commands
# (see keys.py) and draws whatever state comes back.
# =============================================================================

from spoolview.pager.keys import KEYMAP, command_for_key
from spoolview.pager.navigator import (
    Command,
    DeleteState,
    EmptyMailboxError,
    Navigator,
    NavigatorState,
    transition,
)

__all__ = [
    "KEYMAP",
    "Command",
    "DeleteState",
    "EmptyMailboxError",
    "Navigator",
    "NavigatorState",
    "command_for_key",
    "transition",
]
