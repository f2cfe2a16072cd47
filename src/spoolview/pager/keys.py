# =============================================================================
# Key Bindings
# =============================================================================
# Maps Textual key names to Navigator commands.
#
# Unbound keys become Command.OTHER rather than being ignored, because
# any key other than the second "d" must cancel a pending delete.
# =============================================================================

from spoolview.pager.navigator import Command

KEYMAP: dict[str, Command] = {
    "escape": Command.QUIT,
    "q": Command.QUIT,
    "d": Command.DELETE,
    "pageup": Command.PREV_MESSAGE,
    "pagedown": Command.NEXT_MESSAGE,
    "home": Command.FIRST_MESSAGE,
    "end": Command.LAST_MESSAGE,
    "up": Command.LINE_UP,
    "down": Command.LINE_DOWN,
}

# Shown in the status row
HELP_TEXT = "PgUp/PgDn=prev/next mail  Home/End=first/last  ↑/↓=prev/next line  d=delete  q/Esc=quit"


def command_for_key(key: str) -> Command:
    """Return the command bound to a Textual key name (Command.OTHER if none)."""
    return KEYMAP.get(key, Command.OTHER)
