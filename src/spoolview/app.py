# =============================================================================
# spoolview Main Application
# =============================================================================
# The Textual application and the command-line entry point.
#
# Startup order matters:
#   1. Parse arguments and load configuration
#   2. Load the mail store (fatal errors are reported here, on a normal
#      terminal, before Textual touches it)
#   3. "No mail" is reported and we exit cleanly
#   4. Only then does the app take over the terminal
#
# Textual restores the terminal on exit, whether we quit normally or an
# exception escapes the app.
# =============================================================================

import argparse
import logging
import sys
from pathlib import Path

from textual.app import App

from spoolview import __version__, __app_name__
from spoolview.config import Config, ConfigError, print_paths
from spoolview.logs import setup_logging
from spoolview.spool import MailStore, SpoolError
from spoolview.ui.screens.pager import PagerScreen

logger = logging.getLogger(__name__)

NO_MAIL = "No mail"


class SpoolViewApp(App):
    """
    The spoolview application.

    Attributes:
        store: The messages being paged through (never empty).
        TITLE: Window title shown in terminal.
    """

    TITLE = "spoolview"

    # Every key belongs to the pager
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, store: MailStore) -> None:
        """
        Initialize the application.

        Args:
            store: The loaded messages. Must not be empty.
        """
        super().__init__()
        self.store = store

    async def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        await self.push_screen(PagerScreen(self.store))


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="spoolview: page through local mail spool files",
    )

    parser.add_argument(
        "user",
        nargs="?",
        help="Read only this user's mailbox (default: all mailboxes)",
    )

    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        metavar="NAME",
        help="Leave out this user's mailbox (repeatable)",
    )

    parser.add_argument(
        "--path",
        type=Path,
        help="Mail spool directory (default: from config, /var/mail)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write the current configuration to the config file and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def load_store(args: argparse.Namespace, config: Config) -> MailStore:
    """
    Load the mail store selected by the arguments and configuration.

    Raises:
        SpoolError: If the mailbox (single-user mode) or the directory
                    cannot be read.
    """
    mail_dir = args.path or Path(config.mail.directory)
    skip = [*config.mail.skip, *args.skip]

    store = MailStore.open(mail_dir, user=args.user, skip=skip)
    for skipped in store.skipped:
        logger.debug(f"Not shown: {skipped.name} ({skipped.reason})")
    return store


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for spoolview.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --init-config, --version)
        3. Loads configuration and sets up logging
        4. Loads the mail store
        5. Starts the Textual application

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    # Load configuration
    try:
        config = Config.load(args.config)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    if args.init_config:
        path = config.save(args.config)
        print(f"Config written to {path}")
        return 0

    level = "DEBUG" if args.debug else config.logging.level
    try:
        setup_logging(level, config.log_path())
    except ValueError as e:
        print(f"Config error: invalid log level: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot open log file: {e}", file=sys.stderr)
        return 1

    # Load mail
    try:
        store = load_store(args, config)
    except SpoolError as e:
        logger.error(str(e))
        print(f"{__app_name__}: {e}", file=sys.stderr)
        return 1

    if not store:
        print(NO_MAIL)
        return 0

    # Create and run the application
    app = SpoolViewApp(store)
    app.run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
