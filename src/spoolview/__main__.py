# =============================================================================
# spoolview Entry Point for `python -m spoolview`
# =============================================================================
# This module allows spoolview to be run as a Python module:
#
#   python -m spoolview
#
# This is equivalent to running the 'spoolview' command after installation.
# =============================================================================

import sys

from spoolview.app import main

if __name__ == "__main__":
    sys.exit(main())
