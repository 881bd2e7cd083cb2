# =============================================================================
# epubgrid Entry Point for `python -m epubgrid`
# =============================================================================
# This module allows epubgrid to be run as a Python module:
#
#   python -m epubgrid chapter.xhtml
#
# This is equivalent to running the 'epubgrid' command after installation.
# =============================================================================

import sys

from epubgrid.app import main

if __name__ == "__main__":
    sys.exit(main())
