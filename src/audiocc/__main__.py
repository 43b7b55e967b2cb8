"""Allow ``python -m audiocc`` to run the command line interface."""

import sys

from audiocc.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
