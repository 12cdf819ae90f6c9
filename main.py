"""Entry point for locating a Composer-managed WordPress installation."""

import sys

from src.locate_wordpress import main

if __name__ == "__main__":
    sys.exit(main())
