"""Package entry point for ``python -m dolbyio_rest_apis``."""

import sys

from dolbyio_rest_apis.cli import main

if __name__ == "__main__":
    sys.exit(main())
