"""Allow running as ``python -m pcbgrid``."""
import sys

from pcbgrid.cli import main

if __name__ == '__main__':
    sys.exit(main())
