#!/usr/bin/env python
"""Command-line interface for fuhl."""

import sys

from .app import main

def run_cli():
    """Run the fuhl command-line interface."""
    sys.exit(main())

if __name__ == "__main__":
    run_cli()
