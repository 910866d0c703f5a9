#!/usr/bin/env python3
"""
Entry point for running moodle_url as a module.
This allows: python -m moodle_url parse <url>
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
