#!/usr/bin/env python
"""
Zebra Browser Print - Standalone Entry Point

Run directly:
    python main.py list

Or against another agent address:
    ZEBRA_BROWSER_PRINT_URL=http://127.0.0.1:9101/ python main.py status
"""

import os
import sys

# Ensure package is importable when running directly
if __name__ == '__main__':
    parent_dir = os.path.dirname(os.path.abspath(__file__))
    if parent_dir not in sys.path:
        sys.path.insert(0, parent_dir)

from zebra_browser_print.cli import main


if __name__ == '__main__':
    main()
