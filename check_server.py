#!/usr/bin/env python3
"""
Server health check script.
Run this to verify your email server is configured correctly.
"""

import sys
from pathlib import Path

from app.diagnostics import main


if __name__ == "__main__":
    sys.exit(main(Path(__file__).parent))
