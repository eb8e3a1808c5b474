"""
Entry point for PollChat application, runnable from a source checkout.
"""

import sys

from PollChat.__main__ import main

if __name__ == '__main__':
    sys.exit(main())
