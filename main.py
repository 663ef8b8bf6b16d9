# main.py - run the emoji index shell from a source checkout

import sys

from emoji_index.cli import main

if __name__ == "__main__":
    sys.exit(main())
