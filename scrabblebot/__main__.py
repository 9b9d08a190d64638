import sys

from scrabblebot.cli import main

sys.exit(main())
