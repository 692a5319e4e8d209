import sys

from word_suggester.cli.cli import main

sys.exit(main())
