"""Allow ``python -m lolmark page.lol``."""

import sys

from lolmark.cli import main

sys.exit(main())
