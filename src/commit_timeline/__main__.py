"""Allow running the CLI with ``python -m commit_timeline``."""

import sys

from commit_timeline.cli.main import main

sys.exit(main())
