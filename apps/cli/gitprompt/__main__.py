"""Allow ``python -m gitprompt_cli``."""
from __future__ import annotations

import sys

from gitprompt_cli.main import main

sys.exit(main())
