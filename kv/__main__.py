from __future__ import annotations

import sys

from kv.cli.main import main

sys.exit(main())
