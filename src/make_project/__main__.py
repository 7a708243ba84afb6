from __future__ import annotations

import sys

from make_project.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
