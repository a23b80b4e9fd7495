from __future__ import annotations

import os
import sys
from typing import Sequence

# Add project root to path for direct script execution.
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from codex_devshell.runtime.cli import main


def launch(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    return main(["--install-root", project_root, *argv])


if __name__ == "__main__":
    raise SystemExit(launch())
