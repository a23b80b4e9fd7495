from __future__ import annotations

import logging
import re
from pathlib import Path

from codex_devshell.runtime.host import HostTarget

logger = logging.getLogger(__name__)

PROC_VERSION_PATH = Path("/proc/version")
WSL_MARKER = re.compile(r"microsoft|wsl", re.IGNORECASE)


def looks_like_wsl(kernel_version: str) -> bool:
    return WSL_MARKER.search(kernel_version) is not None


def is_wsl(host: HostTarget, proc_version: Path = PROC_VERSION_PATH) -> bool:
    """
    Best-effort WSL detection from the kernel version string.

    Any failure to read the file counts as "not WSL"; the caller only uses
    this to decide on a graphics workaround.
    """
    if host.platform != "linux":
        return False
    try:
        text = Path(proc_version).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("Could not read %s: %s", proc_version, exc)
        return False
    return looks_like_wsl(text)
