from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Mapping

from codex_devshell.runtime.config import LaunchConfig

logger = logging.getLogger(__name__)


def spawn_shell(
    executable: Path, config: LaunchConfig, environ: Mapping[str, str]
) -> subprocess.Popen:
    """Start the shell with the parent's stdin/stdout/stderr."""
    cmd = [str(executable), *config.args]
    try:
        return subprocess.Popen(cmd, cwd=config.cwd, env=config.merged_env(environ))
    except OSError as e:
        raise RuntimeError(f"Failed to start desktop shell: {e}") from e


def wait_for_exit(proc: subprocess.Popen) -> int:
    """Block until the child exits; Ctrl+C is left for the child to handle."""
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            logger.debug("Interrupt received, waiting for desktop shell to exit")


def exit_status(returncode: int) -> int:
    if returncode < 0:
        # Killed by signal N -> 128 + N, as POSIX shells report it.
        return 128 - returncode
    return returncode
