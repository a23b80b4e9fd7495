"""Locate the Electron executable the same way the ``electron`` npm package does."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

from codex_devshell.runtime.errors import ShellRuntimeNotFoundError
from codex_devshell.runtime.host import HostTarget

logger = logging.getLogger(__name__)

EXECUTABLE_ENV = "ELECTRON_EXECUTABLE"
OVERRIDE_DIST_ENV = "ELECTRON_OVERRIDE_DIST_PATH"


def platform_executable(platform: str) -> str:
    if platform == "win32":
        return "electron.exe"
    if platform == "darwin":
        return "Electron.app/Contents/MacOS/Electron"
    return "electron"


def _from_package(install_root: Path) -> Path:
    package_dir = Path(install_root) / "node_modules" / "electron"
    path_file = package_dir / "path.txt"
    try:
        relative = path_file.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ShellRuntimeNotFoundError(
            f"cannot read {path_file} ({exc}); run `npm install` first"
        ) from exc
    return package_dir / "dist" / relative


def resolve_electron(
    install_root: Path,
    host: HostTarget,
    environ: Mapping[str, str],
    explicit: Optional[str] = None,
) -> Path:
    explicit = explicit or environ.get(EXECUTABLE_ENV)
    if explicit:
        candidate = Path(explicit)
    elif environ.get(OVERRIDE_DIST_ENV):
        candidate = Path(environ[OVERRIDE_DIST_ENV]) / platform_executable(host.platform)
    else:
        candidate = _from_package(install_root)

    candidate = candidate.resolve()
    if not candidate.is_file():
        raise ShellRuntimeNotFoundError(str(candidate))
    logger.debug("Electron executable: %s", candidate)
    return candidate
