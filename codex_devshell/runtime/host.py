"""
Host identity and CLI binary resolution.

Identifiers follow the Node.js convention (``process.platform`` / ``os.arch()``)
because the binary distribution under ``resources/bin`` is laid out that way.
"""

from __future__ import annotations

import platform as _platform
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from codex_devshell.runtime.errors import MissingBinaryError, UnsupportedPlatformError

# sys.platform prefix -> Node-style platform name
_PLATFORM_MAP: Dict[str, str] = {
    "darwin": "darwin",
    "linux": "linux",
    "win32": "win32",
    "cygwin": "win32",
}

# platform.machine() -> Node-style arch name
_ARCH_MAP: Dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",  # Windows reports AMD64
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",  # macOS reports arm64
    "armv7l": "arm",
    "armv6l": "arm",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
}

BINARY_DIRS: Dict[Tuple[str, str], str] = {
    ("darwin", "x64"): "darwin-x64",
    ("darwin", "arm64"): "darwin-arm64",
    ("linux", "x64"): "linux-x64",
    ("linux", "arm64"): "linux-arm64",
    ("win32", "x64"): "win32-x64",
}

CLI_NAME = "codex"
BIN_SUBDIR = Path("resources") / "bin"


class HostTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    platform: str
    arch: str

    def __str__(self) -> str:
        return f"{self.platform}/{self.arch}"


def normalize_platform(raw: str) -> str:
    raw = raw.lower()
    for prefix, name in _PLATFORM_MAP.items():
        if raw.startswith(prefix):
            return name
    return raw


def normalize_arch(raw: str) -> str:
    return _ARCH_MAP.get(raw.lower(), raw.lower())


def current_host(
    sys_platform: Optional[str] = None, machine: Optional[str] = None
) -> HostTarget:
    """Read the running interpreter's platform and CPU architecture."""
    return HostTarget(
        platform=normalize_platform(sys_platform if sys_platform is not None else sys.platform),
        arch=normalize_arch(machine if machine is not None else _platform.machine()),
    )


def resolve_binary_dir(host: HostTarget) -> str:
    try:
        return BINARY_DIRS[(host.platform, host.arch)]
    except KeyError:
        raise UnsupportedPlatformError(host.platform, host.arch) from None


def binary_name(platform: str) -> str:
    return f"{CLI_NAME}.exe" if platform == "win32" else CLI_NAME


def resolve_cli_path(install_root: Path, host: HostTarget) -> Path:
    """
    Map the host onto ``<install_root>/resources/bin/<platform>-<arch>/<codex[.exe]>``.
    Raises UnsupportedPlatformError for hosts missing from BINARY_DIRS.
    """
    bin_dir = resolve_binary_dir(host)
    return Path(install_root).resolve() / BIN_SUBDIR / bin_dir / binary_name(host.platform)


def require_cli_binary(path: Path) -> Path:
    if not Path(path).is_file():
        raise MissingBinaryError(path)
    return path
