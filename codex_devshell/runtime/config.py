from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field

CLI_PATH_ENV = "CODEX_CLI_PATH"
BUILD_FLAVOR_ENV = "BUILD_FLAVOR"
RENDERER_URL_ENV = "ELECTRON_RENDERER_URL"
SOFTWARE_GL_ENV = "LIBGL_ALWAYS_SOFTWARE"

DEFAULT_BUILD_FLAVOR = "dev"
# Static assets are served through the app:// protocol, not a Vite dev server.
DEFAULT_RENDERER_URL = "app://-/index.html"

# Accelerated compositing crash-loops on the WSLg D3D12 driver. Only compositing
# is disabled; the app bundle checks GPU availability, so --disable-gpu is not used.
WSL_ARGS: Tuple[str, ...] = (
    "--disable-gpu-compositing",
    "--in-process-gpu",
    "--ozone-platform=wayland",
    "--enable-features=UseOzonePlatform,WaylandWindowDecorations",
)


class LauncherSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    build_flavor: str = DEFAULT_BUILD_FLAVOR
    renderer_url: str = DEFAULT_RENDERER_URL

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "LauncherSettings":
        """Pick up caller-supplied values; empty strings fall back to defaults."""
        return cls(
            build_flavor=environ.get(BUILD_FLAVOR_ENV) or DEFAULT_BUILD_FLAVOR,
            renderer_url=environ.get(RENDERER_URL_ENV) or DEFAULT_RENDERER_URL,
        )


class LaunchConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    args: Tuple[str, ...]
    env: Dict[str, str] = Field(default_factory=dict)
    cwd: str

    def merged_env(self, environ: Mapping[str, str]) -> Dict[str, str]:
        """Inherited environment with overrides on top, as a new dict."""
        merged = dict(environ)
        merged.update(self.env)
        return merged


def build_launch_config(
    cli_path: Path,
    wsl: bool,
    app_root: Path,
    settings: LauncherSettings,
    extra_args: Tuple[str, ...] = (),
) -> LaunchConfig:
    args: Tuple[str, ...] = (".",) + tuple(extra_args)
    env: Dict[str, str] = {}
    if wsl:
        args = WSL_ARGS + args
        env[SOFTWARE_GL_ENV] = "1"

    env[CLI_PATH_ENV] = str(cli_path)
    env[BUILD_FLAVOR_ENV] = settings.build_flavor
    env[RENDERER_URL_ENV] = settings.renderer_url
    return LaunchConfig(args=args, env=env, cwd=str(app_root))
