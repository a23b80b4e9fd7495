from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from codex_devshell.runtime.compat import PROC_VERSION_PATH, is_wsl
from codex_devshell.runtime.config import LaunchConfig, LauncherSettings, build_launch_config
from codex_devshell.runtime.electron import resolve_electron
from codex_devshell.runtime.host import HostTarget, current_host, require_cli_binary, resolve_cli_path
from codex_devshell.runtime.process import exit_status, spawn_shell, wait_for_exit

logger = logging.getLogger(__name__)


class LaunchPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: HostTarget
    cli_path: Path
    wsl: bool
    config: LaunchConfig


def plan_launch(
    install_root: Path,
    app_root: Path,
    environ: Mapping[str, str],
    host: Optional[HostTarget] = None,
    proc_version: Path = PROC_VERSION_PATH,
    extra_args: Sequence[str] = (),
) -> LaunchPlan:
    """
    Resolve everything needed for the launch without starting anything.

    Raises UnsupportedPlatformError or MissingBinaryError; nothing has been
    spawned at that point.
    """
    host = host or current_host()
    cli_path = resolve_cli_path(install_root, host)
    require_cli_binary(cli_path)

    wsl = is_wsl(host, proc_version)
    config = build_launch_config(
        cli_path,
        wsl,
        app_root,
        LauncherSettings.from_environ(environ),
        extra_args=tuple(extra_args),
    )
    return LaunchPlan(host=host, cli_path=cli_path, wsl=wsl, config=config)


def run_dev_shell(
    install_root: Path,
    app_root: Path,
    environ: Mapping[str, str],
    electron: Optional[str] = None,
    dry_run: bool = False,
    extra_args: Sequence[str] = (),
    host: Optional[HostTarget] = None,
) -> int:
    """Launch the desktop shell and return its exit status."""
    host = host or current_host()
    logger.info("Platform: %s, Arch: %s", host.platform, host.arch)

    plan = plan_launch(install_root, app_root, environ, host=host, extra_args=extra_args)
    logger.info("CLI Path: %s", plan.cli_path)
    if plan.wsl:
        logger.info("WSL detected, forcing software rendering + Wayland CSD")

    executable = resolve_electron(Path(install_root), host, environ, explicit=electron)
    if dry_run:
        logger.info("Command: %s", shlex.join([str(executable), *plan.config.args]))
        for key, value in sorted(plan.config.env.items()):
            logger.info("  %s=%s", key, value)
        return 0

    proc = spawn_shell(executable, plan.config, environ)
    code = exit_status(wait_for_exit(proc))
    logger.debug("Desktop shell exited with %s", code)
    return code
