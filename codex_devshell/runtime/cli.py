from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from codex_devshell.runtime.errors import LauncherError
from codex_devshell.runtime.launcher import run_dev_shell

logger = logging.getLogger(__name__)

LOG_FORMAT = "[start-dev] %(message)s"


def default_install_root() -> Path:
    # <root>/codex_devshell/runtime/cli.py
    return Path(__file__).resolve().parents[2]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Start the Codex desktop shell for development")
    parser.add_argument(
        "--install-root",
        type=Path,
        default=None,
        help="Directory containing resources/bin and node_modules (default: project root)",
    )
    parser.add_argument(
        "--app-root",
        type=Path,
        default=None,
        help="Application root handed to Electron (default: install root)",
    )
    parser.add_argument("--electron", help="Path to the Electron executable")
    parser.add_argument("--dry-run", action="store_true", help="Print the launch command and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("extra", nargs=argparse.REMAINDER, help="Extra arguments passed to Electron")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    args = _build_parser().parse_args(argv)
    if args.install_root is None:
        args.install_root = default_install_root()
    # The child runs with cwd=app_root, so relative paths must be pinned first.
    args.install_root = args.install_root.resolve()
    if args.app_root is None:
        args.app_root = args.install_root
    args.app_root = args.app_root.resolve()
    if args.extra and args.extra[0] == "--":
        args.extra = args.extra[1:]
    return args


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run_dev_shell(
            install_root=args.install_root,
            app_root=args.app_root,
            environ=os.environ,
            electron=args.electron,
            dry_run=args.dry_run,
            extra_args=args.extra,
        )
    except LauncherError as exc:
        logger.error("%s", exc)
        return exc.exit_code
    except RuntimeError as exc:
        logger.error("%s", exc)
        return 1
