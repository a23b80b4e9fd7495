from __future__ import annotations


class LauncherError(RuntimeError):
    """Fatal launcher condition; reported once and never retried."""

    exit_code = 1


class UnsupportedPlatformError(LauncherError):
    def __init__(self, platform: str, arch: str):
        self.platform = platform
        self.arch = arch
        super().__init__(f"Unsupported platform/arch: {platform}/{arch}")


class MissingBinaryError(LauncherError):
    def __init__(self, path):
        self.path = path
        super().__init__(
            f"CLI not found at: {path}\n"
            "Please ensure the CLI binary exists in resources/bin/"
        )


class ShellRuntimeNotFoundError(LauncherError):
    def __init__(self, detail: str):
        super().__init__(f"Electron runtime not found: {detail}")
