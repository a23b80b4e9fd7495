from pathlib import Path

import pytest

from codex_devshell.runtime.host import BINARY_DIRS, binary_name


@pytest.fixture(autouse=True)
def _clean_electron_env(monkeypatch):
    monkeypatch.delenv("ELECTRON_EXECUTABLE", raising=False)
    monkeypatch.delenv("ELECTRON_OVERRIDE_DIST_PATH", raising=False)


@pytest.fixture
def install_root_factory(tmp_path):
    def _make(platform=None, arch=None, with_cli=True, with_electron=True):
        """
        Lay out a fake checkout:

        - resources/bin/<dir>/codex[.exe] for the given host (or every host)
        - node_modules/electron/{path.txt,dist/electron}
        """
        root = tmp_path / "checkout"
        root.mkdir(exist_ok=True)
        if with_cli:
            for (plat, cpu), bin_dir in BINARY_DIRS.items():
                if platform is not None and (plat, cpu) != (platform, arch):
                    continue
                target = root / "resources" / "bin" / bin_dir / binary_name(plat)
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_bytes(b"")
        if with_electron:
            package_dir = root / "node_modules" / "electron"
            (package_dir / "dist").mkdir(parents=True, exist_ok=True)
            (package_dir / "path.txt").write_text("electron", encoding="utf-8")
            (package_dir / "dist" / "electron").write_bytes(b"")
        return root

    return _make


@pytest.fixture
def proc_version_file(tmp_path):
    def _write(text: str) -> Path:
        path = tmp_path / "proc_version"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
