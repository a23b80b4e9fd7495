import pytest

from codex_devshell.runtime.electron import platform_executable, resolve_electron
from codex_devshell.runtime.errors import ShellRuntimeNotFoundError
from codex_devshell.runtime.host import HostTarget

LINUX = HostTarget(platform="linux", arch="x64")


def test_resolves_from_npm_package(install_root_factory):
    root = install_root_factory(with_cli=False)
    path = resolve_electron(root, LINUX, {})
    assert path == (root / "node_modules" / "electron" / "dist" / "electron").resolve()


def test_path_txt_whitespace_is_stripped(install_root_factory):
    root = install_root_factory(with_cli=False)
    (root / "node_modules" / "electron" / "path.txt").write_text("electron\n", encoding="utf-8")
    assert resolve_electron(root, LINUX, {}).name == "electron"


def test_missing_package_raises(install_root_factory):
    root = install_root_factory(with_cli=False, with_electron=False)
    with pytest.raises(ShellRuntimeNotFoundError, match="npm install"):
        resolve_electron(root, LINUX, {})


def test_explicit_executable_wins(install_root_factory, tmp_path):
    root = install_root_factory(with_cli=False, with_electron=False)
    exe = tmp_path / "my-electron"
    exe.write_bytes(b"")
    assert resolve_electron(root, LINUX, {}, explicit=str(exe)) == exe.resolve()
    assert resolve_electron(root, LINUX, {"ELECTRON_EXECUTABLE": str(exe)}) == exe.resolve()


def test_explicit_executable_must_exist(install_root_factory, tmp_path):
    root = install_root_factory(with_cli=False)
    with pytest.raises(ShellRuntimeNotFoundError):
        resolve_electron(root, LINUX, {}, explicit=str(tmp_path / "nope"))


def test_override_dist_path(install_root_factory, tmp_path):
    root = install_root_factory(with_cli=False, with_electron=False)
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "electron.exe").write_bytes(b"")
    host = HostTarget(platform="win32", arch="x64")
    assert resolve_electron(root, host, {"ELECTRON_OVERRIDE_DIST_PATH": str(dist)}) == (dist / "electron.exe").resolve()


def test_platform_executable_names():
    assert platform_executable("win32") == "electron.exe"
    assert platform_executable("darwin") == "Electron.app/Contents/MacOS/Electron"
    assert platform_executable("linux") == "electron"
