"""Platform-specific discovery of ssh and scp executables."""

import logging
import os
import sys
from collections.abc import Mapping, Sequence
from typing import Protocol

from sshexec.errors import CommandNotFoundError

log = logging.getLogger(__name__)


class DiscoveryStrategy(Protocol):
    """Locate a named executable among the standard install locations."""

    def find(self, name: str) -> str: ...


def _unique_dirs(search_path: Sequence[str]) -> list[str]:
    """Return non-empty directories in order, dropping exact repeats.

    Entries are used exactly as given.
    """
    dirs: list[str] = []
    seen: set[str] = set()
    for path_dir in search_path:
        if not path_dir or path_dir in seen:
            continue
        seen.add(path_dir)
        dirs.append(path_dir)
    return dirs


def _candidate_names(name: str) -> list[str]:
    if sys.platform.startswith("win"):
        exts = os.environ.get("PATHEXT", ".COM;.EXE;.BAT;.CMD").split(os.pathsep)
        return [name] + [name + ext for ext in exts if ext]
    return [name]


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def find_command(name: str, search_path: Sequence[str]) -> str:
    """Look up ``name`` restricted to the given directories.

    Only the listed directories are checked, never the working directory.
    Returns the path of the first executable match. On Windows the PATHEXT
    suffixes are tried as well.
    """
    dirs = _unique_dirs(search_path)
    for path_dir in dirs:
        for candidate in _candidate_names(name):
            path = os.path.join(path_dir, candidate)
            if _is_executable(path):
                log.debug("found %s at %s", name, path)
                return path
    log.debug("%s not found in %s", name, dirs)
    raise CommandNotFoundError(name, dirs)


class PosixDiscovery:
    """Search the directories listed in PATH."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def _path_dirs(self) -> list[str]:
        env = os.environ if self._environ is None else self._environ
        return env.get("PATH", os.defpath).split(os.pathsep)

    def find(self, name: str) -> str:
        return find_command(name, self._path_dirs())


class WindowsDiscovery:
    """Search the Windows OpenSSH install, then PATH, then Git for Windows."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def _env(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def search_dirs(self) -> list[str]:
        env = self._env()
        system_root = env.get("SystemRoot", r"C:\Windows")
        program_files = env.get("ProgramFiles", r"C:\Program Files")
        dirs = [os.path.join(system_root, "System32", "OpenSSH")]
        dirs.extend(env.get("PATH", "").split(os.pathsep))
        dirs.append(os.path.join(program_files, "Git", "usr", "bin"))
        return dirs

    def find(self, name: str) -> str:
        return find_command(name, self.search_dirs())


def default_discovery(platform: str | None = None) -> DiscoveryStrategy:
    """Return the discovery strategy for the given (or current) platform."""
    platform = sys.platform if platform is None else platform
    if platform.startswith("win"):
        return WindowsDiscovery()
    return PosixDiscovery()
