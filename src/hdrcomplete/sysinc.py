# hdrcomplete/sysinc.py
"""
Default system include directories per platform family.

Fixed roots (e.g. /usr/include) come straight from config. SDK/toolchain
layouts that embed a version number are found by version-guided descent:
at each step pick the greatest version-named subdirectory, descend into it,
then append a fixed suffix. A root where any step finds nothing usable is
skipped; an empty result just means "no system paths".
"""
from __future__ import annotations

import os
import re
import sys
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from . import config as CFG

log = logging.getLogger(__name__)

# /* ~~~ "12", "2.3", "10.0.22621.0", "v1_2" -- anything else is not a version ~~~ */
_VERSION = re.compile(r"^v?(\d+(?:[._-]\d+)*)$", re.IGNORECASE)


@dataclass(frozen=True)
class VersionedRoot:
    root: str
    suffixes: List[str] = field(default_factory=lambda: [""])


def detect_platform(platform: Optional[str] = None) -> str:
    """Map sys.platform (or the given value) to a platform family name."""
    p = (platform or sys.platform).lower()
    if p.startswith("linux"):
        return "linux"
    if p == "darwin":
        return "darwin"
    if p in ("win32", "cygwin", "msys", "windows"):
        return "windows"
    if "bsd" in p or p.startswith("dragonfly"):
        return "bsd"
    return "unix"


def parse_version(name: str) -> Optional[Tuple[int, ...]]:
    m = _VERSION.match(name)
    if not m:
        return None
    return tuple(int(part) for part in re.split(r"[._-]", m.group(1)))


def greatest_version(names: Iterable[str]) -> Optional[str]:
    """
    Pick the name with the greatest parsed version.
    Numeric components compare as integers ("10" > "9"); a longer tuple beats
    its own prefix ("1.0" > "1"); equal keys tie-break on the raw name.
    Non-version names are ignored. Returns None if nothing parses.
    """
    best: Optional[Tuple[Tuple[int, ...], str]] = None
    for name in names:
        key = parse_version(name)
        if key is None:
            continue
        if best is None or (key, name) > best:
            best = (key, name)
    return best[1] if best else None


def _subdirectories(path: str) -> List[str]:
    try:
        with os.scandir(path) as it:
            return [e.name for e in it if e.is_dir()]
    except OSError:
        return []


def descend(vroot: VersionedRoot) -> Optional[str]:
    """Follow the version-guided descent from vroot.root; None if any step fails."""
    current = vroot.root
    for suffix in vroot.suffixes:
        pick = greatest_version(_subdirectories(current))
        if pick is None:
            log.debug("Skipping %s: no version-named directory under %s", vroot.root, current)
            return None
        current = os.path.join(current, pick, suffix) if suffix else os.path.join(current, pick)
    if not os.path.isdir(current):
        log.debug("Skipping %s: %s is not a directory", vroot.root, current)
        return None
    return current


def versioned_roots(family: str) -> List[VersionedRoot]:
    return [VersionedRoot(root, list(sfx)) for root, sfx in CFG.VERSIONED_SYSTEM_ROOTS.get(family, [])]


def default_system_paths(platform: Optional[str] = None) -> List[str]:
    family = detect_platform(platform)
    paths = list(CFG.STATIC_SYSTEM_PATHS.get(family, []))
    for vroot in versioned_roots(family):
        found = descend(vroot)
        if found is not None:
            paths.append(found)
    log.debug("System include paths for %s: %s", family, paths)
    return paths


def system_path_source(platform: Optional[str] = None) -> Callable[[], List[str]]:
    """Zero-argument path source running the heuristic at query time."""
    def _source() -> List[str]:
        return default_system_paths(platform)

    _source.__name__ = "default_system_paths"
    return _source
