from pathlib import Path
import pytest
from hdrcomplete import config as CFG
from hdrcomplete.sysinc import (
    VersionedRoot, descend, default_system_paths, detect_platform,
    greatest_version, parse_version, system_path_source,
)

def _dirs(root: Path, *names: str) -> Path:
    for n in names:
        (root / n).mkdir(parents=True)
    return root

def test_greatest_parsed_version_not_lexicographic():
    assert greatest_version(["1.0", "2.3", "1.9"]) == "2.3"
    assert greatest_version(["9", "10", "beta"]) == "10"
    assert greatest_version(["10.0.19041.0", "10.0.22621.0", "10.0.9600.0"]) == "10.0.22621.0"

def test_malformed_names_are_ignored():
    assert parse_version("beta") is None
    assert parse_version("1.0-rc") is None
    assert parse_version("v14") == (14,)
    assert greatest_version(["latest", "tmp"]) is None

def test_ties_and_prefixes():
    assert greatest_version(["1", "1.0"]) == "1.0"
    assert greatest_version(["1.0", "1.00"]) == "1.00"

def test_descent_picks_greatest(tmp_path: Path):
    root = _dirs(tmp_path / "clang", "1.0/include", "2.3/include", "1.9/include", "notes")
    assert descend(VersionedRoot(str(root), ["include"])) == str(root / "2.3" / "include")

def test_multi_step_descent(tmp_path: Path):
    root = _dirs(tmp_path / "vs", "2019/VC/14.29", "2022/VC/14.38", "2022/VC/14.4")
    found = descend(VersionedRoot(str(root), ["VC", ""]))
    assert found == str(root / "2022" / "VC" / "14.38")

def test_descent_without_versions_skips_root(tmp_path: Path):
    root = _dirs(tmp_path / "sdk", "current", "beta")
    assert descend(VersionedRoot(str(root), ["include"])) is None
    assert descend(VersionedRoot(str(tmp_path / "absent"), [""])) is None

def test_descent_missing_suffix_skips_root(tmp_path: Path):
    root = _dirs(tmp_path / "clang", "17/lib")
    assert descend(VersionedRoot(str(root), ["include"])) is None

def test_default_paths_static_then_versioned(tmp_path: Path, monkeypatch):
    good = _dirs(tmp_path / "gcc", "9", "13")
    bad = _dirs(tmp_path / "other", "misc")
    monkeypatch.setitem(CFG.STATIC_SYSTEM_PATHS, "linux", ["/usr/include/"])
    monkeypatch.setitem(CFG.VERSIONED_SYSTEM_ROOTS, "linux", [(str(bad), [""]), (str(good), [""])])
    assert default_system_paths("linux") == ["/usr/include/", str(good / "13")]
    assert system_path_source("linux")() == ["/usr/include/", str(good / "13")]

def test_no_roots_resolve_gives_empty(monkeypatch, tmp_path: Path):
    monkeypatch.setitem(CFG.STATIC_SYSTEM_PATHS, "windows", [])
    monkeypatch.setitem(CFG.VERSIONED_SYSTEM_ROOTS, "windows", [(str(tmp_path / "none"), ["include"])])
    assert default_system_paths("win32") == []

@pytest.mark.parametrize("raw, family", [
    ("linux", "linux"), ("darwin", "darwin"), ("win32", "windows"),
    ("cygwin", "windows"), ("freebsd13", "bsd"), ("sunos5", "unix"),
])
def test_detect_platform(raw, family):
    assert detect_platform(raw) == family
