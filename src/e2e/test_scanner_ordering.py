from pathlib import Path
import pytest
from hdrcomplete.models import ModeFilter
from hdrcomplete.scanner import scan
from hdrcomplete.errors import ScanError

C_HEADERS = ModeFilter.compile("c", r"\.h$")

def _seed(tmp: Path) -> Path:
    root = tmp / "inc"; root.mkdir()
    for name in ("b.h", "a.h", "c.txt"):
        (root / name).write_text("", encoding="utf-8")
    return root

def test_sorted_and_filtered(tmp_path: Path):
    root = _seed(tmp_path)
    rows = scan(str(root), "", C_HEADERS)
    assert [r.display_text for r in rows] == ["a.h", "b.h"]
    assert all(r.source_directory == str(root) for r in rows)

def test_codepoint_order_not_locale(tmp_path: Path):
    root = tmp_path / "inc"; root.mkdir()
    for name in ("b.h", "Z.h", "_x.h", "a.h"):
        (root / name).write_text("", encoding="utf-8")
    rows = scan(str(root), "", C_HEADERS)
    assert [r.display_text for r in rows] == ["Z.h", "_x.h", "a.h", "b.h"]

def test_directories_kept_with_trailing_slash(tmp_path: Path):
    root = _seed(tmp_path)
    (root / "sys").mkdir()
    (root / "sysdep.txt").write_text("", encoding="utf-8")
    rows = scan(str(root), "s", C_HEADERS, display_prefix="<")
    assert [r.display_text for r in rows] == ["<sys/"]
    assert rows[0].is_directory
    assert rows[0].name == "sys"

def test_fragment_is_case_sensitive_prefix(tmp_path: Path):
    root = _seed(tmp_path)
    assert [r.display_text for r in scan(str(root), "a", C_HEADERS)] == ["a.h"]
    assert scan(str(root), "A", C_HEADERS) == []

def test_missing_directory_raises_scan_error(tmp_path: Path):
    missing = tmp_path / "nope"
    with pytest.raises(ScanError) as ei:
        scan(str(missing), "", C_HEADERS)
    assert ei.value.directory == str(missing)
