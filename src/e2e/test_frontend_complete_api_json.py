from pathlib import Path
import pytest
import frontend
from frontend.web import app as flask_app

def _seed(tmp: Path) -> tuple[str, str]:
    user = tmp / "proj"; user.mkdir()
    (user / "widget.h").write_text("", encoding="utf-8")
    system = tmp / "sys"; system.mkdir()
    (system / "vector").write_text("", encoding="utf-8")
    (system / "bits").mkdir()
    return str(user), str(system)

@pytest.fixture
def client(tmp_path: Path):
    user, system = _seed(tmp_path)
    frontend.initialize("c++", user_paths=[user], system_paths=[system])
    return flask_app.test_client()

@pytest.mark.e2e
def test_complete_api_json(client):
    rv = client.get("/api/complete", query_string={"line": "#include <"})
    assert rv.status_code == 200
    data = rv.get_json()
    assert [r["display_text"] for r in data] == ["<bits/", "<vector"]
    for key in ("display_text", "source_directory", "is_directory", "file_location"):
        assert key in data[0]
    assert data[0]["is_directory"] is True

@pytest.mark.e2e
def test_complete_api_empty_and_non_include(client):
    assert client.get("/api/complete").get_json() == []
    assert client.get("/api/complete", query_string={"line": "int main()"}).get_json() == []

@pytest.mark.e2e
def test_complete_api_mode_override(client):
    rv = client.get("/api/complete", query_string={"line": "#include <v", "mode": "c"})
    assert rv.get_json() == []
    rv = client.get("/api/complete", query_string={"line": "#include <v", "mode": "cobol"})
    assert rv.status_code == 400
    assert "cobol" in rv.get_json()["error"]

@pytest.mark.e2e
def test_post_completion_api(client):
    rv = client.get("/api/post_completion", query_string={"candidate": '"widget.h', "after": ""})
    assert rv.get_json() == {"insert": '"', "move_to_eol": False, "requery": False}
