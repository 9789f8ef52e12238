import pytest

from wise_webapp.server import create_app


@pytest.fixture
def static_root(tmp_path):
    (tmp_path / "index.html").write_text("<h1>Wise</h1>", encoding="utf-8")
    (tmp_path / "styles.css").write_bytes(b"body { color: #163300; }\n")
    (tmp_path / "blob.xyz").write_bytes(b"\x00\x01\x02")
    (tmp_path / "Logo.PNG").write_bytes(b"\x89PNG\r\n")
    (tmp_path / "my file.txt").write_text("spaced", encoding="utf-8")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "app.js").write_text("console.log(1);", encoding="utf-8")
    return tmp_path


@pytest.fixture
def client(static_root):
    app = create_app(str(static_root))
    app.config["TESTING"] = True
    return app.test_client()
