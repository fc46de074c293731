from fastapi.testclient import TestClient

from photo_gallery.main import create_app


class TestStaticFrontend:
    def test_root_serves_index(self, client) -> None:
        resp = client.get("/")

        assert resp.status_code == 200
        assert "gallery" in resp.text
        assert resp.headers["content-type"].startswith("text/html")

    def test_asset_served(self, client) -> None:
        resp = client.get("/app.js")

        assert resp.status_code == 200
        assert "console.log" in resp.text

    def test_unknown_path_falls_back_to_index(self, client) -> None:
        resp = client.get("/albums/summer")

        assert resp.status_code == 200
        assert "gallery" in resp.text

    def test_unknown_api_route_is_json_404(self, client) -> None:
        resp = client.get("/api/nope")

        assert resp.status_code == 404
        assert "error" in resp.json()

    def test_api_routes_take_precedence(self, client) -> None:
        assert client.get("/api/health").json() == {"status": "ok"}

    def test_missing_static_dir_is_404(self, app_settings, fake_storage, tmp_path) -> None:
        settings = app_settings.model_copy(update={"static_dir": str(tmp_path / "absent")})

        with TestClient(create_app(settings, fake_storage)) as client:
            assert client.get("/").status_code == 404
            assert client.get("/api/health").status_code == 200
