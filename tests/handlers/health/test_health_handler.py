class TestHealthHandler:
    def test_health_ok(self, client) -> None:
        resp = client.get("/api/health")

        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_health_does_not_touch_storage(self, client, fake_storage) -> None:
        fake_storage.failing.update({"list_objects", "stat_photo", "open_photo"})

        assert client.get("/api/health").status_code == 200
