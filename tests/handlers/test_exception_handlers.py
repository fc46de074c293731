from fastapi import APIRouter
from fastapi.testclient import TestClient

from photo_gallery.core.models.errors import NotFoundError, PhotoUploadFailedError
from photo_gallery.main import create_app

boom_router = APIRouter()


@boom_router.get("/api/boom/not-found")
def raise_not_found() -> None:
    raise NotFoundError(message="Thing not found")


@boom_router.get("/api/boom/storage")
def raise_storage() -> None:
    raise PhotoUploadFailedError(message="Storage exploded")


@boom_router.get("/api/boom/crash")
def raise_crash() -> None:
    raise RuntimeError("kaboom")


@boom_router.get("/api/boom/typed")
def typed(count: int) -> dict:
    return {"count": count}


def build_client(app_settings, fake_storage) -> TestClient:
    app = create_app(app_settings, fake_storage)
    # ahead of the catch-all static mount
    app.router.routes[0:0] = boom_router.routes
    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlers:
    def test_domain_error_uses_its_status(self, app_settings, fake_storage) -> None:
        with build_client(app_settings, fake_storage) as client:
            resp = client.get("/api/boom/not-found")

        assert resp.status_code == 404
        assert resp.json()["error"] == "Thing not found"
        assert resp.json()["code"] == "NOT_FOUND"

    def test_storage_error_is_500(self, app_settings, fake_storage) -> None:
        with build_client(app_settings, fake_storage) as client:
            resp = client.get("/api/boom/storage")

        assert resp.status_code == 500
        assert resp.json()["code"] == "PHOTO_UPLOAD_FAILED"

    def test_unexpected_error_is_500(self, app_settings, fake_storage) -> None:
        with build_client(app_settings, fake_storage) as client:
            resp = client.get("/api/boom/crash")

        assert resp.status_code == 500
        assert resp.json()["code"] == "INTERNAL_ERROR"

    def test_request_validation_is_400(self, app_settings, fake_storage) -> None:
        with build_client(app_settings, fake_storage) as client:
            resp = client.get("/api/boom/typed", params={"count": "many"})

        body = resp.json()
        assert resp.status_code == 400
        assert body["code"] == "VALIDATION_FAILED"
        assert body["details"]["errors"][0]["field"] == "query.count"

    def test_method_not_allowed_is_json(self, client) -> None:
        resp = client.put("/api/photos/a.jpg")

        assert resp.status_code == 405
        assert "error" in resp.json()
