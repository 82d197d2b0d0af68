"""HTTP surface tests for the media relay."""

from __future__ import annotations

from fastapi.testclient import TestClient

from media_relay.core.constants import AVAILABLE_ENDPOINTS
from media_relay.storage import MemoryObjectStorage

ORIGIN = "https://powderfeed.test"


def _assert_cors(response) -> None:
    assert response.headers["access-control-allow-origin"] == ORIGIN
    assert "POST" in response.headers["access-control-allow-methods"]


class TestUploadRoute:
    """POST /upload"""

    def test_upload_then_fetch(self, client: TestClient) -> None:
        """Stored bytes come back with the same content type."""
        body = b"\xff\xd8\xff\xe0fake-jpeg"
        response = client.post(
            "/upload?key=uploads/test.jpg",
            content=body,
            headers={"Content-Type": "image/jpeg"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "File uploaded successfully",
            "key": "uploads/test.jpg",
        }
        _assert_cors(response)

        fetched = client.get("/file?key=uploads/test.jpg")
        assert fetched.status_code == 200
        assert fetched.content == body
        assert fetched.headers["content-type"] == "image/jpeg"
        assert fetched.headers["cache-control"] == "public, max-age=31536000"
        assert fetched.headers["etag"]
        _assert_cors(fetched)

    def test_traversal_rejected(self, client: TestClient, storage: MemoryObjectStorage) -> None:
        response = client.post(
            "/upload?key=../etc/passwd",
            content=b"root:x:0:0",
            headers={"Content-Type": "image/jpeg"},
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid key format"}
        assert len(storage) == 0
        _assert_cors(response)

    def test_missing_key(self, client: TestClient) -> None:
        response = client.post("/upload", content=b"x", headers={"Content-Type": "image/png"})
        assert response.status_code == 400
        assert response.json()["error"] == "Missing key parameter"

    def test_unsupported_type(self, client: TestClient) -> None:
        response = client.post(
            "/upload?key=uploads/archive.zip",
            content=b"PK",
            headers={"Content-Type": "application/zip"},
        )

        assert response.status_code == 400
        payload = response.json()
        assert payload["success"] is False
        assert payload["error"].startswith("Invalid file type")
        _assert_cors(response)

    def test_too_large(self, client: TestClient, storage: MemoryObjectStorage) -> None:
        response = client.post(
            "/upload?key=uploads/big.mp4",
            content=b"0" * 1025,
            headers={"Content-Type": "video/mp4"},
        )

        assert response.status_code == 413
        assert response.json()["success"] is False
        assert "File too large" in response.json()["error"]
        assert len(storage) == 0
        _assert_cors(response)


class TestDeleteRoute:
    """DELETE /delete"""

    def test_delete(self, client: TestClient, storage: MemoryObjectStorage) -> None:
        client.post(
            "/upload?key=uploads/a.png",
            content=b"png",
            headers={"Content-Type": "image/png"},
        )

        response = client.delete("/delete?key=uploads/a.png")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert "uploads/a.png" not in storage
        assert client.get("/file?key=uploads/a.png").status_code == 404

    def test_invalid_key(self, client: TestClient) -> None:
        response = client.delete("/delete?key=avatars/a.png")
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid key format"}


class TestFileRoute:
    """GET /file"""

    def test_missing_object(self, client: TestClient) -> None:
        response = client.get("/file?key=uploads/nope.jpg")
        assert response.status_code == 404
        _assert_cors(response)

    def test_missing_key(self, client: TestClient) -> None:
        assert client.get("/file").status_code == 400


class TestMiscRoutes:
    """/health, pre-flight, fallback"""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        payload = response.json()
        assert payload["status"] == "healthy"
        assert payload["timestamp"]
        _assert_cors(response)

    def test_preflight(self, client: TestClient) -> None:
        """OPTIONS answers any path with CORS headers and no body."""
        response = client.options("/upload?key=uploads/a.jpg")
        assert response.status_code == 200
        assert response.content == b""
        _assert_cors(response)
        assert response.headers["access-control-max-age"] == "86400"

    def test_unknown_route(self, client: TestClient) -> None:
        response = client.get("/nope")
        assert response.status_code == 404
        payload = response.json()
        assert payload["success"] is False
        assert payload["availableEndpoints"] == list(AVAILABLE_ENDPOINTS)
        _assert_cors(response)

    def test_wrong_method_falls_back_to_route_listing(self, client: TestClient) -> None:
        response = client.get("/upload?key=uploads/a.jpg")
        assert response.status_code == 404
        assert "availableEndpoints" in response.json()

    def test_metrics_count_uploads(self, client: TestClient) -> None:
        client.post(
            "/upload?key=uploads/m.png",
            content=b"png",
            headers={"Content-Type": "image/png"},
        )

        response = client.get("/metrics/status")

        assert response.status_code == 200
        assert 'media_relay_requests_total{operation="upload",outcome="success"}' in response.text
