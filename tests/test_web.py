"""Tests for the web API."""

from io import BytesIO

import pytest
from PIL import Image

from exiframe.config import ConfigManager
from exiframe.web import create_app


@pytest.fixture
def client():
    app = create_app(config=ConfigManager.defaults())
    app.config["TESTING"] = True
    return app.test_client()


def _upload(data, **fields):
    form = {"photo": (BytesIO(data), "photo.jpg")}
    form.update(fields)
    return form


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_exif(client, camera_jpeg):
    response = client.post(
        "/api/exif",
        data=_upload(camera_jpeg),
        content_type="multipart/form-data",
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["exif"]["camera_model"] == "X100V"
    assert body["exif"]["exposure_time"] == "1/200"
    assert body["overlay"]["focal_length"] == "23mm"
    assert body["lines"][2] == "23mm f/2.8 1/200s ISO200"


def test_exif_35mm_flag(client, camera_jpeg):
    response = client.post(
        "/api/exif",
        data=_upload(camera_jpeg, focal_length_35mm="true"),
        content_type="multipart/form-data",
    )
    assert response.get_json()["overlay"]["focal_length"] == "35mm"


def test_exif_undecodable_upload(client):
    response = client.post(
        "/api/exif",
        data=_upload(b"not an image"),
        content_type="multipart/form-data",
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["exif"] is None
    assert body["overlay"]["camera_maker"] == "Unknown Maker"


def test_missing_photo(client):
    for endpoint in ("/api/exif", "/api/frame"):
        response = client.post(endpoint, data={}, content_type="multipart/form-data")
        assert response.status_code == 400
        assert "photo" in response.get_json()["error"]


@pytest.mark.parametrize("image_format, mimetype", [
    ("PNG", "image/png"),
    ("jpeg", "image/jpeg"),
])
def test_frame(client, camera_jpeg, image_format, mimetype):
    response = client.post(
        "/api/frame",
        data=_upload(camera_jpeg, format=image_format),
        content_type="multipart/form-data",
    )

    assert response.status_code == 200
    assert response.mimetype == mimetype
    image = Image.open(BytesIO(response.data))
    assert image.width > 32


def test_frame_unsupported_format(client, camera_jpeg):
    response = client.post(
        "/api/frame",
        data=_upload(camera_jpeg, format="BMP"),
        content_type="multipart/form-data",
    )
    assert response.status_code == 400
