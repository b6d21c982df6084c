"""Tests for QR code and vision resources."""

import json

import httpx
import pytest
import respx

from eaglebirth.exceptions import ValidationError

SANDBOX_URL = "https://sandbox.eaglebirth.com/api"


class TestQRCodeResource:
    @respx.mock
    def test_generate_text_only_is_json(self, client):
        """Without an image the request should be plain JSON."""
        route = respx.post(f"{SANDBOX_URL}/app/qr_code_generator/").mock(
            return_value=httpx.Response(200, json={"qr": "data"})
        )
        result = client.qr.generate(
            text="https://eaglebirth.com", color="#000000", background_color="#FFFFFF"
        )

        assert result == {"qr": "data"}
        assert json.loads(route.calls.last.request.content) == {
            "text": "https://eaglebirth.com",
            "color": "#000000",
            "background_color": "#FFFFFF",
        }

    @respx.mock
    def test_generate_with_image_bytes(self, client, recorder):
        """An image without a type should be uploaded as an object."""
        respx.post(f"{SANDBOX_URL}/app/qr_code_generator/").mock(side_effect=recorder)
        client.qr.generate(text="hello", image=b"LOGO", qr_type="rounded")

        body = recorder.last_body
        assert recorder.last_request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="image"' in body
        assert b"LOGO" in body
        assert b'name="image_type"\r\n\r\nobject' in body
        assert b'name="qr_type"\r\n\r\nrounded' in body

    @respx.mock
    def test_generate_with_image_link(self, client):
        """A link image should be sent as a JSON field."""
        route = respx.post(f"{SANDBOX_URL}/app/qr_code_generator/").mock(
            return_value=httpx.Response(200, json={})
        )
        client.qr.generate(text="hello", image="https://cdn/logo.png", image_type="link")
        assert json.loads(route.calls.last.request.content) == {
            "text": "hello",
            "image_type": "link",
            "image": "https://cdn/logo.png",
        }

    def test_link_requires_string(self, client):
        with pytest.raises(ValidationError):
            client.qr.generate(text="hello", image=b"bytes", image_type="link")


class TestVisionResource:
    @respx.mock
    def test_extract_face_details_from_file(self, client, recorder, tmp_path):
        """A path should be uploaded as the image part."""
        photo = tmp_path / "face.jpg"
        photo.write_bytes(b"JPEGDATA")
        respx.post(f"{SANDBOX_URL}/app/image_processing/get_details_from_an_image/").mock(
            side_effect=recorder
        )

        assert client.vision.extract_face_details(image=str(photo)) == {"status": "ok"}
        body = recorder.last_body
        assert b'filename="face.jpg"' in body
        assert b"JPEGDATA" in body
        assert b'name="image_type"\r\n\r\nobject' in body

    @respx.mock
    def test_extract_text_from_link(self, client):
        route = respx.post(f"{SANDBOX_URL}/app/image_processing/get_text_from_image/").mock(
            return_value=httpx.Response(200, json={"text": "HELLO"})
        )
        result = client.vision.extract_text(image="https://cdn/sign.png", image_type="link")

        assert result == {"text": "HELLO"}
        assert json.loads(route.calls.last.request.content) == {
            "image_type": "link",
            "image": "https://cdn/sign.png",
        }

    @respx.mock
    def test_compare_faces_mixed(self, client, recorder):
        """One uploaded image and one link image in the same request."""
        respx.post(
            f"{SANDBOX_URL}/app/image_processing/compare_two_faces_in_two_images/"
        ).mock(side_effect=recorder)

        client.vision.compare_faces(
            image1=b"FIRST", image2="https://cdn/second.png", image2_type="link"
        )

        body = recorder.last_body
        assert b'name="image1"' in body
        assert b"FIRST" in body
        assert b'name="image1_type"\r\n\r\nobject' in body
        assert b'name="image2_type"\r\n\r\nlink' in body
        assert b'name="image2"\r\n\r\nhttps://cdn/second.png' in body

    @respx.mock(assert_all_called=False)
    def test_missing_image_file(self, client, tmp_path, respx_mock):
        """A missing image path should fail before any request."""
        route = respx_mock.post(f"{SANDBOX_URL}/app/image_processing/get_text_from_image/").mock(
            return_value=httpx.Response(200)
        )
        with pytest.raises(ValidationError, match="File not found"):
            client.vision.extract_text(image=str(tmp_path / "missing.png"))
        assert not route.called

    def test_invalid_image_type(self, client):
        with pytest.raises(ValidationError):
            client.vision.extract_text(image=b"x", image_type="url")

    def test_link_requires_string(self, client):
        with pytest.raises(ValidationError):
            client.vision.compare_faces(image1=b"a", image2=b"b", image1_type="link")
