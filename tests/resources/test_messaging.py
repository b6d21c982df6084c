"""Tests for email, SMS, WhatsApp and OTP resources."""

import json

import httpx
import pytest
import respx

from eaglebirth.exceptions import ValidationError

SANDBOX_URL = "https://sandbox.eaglebirth.com/api"


def mock_post(path: str, body=None):
    return respx.post(f"{SANDBOX_URL}{path}").mock(
        return_value=httpx.Response(200, json=body if body is not None else {"status": "ok"})
    )


def sent_json(route) -> dict:
    return json.loads(route.calls.last.request.content)


class TestEmailResource:
    @respx.mock
    def test_send_minimal(self, client):
        """Should send only the required fields."""
        route = mock_post("/app/messaging/email/")
        result = client.email.send(email="user@example.com", subject="Hi", message="Hello")

        assert result == {"status": "ok"}
        assert sent_json(route) == {
            "email": "user@example.com",
            "subject": "Hi",
            "message": "Hello",
        }

    @respx.mock
    def test_send_with_optionals(self, client):
        """Optional fields should be renamed to the wire names."""
        route = mock_post("/app/messaging/email/")
        client.email.send(
            email="user@example.com",
            subject="Hi",
            message="Hello",
            reply_to="support@example.com",
            header="Welcome",
            salutation="Dear user",
        )
        body = sent_json(route)
        assert body["reply_to"] == "support@example.com"
        assert body["header"] == "Welcome"
        assert body["salutation"] == "Dear user"


class TestSMSResource:
    @respx.mock
    def test_send(self, client):
        route = mock_post("/app/messaging/sms/")
        client.sms.send(phone_number="+1234567890", message="Code 1", sending_method="email_to_sms")
        assert sent_json(route) == {
            "phone_number": "+1234567890",
            "message": "Code 1",
            "sending_method": "email_to_sms",
        }

    @respx.mock
    def test_get_prices_without_number(self, client):
        """Should send an empty body when no number is given."""
        route = mock_post("/app/messaging/sms/get_prices_for_sms/", {"prices": []})
        assert client.sms.get_prices() == {"prices": []}
        assert sent_json(route) == {}

    @respx.mock
    def test_get_prices_for_number(self, client):
        route = mock_post("/app/messaging/sms/get_prices_for_sms/")
        client.sms.get_prices("+1234567890")
        assert sent_json(route) == {"phone_number": "+1234567890"}

    def test_invalid_sending_method(self, client):
        with pytest.raises(ValidationError):
            client.sms.send(phone_number="+1", message="m", sending_method="fax")


class TestWhatsAppResource:
    @respx.mock
    def test_send_default_template(self, client):
        """Should default the template to normal_message."""
        route = mock_post("/app/messaging/whatsapp/")
        client.whatsapp.send(phone_number="+1", message="Hello")
        assert sent_json(route) == {
            "phone_number": "+1",
            "message": "Hello",
            "template": "normal_message",
        }

    @respx.mock
    def test_send_custom_template(self, client):
        route = mock_post("/app/messaging/whatsapp/")
        client.whatsapp.send(phone_number="+1", message="Hello", template="promo")
        assert sent_json(route)["template"] == "promo"


class TestOTPResource:
    @respx.mock
    def test_send_with_defaults(self, client):
        route = mock_post("/app/code_validation/", {"code_id": "c-1"})
        result = client.otp.send(validation_type="email", email="user@example.com")

        assert result == {"code_id": "c-1"}
        assert sent_json(route) == {
            "validation_type": "email",
            "email": "user@example.com",
            "code_length": 6,
            "timeout": 180,
            "trials": 3,
        }

    @respx.mock
    def test_send_sms_custom(self, client):
        route = mock_post("/app/code_validation/")
        client.otp.send(
            validation_type="sms",
            phone_number="+1",
            provider="twilio",
            code_length=4,
            timeout=60,
            trials=5,
        )
        body = sent_json(route)
        assert body["phone_number"] == "+1"
        assert body["provider"] == "twilio"
        assert (body["code_length"], body["timeout"], body["trials"]) == (4, 60, 5)
        assert "email" not in body

    @respx.mock
    def test_validate(self, client):
        route = mock_post("/app/code_validation/validate_code_sent/")
        client.otp.validate(code_id="c-1", code="123456")
        assert sent_json(route) == {"code_id": "c-1", "code": "123456"}

    @respx.mock
    def test_check_validated(self, client):
        route = mock_post("/app/code_validation/check_validated_code/", {"validated": True})
        assert client.otp.check_validated("c-1") == {"validated": True}
        assert sent_json(route) == {"code_id": "c-1"}

    def test_invalid_validation_type(self, client):
        with pytest.raises(ValidationError):
            client.otp.send(validation_type="carrier_pigeon", email="a@b.c")
