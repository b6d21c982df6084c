"""Tests for redaction logic."""

from eaglebirth._internal.dispatch.redaction import REDACTED_VALUE, redact_fields


class TestRedactFields:
    """Tests for redact_fields function."""

    def test_redacts_password(self):
        """Should redact password field."""
        fields = {"password": "secret123", "username": "test"}
        result = redact_fields(fields)
        assert result["password"] == REDACTED_VALUE
        assert result["username"] == "test"

    def test_redacts_multiple_sensitive_keys(self):
        """Should redact every credential-like field the API accepts."""
        fields = {
            "directory_password": "d",
            "file_password": "f",
            "token": "t",
            "refresh": "r",
            "refresh_token": "rt",
            "code": "123456",
            "code_verifier": "v",
            "code_id": "visible",
        }
        result = redact_fields(fields)
        for key in (
            "directory_password",
            "file_password",
            "token",
            "refresh",
            "refresh_token",
            "code",
            "code_verifier",
        ):
            assert result[key] == REDACTED_VALUE
        assert result["code_id"] == "visible"

    def test_case_insensitive_keys(self):
        """Should match sensitive keys regardless of case."""
        result = redact_fields({"Password": "x", "TOKEN": "y"})
        assert result == {"Password": REDACTED_VALUE, "TOKEN": REDACTED_VALUE}

    def test_redacts_nested_and_lists(self):
        """Should redact inside nested dicts and lists."""
        fields = {
            "auth": {"token": "nested", "user_id": 123},
            "users": [{"name": "Alice", "password": "p1"}],
        }
        result = redact_fields(fields)
        assert result["auth"]["token"] == REDACTED_VALUE
        assert result["auth"]["user_id"] == 123
        assert result["users"][0] == {"name": "Alice", "password": REDACTED_VALUE}

    def test_replaces_bytes_with_size(self):
        """Binary values should never be echoed."""
        result = redact_fields({"blob": b"\x00" * 10})
        assert result["blob"] == "<10 bytes>"

    def test_does_not_mutate_original(self):
        """Should not mutate the original fields."""
        fields = {"password": "secret", "nested": {"token": "t"}}
        redact_fields(fields)
        assert fields == {"password": "secret", "nested": {"token": "t"}}

    def test_non_string_keys(self):
        """Should handle non-string keys gracefully."""
        result = redact_fields({1: "one", "password": "x"})
        assert result[1] == "one"
        assert result["password"] == REDACTED_VALUE
