"""Tests for header redaction."""

from lesson_relay._internal.redaction import REDACTED_VALUE, redact_headers, redact_request
from lesson_relay.models import Request


class TestRedactHeaders:
    """Tests for redact_headers."""

    def test_redacts_sensitive_headers(self):
        """Should redact authorization and cookie headers."""
        result = redact_headers({"Authorization": "Bearer x", "Cookie": "s=1", "Accept": "*/*"})
        assert result["Authorization"] == REDACTED_VALUE
        assert result["Cookie"] == REDACTED_VALUE
        assert result["Accept"] == "*/*"

    def test_case_insensitive_and_case_preserving(self):
        """Should match names case-insensitively and keep their case."""
        result = redact_headers({"x-CSRF-token": "abc"})
        assert result == {"x-CSRF-token": REDACTED_VALUE}

    def test_does_not_mutate_original(self):
        """Should not mutate the original mapping."""
        headers = {"Cookie": "s=1"}
        redact_headers(headers)
        assert headers == {"Cookie": "s=1"}


class TestRedactRequest:
    """Tests for redact_request."""

    def test_summary_fields(self):
        """Should include method, url, redacted headers and body."""
        request = Request(url="u", method="POST", headers={"Cookie": "s"}, body="<a/>")
        summary = redact_request(request)
        assert summary == {
            "method": "POST",
            "url": "u",
            "headers": {"Cookie": REDACTED_VALUE},
            "body": "<a/>",
        }
        assert request.headers == {"Cookie": "s"}

    def test_truncates_long_body(self):
        """Should truncate bodies over the limit."""
        request = Request(url="u", method="POST", body="x" * 50)
        summary = redact_request(request, body_limit=10)
        assert summary["body"] == "xxxxxxx..."
        assert len(summary["body"]) == 10

    def test_no_body(self):
        """Should keep a missing body as None."""
        assert redact_request(Request(url="u", method="GET"))["body"] is None
