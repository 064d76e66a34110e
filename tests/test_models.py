"""Tests for shared models."""

import json
from datetime import UTC, datetime

from lesson_relay.models import DERIVED_REQUEST_ID, DERIVED_TAB_ID, Feature, Product, Request, copy_request


class TestRequest:
    """Tests for the Request model."""

    def test_accepts_camel_case_capture(self):
        """Should accept the capture layer's camelCase field names."""
        request = Request.model_validate({
            "url": "https://example.test/api",
            "method": "POST",
            "headers": {"Content-Type": "text/xml"},
            "body": "<a/>",
            "timestamp": "2024-01-01T00:00:00Z",
            "requestId": "42",
            "tabId": 7,
        })
        assert request.request_id == "42"
        assert request.tab_id == 7
        assert request.timestamp == datetime(2024, 1, 1, tzinfo=UTC)

    def test_accepts_snake_case(self):
        """Should accept snake_case field names."""
        request = Request(url="u", method="GET", request_id="1", tab_id=3)
        assert request.request_id == "1"
        assert request.tab_id == 3

    def test_derived_defaults(self):
        """Requests built locally use the derived ids and no body."""
        request = Request(url="u", method="GET")
        assert request.request_id == DERIVED_REQUEST_ID
        assert request.tab_id == DERIVED_TAB_ID
        assert request.body is None
        assert request.headers == {}

    def test_to_wire_uses_aliases(self):
        """Wire form should use camelCase keys and keep header case."""
        request = Request(url="u", method="POST", headers={"X-Thing": "1"}, body="b")
        wire = json.loads(request.to_wire())
        assert wire["requestId"] == DERIVED_REQUEST_ID
        assert wire["tabId"] == DERIVED_TAB_ID
        assert wire["headers"] == {"X-Thing": "1"}
        assert wire["body"] == "b"


class TestCopyRequest:
    """Tests for copy_request."""

    def test_copy_is_deep(self):
        """Editing a copy's headers should not affect the original."""
        original = Request(url="u", method="POST", headers={"A": "1"}, body="x")
        copy = copy_request(original)
        copy.headers["A"] = "2"
        copy.body = "y"
        assert original.headers == {"A": "1"}
        assert original.body == "x"

    def test_applies_changes(self):
        """Should apply keyword changes to the copy only."""
        original = Request(url="u", method="POST", body="x")
        copy = copy_request(original, body="y")
        assert copy.body == "y"
        assert original.body == "x"


class TestEnums:
    """Tests for Feature and Product."""

    def test_values_are_strings(self):
        """Enums should compare equal to their string values."""
        assert Feature.ADD_TIME == "add_time"
        assert Product.FLUENCY_BUILDER == "fluency_builder"
