"""Tests for public exceptions."""

import pytest

from lesson_relay.exceptions import (
    DispatchError,
    MalformedPayloadError,
    ProductDetectionError,
    RelayConfigError,
    RelayError,
    RelayValidationError,
    TemplateMissingError,
)


class TestRelayError:
    """Tests for base RelayError."""

    def test_is_exception(self):
        """RelayError should be an Exception."""
        assert issubclass(RelayError, Exception)

    def test_can_be_raised(self):
        """RelayError should be raisable with message."""
        with pytest.raises(RelayError) as exc_info:
            raise RelayError("test error")
        assert str(exc_info.value) == "test error"


class TestTemplateMissingError:
    """Tests for TemplateMissingError."""

    def test_inherits_from_relay_error(self):
        """TemplateMissingError should inherit from RelayError."""
        assert issubclass(TemplateMissingError, RelayError)

    def test_with_message_only(self):
        """Should create error with message only."""
        error = TemplateMissingError("Could not add time")
        assert str(error) == "Could not add time"
        assert error.key is None

    def test_with_key(self):
        """Should store the store key."""
        error = TemplateMissingError("Could not add time", key="time")
        assert error.key == "time"


class TestDispatchError:
    """Tests for DispatchError."""

    def test_inherits_from_relay_error(self):
        """DispatchError should inherit from RelayError."""
        assert issubclass(DispatchError, RelayError)

    def test_stores_url(self):
        """Should store the target url."""
        error = DispatchError("failed", url="http://x")
        assert str(error) == "failed"
        assert error.url == "http://x"

    def test_defaults(self):
        """url defaults to None and no status is carried."""
        error = DispatchError("failed")
        assert error.url is None
        assert not hasattr(error, "status_code")


class TestHierarchy:
    """Tests for the remaining error classes."""

    def test_malformed_payload_is_validation_error(self):
        """MalformedPayloadError should be a RelayValidationError."""
        assert issubclass(MalformedPayloadError, RelayValidationError)
        assert issubclass(RelayValidationError, RelayError)

    def test_product_detection_is_config_error(self):
        """ProductDetectionError should be a RelayConfigError."""
        assert issubclass(ProductDetectionError, RelayConfigError)
        assert issubclass(RelayConfigError, RelayError)

    def test_can_be_caught_as_relay_error(self):
        """Should be catchable as RelayError."""
        with pytest.raises(RelayError):
            raise ProductDetectionError("unknown product")
