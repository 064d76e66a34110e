"""Public exceptions for lesson-relay."""


class RelayError(Exception):
    """Base exception for all lesson-relay errors."""


class RelayConfigError(RelayError):
    """Configuration error (invalid settings, unknown product)."""


class RelayValidationError(RelayError):
    """Validation error for caller input or captured payloads."""


class TemplateMissingError(RelayError):
    """A required captured request is absent or has no body."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class MalformedPayloadError(RelayValidationError):
    """A captured body or fetched document could not be parsed."""


class DispatchError(RelayError):
    """An outbound request failed at the transport level."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class ProductDetectionError(RelayConfigError):
    """The product detector did not report a supported product."""
