"""Runtime settings for lesson-relay."""

import os

from pydantic import BaseModel, Field

from lesson_relay._version import __version__
from lesson_relay.models import Feature, Product

DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_USER_AGENT = f"lesson-relay/{__version__}"


class StoreKeys(BaseModel):
    """Session store keys under which the capture layer saves templates."""

    foundations_time: str = "foundations:time-request"
    foundations_course: str = "foundations:course-request"
    fluency_builder_time: str = "fluency-builder:time-request"
    fluency_builder_validation: str = "fluency-builder:validation-request"

    @classmethod
    def from_env(cls) -> "StoreKeys":
        """Create store keys, applying environment overrides.

        Optional environment variables:
            LESSON_RELAY_FOUNDATIONS_TIME_KEY
            LESSON_RELAY_FOUNDATIONS_COURSE_KEY
            LESSON_RELAY_FLUENCY_BUILDER_TIME_KEY
            LESSON_RELAY_FLUENCY_BUILDER_VALIDATION_KEY
        """
        overrides = {}
        for field in cls.model_fields:
            value = os.environ.get(f"LESSON_RELAY_{field.upper()}_KEY")
            if value:
                overrides[field] = value
        return cls(**overrides)

    def key_for(self, product: Product, feature: Feature) -> str:
        """Return the store key holding the template for a product feature."""
        if product == Product.FOUNDATIONS:
            if feature == Feature.ADD_TIME:
                return self.foundations_time
            return self.foundations_course
        if feature == Feature.ADD_TIME:
            return self.fluency_builder_time
        return self.fluency_builder_validation


class RelaySettings(BaseModel):
    """Settings shared by every service variant.

    Fields:
        timeout_ms: Timeout for direct outbound requests in milliseconds
        debug: Enable debug tracing to stderr
        user_agent: User-Agent used when a template does not carry one
        store_keys: Session store keys for each template
        skip_repeat_validation: Do not resend an identical Fluency Builder
            validation request from the same service instance
    """

    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    debug: bool = False
    user_agent: str = DEFAULT_USER_AGENT
    store_keys: StoreKeys = Field(default_factory=StoreKeys)
    skip_repeat_validation: bool = False

    @classmethod
    def from_env(cls) -> "RelaySettings":
        """Create settings from environment variables.

        Optional environment variables:
            LESSON_RELAY_TIMEOUT_MS: Direct request timeout in milliseconds.
            LESSON_RELAY_DEBUG: Set to "1" to enable debug tracing.
            LESSON_RELAY_USER_AGENT: Fallback User-Agent header.
            LESSON_RELAY_SKIP_REPEAT_VALIDATION: Set to "1" to enable the
                Fluency Builder repeat-validation guard.

        Raises:
            ValueError: If LESSON_RELAY_TIMEOUT_MS is not an integer.
        """
        timeout_ms = int(os.environ.get("LESSON_RELAY_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        debug = os.environ.get("LESSON_RELAY_DEBUG", "") == "1"
        skip_repeat = os.environ.get("LESSON_RELAY_SKIP_REPEAT_VALIDATION", "") == "1"
        user_agent = os.environ.get("LESSON_RELAY_USER_AGENT") or DEFAULT_USER_AGENT

        return cls(
            timeout_ms=timeout_ms,
            debug=debug,
            user_agent=user_agent,
            store_keys=StoreKeys.from_env(),
            skip_repeat_validation=skip_repeat,
        )
