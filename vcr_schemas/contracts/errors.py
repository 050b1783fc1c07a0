from __future__ import annotations


class SchemaError(ValueError):
    """Base class for contract violations raised while encoding/decoding events."""


class FieldError(SchemaError):
    """A single field failed its type/shape check.

    Raised by the `_require_*` helpers; the codec rewraps it as
    `MalformedPayload` or `MalformedVariant` depending on where it happened.
    """


class MalformedPayload(SchemaError):
    """The outer envelope could not be parsed."""


class MalformedVariant(SchemaError):
    """The discriminant is known but the nested payload does not match its shape."""


class UnrecognizedTier(SchemaError):
    """Subscription tier outside the known set; never defaulted."""

    def __init__(self, tier: object):
        super().__init__(f"unrecognized tier value '{tier}'")
        self.tier = tier


class UnsupportedNotificationType(SchemaError):
    """The upstream notification has no counterpart in the platform event family."""

    def __init__(self, subscription_type: str):
        super().__init__(f"unsupported EventSub type: {subscription_type}")
        self.subscription_type = subscription_type


class NoColor(ValueError):
    """Text does not start with a recognized color name."""
