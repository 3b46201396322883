"""Exceptions raised while converting between state and API bodies."""


class ConversionError(Exception):
    """Base exception for conversion errors."""

    pass


class DecodingError(ConversionError):
    """Raised when a stored string cannot be decoded into a mapping."""

    pass


class EncodingError(ConversionError):
    """Raised when a mapping cannot be serialized to a JSON string."""

    pass
