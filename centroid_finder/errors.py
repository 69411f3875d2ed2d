"""
Exception types raised by the centroid finding pipeline.
"""


class InvalidInput(Exception):
    """Base class for malformed frames and masks."""


class NullReferenceError(InvalidInput, TypeError):
    """A required structure (frame, mask or one of its rows) is missing."""


class InvalidArgumentError(InvalidInput, ValueError):
    """A structure is present but malformed (empty, jagged, non-binary)."""


class DecodeFailure(RuntimeError):
    """The video source could not be opened or a frame could not be decoded."""


class ConfigError(ValueError):
    """An invalid command line or configuration value."""
