"""
Exceptions raised by imgixmarkup.
"""

from __future__ import annotations


class ImgixMarkupError(Exception):
    """Base class for all imgixmarkup errors."""


class ConfigurationError(ImgixMarkupError, ValueError):
    """The imgix settings are missing or invalid."""


class BreakpointNotFoundError(ImgixMarkupError, LookupError):
    """No image is bound to the requested breakpoint."""

    def __init__(self, size: str):
        super().__init__(f"No image is bound to breakpoint {size!r}")
        self.size = size


class MalformedBreakpointError(ImgixMarkupError, LookupError):
    """A breakpoint descriptor could not be split into media and sizes."""

    def __init__(self, size: str, reason: str):
        super().__init__(f"Malformed breakpoint {size!r}: {reason}")
        self.size = size
        self.reason = reason


__all__ = [
    "ImgixMarkupError",
    "ConfigurationError",
    "BreakpointNotFoundError",
    "MalformedBreakpointError",
]
