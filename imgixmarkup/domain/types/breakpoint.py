"""
Breakpoint descriptors such as ``(min-width: 768px) 600px``.

A descriptor starts with zero or more parenthesized media clauses followed by
the sizes expression used in the ``sizes`` attribute (``100vw``, ``600px``,
``calc(100vw - 30px)``).
"""

from __future__ import annotations

import re
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from imgixmarkup.exceptions import MalformedBreakpointError

# One parenthesized clause, allowing one level of nesting: (min-width: calc(40em + 1px))
_CLAUSE = r"\((?:[^()]|\([^()]*\))*\)"
_MEDIA_RE = re.compile(
    rf"^(?P<media>{_CLAUSE}(?:\s*(?:and\b\s*)?{_CLAUSE})*)(?P<sizes>.*)$",
    re.DOTALL | re.IGNORECASE,
)


def split_size(size: str) -> Tuple[str, str]:
    """
    Split a breakpoint descriptor into its media condition and sizes expression.

    Args:
        size: Breakpoint descriptor

    Returns:
        (media, sizes) tuple; media is "" when the descriptor has no clauses

    Raises:
        MalformedBreakpointError: If the sizes expression is missing or the
            parentheses do not balance

    Example:
        >>> split_size("(min-width: 768px) 600px")
        ('(min-width: 768px)', '600px')
        >>> split_size("100vw")
        ('', '100vw')
    """
    text = size.strip()
    match = _MEDIA_RE.match(text)
    if match:
        media, sizes = match.group("media"), match.group("sizes").strip()
    else:
        media, sizes = "", text

    if not sizes:
        raise MalformedBreakpointError(size, "missing sizes expression")
    if sizes.startswith("("):
        raise MalformedBreakpointError(size, "unterminated media condition")
    if sizes.count("(") != sizes.count(")"):
        raise MalformedBreakpointError(size, "unbalanced parentheses")
    return media, sizes


class Breakpoint(BaseModel):
    """A parsed breakpoint descriptor."""

    size: str = Field(..., description="Descriptor as registered")
    media: str = Field(default="", description="Media condition, empty when absent")
    sizes: str = Field(..., description="Sizes expression")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, size: str) -> "Breakpoint":
        media, sizes = split_size(size)
        return cls(size=size, media=media, sizes=sizes)


__all__ = ["Breakpoint", "split_size"]
