"""
HTML tag builders for responsive images.

User supplied text (alt text, class names) is escaped. URLs and raw extra
attribute strings are emitted as given.
"""

from __future__ import annotations

from html import escape
from typing import Iterable

__all__ = [
    "attribute",
    "img_tag",
    "source_tag",
    "picture_tag",
]


def attribute(name: str, value: str) -> str:
    """
    Render a single ``name="value"`` pair with the value escaped.

    Example:
        >>> attribute("alt", 'A "quoted" cat')
        'alt="A &quot;quoted&quot; cat"'
    """
    return f'{name}="{escape(value, quote=True)}"'


def _open_tag(name: str, parts: Iterable[str]) -> str:
    return "<" + " ".join([name, *(part for part in parts if part)]) + ">"


def img_tag(src: str, css_class: str = "", alt: str = "", extra: str = "") -> str:
    """
    Generate an HTML img tag.

    Args:
        src: Image URL, or comma separated URLs
        css_class: Class attribute value
        alt: Alt text
        extra: Raw attributes appended verbatim

    Example:
        >>> img_tag("a.jpg", "thumb", "Cat", 'loading="lazy"')
        '<img src="a.jpg" class="thumb" alt="Cat" loading="lazy">'
    """
    return _open_tag(
        "img",
        [f'src="{src}"', attribute("class", css_class), attribute("alt", alt), extra.strip()],
    )


def source_tag(srcset: str, sizes: str, media: str = "") -> str:
    """
    Generate a picture source tag.

    The media attribute is left out when empty instead of rendering
    ``media=""``. Both match every viewport, but the output is not
    byte-identical to markup that always carries ``media``.

    Example:
        >>> source_tag("a.jpg", "600px", "(min-width: 768px)")
        '<source media="(min-width: 768px)" srcset="a.jpg" sizes="600px">'
    """
    return _open_tag(
        "source",
        [attribute("media", media) if media else "", f'srcset="{srcset}"', attribute("sizes", sizes)],
    )


def picture_tag(children: Iterable[str], css_class: str = "", extra: str = "") -> str:
    """Wrap source and img tags in a picture element."""
    opening = _open_tag("picture", [attribute("class", css_class), extra.strip()])
    return opening + "".join(children) + "</picture>"
