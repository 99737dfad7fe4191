"""
Responsive ``<picture>`` / ``<img>`` markup backed by imgix.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from imgixmarkup.domain.types.breakpoint import Breakpoint
from imgixmarkup.domain.types.image import Image
from imgixmarkup.exceptions import BreakpointNotFoundError, ConfigurationError
from imgixmarkup.io.credentials import ImgixSettings, as_settings, check_sizes
from imgixmarkup.ops.render.tags import img_tag, picture_tag, source_tag

logger = logging.getLogger(__name__)

ImageCallback = Callable[[Image], Image]


class ResponsiveImage:
    """
    Render responsive image markup for a single imgix image.

    Breakpoints are rendered in registration order. Only breakpoints added
    with a callback produce markup: each of them becomes a ``<source>``,
    except the last one which becomes the fallback ``<img>``. Without any
    customized breakpoint a bare ``<img>`` is rendered from :attr:`image`.

    Example::

        markup = (
            ResponsiveImage("photos/cat.jpg", {"source": "example.imgix.net"})
            .add_breakpoint("(min-width: 1024px) 50vw", lambda image: image.set_height(400))
            .add_breakpoint("(min-width: 768px) 600px", lambda image: image.set_width(600))
            .set_alt("A cat")
            .render()
        )
    """

    def __init__(
        self,
        image_path: str,
        settings: Union[ImgixSettings, Mapping[str, Any], None] = None,
        blueprint_sizes: Optional[Sequence[int]] = None,
        width_descriptors: bool = False,
    ):
        self._image_path = image_path
        self._settings = as_settings(settings)
        self._settings.validate_source()

        if blueprint_sizes is None:
            blueprint_sizes = self._settings.IMGIX_BLUEPRINT_SIZES
        try:
            self._blueprint_sizes: Tuple[int, ...] = check_sizes(blueprint_sizes)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        # Plain URL list by default; "800w" suffixes only on request.
        self._width_descriptors = width_descriptors

        self._image = Image(image_path, self._settings)
        self._sizes: List[str] = []
        self._images: Dict[str, Image] = {}

        self._alt = ""
        self._image_class = ""
        self._picture_class = ""
        self._img_attributes = ""
        self._picture_attributes = ""

    @property
    def image_path(self) -> str:
        return self._image_path

    @property
    def blueprint_sizes(self) -> Tuple[int, ...]:
        return self._blueprint_sizes

    @property
    def image(self) -> Image:
        """Default image used when no breakpoint is customized."""
        return self._image

    def add_breakpoint(self, size: str, callback: Optional[ImageCallback] = None) -> "ResponsiveImage":
        """
        Add a breakpoint.

        Args:
            size: Something like ``(min-width: 768px) 600px``, ``100vw`` or
                ``calc(100vw - 30px)``.
            callback: Receives a fresh :class:`Image` for this breakpoint and
                must return the image to use when the viewport matches.
        """
        if callback is not None:
            image = callback(Image(self._image_path, self._settings))
            if not isinstance(image, Image):
                raise TypeError(
                    f"Breakpoint callback for {size!r} must return an Image, "
                    f"got {type(image).__name__}"
                )
            self._images[size] = image

        self._sizes.append(size)
        return self

    def set_alt(self, value: str) -> "ResponsiveImage":
        self._alt = value
        return self

    def set_image_class(self, css_class: str = "") -> "ResponsiveImage":
        self._image_class = css_class
        return self

    def set_picture_class(self, css_class: str = "") -> "ResponsiveImage":
        self._picture_class = css_class
        return self

    def set_image_attributes(self, attributes: str) -> "ResponsiveImage":
        """Raw attributes added to the ``img`` element, e.g. ``loading="lazy"``."""
        self._img_attributes = attributes
        return self

    def set_picture_attributes(self, attributes: str) -> "ResponsiveImage":
        """Raw attributes added to the ``picture`` element."""
        self._picture_attributes = attributes
        return self

    def get_breakpoints(self) -> List[str]:
        """Registered breakpoint descriptors, in registration order."""
        return list(self._sizes)

    def get_url(self, size: str) -> str:
        """Get the URL of the image bound to ``size``."""
        try:
            image = self._images[size]
        except KeyError:
            raise BreakpointNotFoundError(size) from None
        return image.get_url()

    def srcset_value(self, image: Image) -> str:
        """
        Comma separated URLs of ``image`` resized to each blueprint size.

        An image with an explicit width is only rendered at that width.
        """
        explicit = image.get_parameter("w")
        widths = (explicit,) if explicit else self._blueprint_sizes
        if not widths:
            return image.get_url()

        parts = []
        for width in widths:
            url = image.copy().set_width(width).get_url()
            parts.append(f"{url} {width}w" if self._width_descriptors else url)
        return ",".join(parts)

    def render(self) -> str:
        """Render the HTML tag with the imgix markup."""
        return self._render_picture() if self._images else self.render_img()

    def _render_picture(self) -> str:
        *sources, (fallback_size, fallback) = self._images.items()
        tags = []
        for size, image in sources:
            parsed = Breakpoint.parse(size)
            tags.append(source_tag(self.srcset_value(image), parsed.sizes, parsed.media))

        # The fallback has no sizes attribute but its descriptor must still be valid.
        Breakpoint.parse(fallback_size)
        tags.append(self.render_img(fallback))

        logger.debug(
            "Rendered picture for %s with %d source(s)", self._image_path, len(sources)
        )
        return picture_tag(tags, self._picture_class, self._picture_attributes)

    def render_img(self, image: Optional[Image] = None) -> str:
        """Render an ``<img>`` tag for ``image``, or the default image."""
        if image is None:
            image = self._image
        return img_tag(self.srcset_value(image), self._image_class, self._alt, self._img_attributes)


__all__ = ["ResponsiveImage", "ImageCallback"]
