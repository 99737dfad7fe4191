"""
Public package interface for imgixmarkup.

Build imgix image URLs and responsive ``<picture>`` / ``<img>`` markup:

    from imgixmarkup import ResponsiveImage

    html = (
        ResponsiveImage("photos/cat.jpg", {"source": "example.imgix.net"})
        .add_breakpoint("(min-width: 768px) 600px", lambda image: image.set_width(600))
        .render()
    )
"""

from __future__ import annotations

__version__ = "0.1.0"

from imgixmarkup.domain.types.breakpoint import Breakpoint, split_size
from imgixmarkup.domain.types.image import CropMode, FitMode, Image
from imgixmarkup.exceptions import (
    BreakpointNotFoundError,
    ConfigurationError,
    ImgixMarkupError,
    MalformedBreakpointError,
)
from imgixmarkup.io.credentials import ImgixSettings
from imgixmarkup.ops.render.responsive import ResponsiveImage

__all__ = [
    "__version__",
    "Breakpoint",
    "split_size",
    "Image",
    "CropMode",
    "FitMode",
    "ImgixSettings",
    "ResponsiveImage",
    "ImgixMarkupError",
    "ConfigurationError",
    "BreakpointNotFoundError",
    "MalformedBreakpointError",
]
