"""
An imgix image and the transform parameters applied to it.
"""

from __future__ import annotations

import enum
from typing import Any, Dict, Mapping, Union

from imgixmarkup.io.credentials import ImgixSettings, as_settings
from imgixmarkup.io.url import ParameterValue, create_url, make_url_builder


class CropMode(str, enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    FOCAL_POINT = "focalpoint"
    FACES = "faces"
    ENTROPY = "entropy"
    EDGES = "edges"


class FitMode(str, enum.Enum):
    CLAMP = "clamp"
    CLIP = "clip"
    CROP = "crop"
    FACEAREA = "facearea"
    FILLMAX = "fillmax"
    MAX = "max"
    MIN = "min"
    SCALE = "scale"


def _mode_value(mode: Union[str, enum.Enum]) -> str:
    if isinstance(mode, enum.Enum):
        return str(mode.value)
    return str(mode)


class Image:
    """
    An image served by imgix.

    Setters store imgix URL parameters and return the same instance so calls
    can be chained::

        image = Image("photos/cat.jpg", {"source": "example.imgix.net"})
        url = image.set_width(600).set_fit(FitMode.CROP).get_url()

    Parameters are not validated beyond their type: imgix decides whether a
    combination makes sense.
    """

    def __init__(
        self,
        filename: str,
        settings: Union[ImgixSettings, Mapping[str, Any], None] = None,
    ):
        self._filename = filename
        self._settings = as_settings(settings)
        self._builder = make_url_builder(self._settings)
        self._parameters: Dict[str, ParameterValue] = {}

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def settings(self) -> ImgixSettings:
        return self._settings

    @property
    def parameters(self) -> Dict[str, ParameterValue]:
        """Copy of the current URL parameters."""
        return dict(self._parameters)

    def get_parameter(self, name: str, default: Any = None) -> Any:
        """Get a parameter value, or ``default`` when it is not set."""
        return self._parameters.get(name, default)

    def set_parameter(self, name: str, value: ParameterValue) -> "Image":
        """Set any imgix parameter, e.g. ``set_parameter("auto", "format")``."""
        self._parameters[name] = value
        return self

    def get_url(self) -> str:
        """Get the image URL, signed when the settings carry a token."""
        return create_url(self._builder, self._filename, self._parameters)

    def copy(self) -> "Image":
        """Independent clone with the same filename, settings and parameters."""
        clone = Image(self._filename, self._settings)
        clone._parameters = dict(self._parameters)
        return clone

    def set_width(self, width: int) -> "Image":
        self._parameters["w"] = int(width)
        return self

    def set_height(self, height: int) -> "Image":
        self._parameters["h"] = int(height)
        return self

    def set_blur(self, amount: int) -> "Image":
        """Blur the image. imgix accepts 0 - 2000."""
        self._parameters["blur"] = int(amount)
        return self

    def set_crop(self, *modes: Union[str, CropMode]) -> "Image":
        """
        Control how the image is aligned when ``fit`` is ``crop``.

        Several modes may be given and are sent comma separated, e.g.
        ``set_crop(CropMode.FACES, CropMode.EDGES)``. Without a crop mode imgix
        centers the image.
        """
        if not modes:
            raise TypeError("set_crop() requires at least one mode")
        self._parameters["crop"] = ",".join(_mode_value(mode) for mode in modes)
        return self

    def set_fit(self, mode: Union[str, FitMode]) -> "Image":
        """
        Control how the image is fit to its target dimensions.

        imgix uses ``clip`` when no fit mode is set.
        """
        self._parameters["fit"] = _mode_value(mode)
        return self

    def set_facepad(self, pad: float) -> "Image":
        """Padding ratio around each face, used with ``fit=facearea``."""
        self._parameters["facepad"] = float(pad)
        return self

    def set_monochrome(self, color: str) -> "Image":
        """
        Apply a monochromatic filter with a 3, 6 or 8 digit hex color.

        With 8 digits the first two give the opacity of the color.
        """
        self._parameters["mono"] = str(color)
        return self

    def set_focal_point_crop(
        self,
        x: float,
        y: float,
        zoom: float = 1.0,
        debug: bool = False,
    ) -> "Image":
        """
        Art-direct the crop around a point of interest.

        Only meaningful together with ``fit=crop`` and ``crop=focalpoint``.
        ``debug`` asks imgix to draw the focal point on the image.
        """
        self._parameters["fp-x"] = float(x)
        self._parameters["fp-y"] = float(y)
        self._parameters["fp-z"] = float(zoom)
        if debug:
            self._parameters["fp-debug"] = True
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(filename={self._filename!r}, parameters={self._parameters!r})"


__all__ = ["Image", "CropMode", "FitMode"]
