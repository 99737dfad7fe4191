"""
imgix URL building helpers.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Union

from imgix import UrlBuilder

from imgixmarkup.exceptions import ConfigurationError
from imgixmarkup.io.credentials import ImgixSettings

logger = logging.getLogger(__name__)

ParameterValue = Union[str, int, float, bool]


def make_url_builder(settings: ImgixSettings) -> UrlBuilder:
    """
    Create an imgix URL builder for the settings source.

    A signing token forces https regardless of ``IMGIX_USE_HTTPS``.
    """
    settings.validate_source()
    token = settings.get_token()
    use_https = settings.IMGIX_USE_HTTPS or token is not None
    try:
        return UrlBuilder(
            settings.IMGIX_SOURCE,
            use_https=use_https,
            sign_key=token,
            include_library_param=settings.IMGIX_INCLUDE_LIBRARY_PARAM,
        )
    except ValueError as e:
        raise ConfigurationError(f"Invalid imgix source {settings.IMGIX_SOURCE!r}: {e}") from e


def normalize_params(params: Mapping[str, ParameterValue]) -> Dict[str, str]:
    """
    Convert parameter values to their query string form.

    None values are excluded. Bool values become "true"/"false".
    """
    normalized = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            normalized[key] = "true" if value else "false"
        else:
            normalized[key] = str(value)
    return normalized


def create_url(builder: UrlBuilder, path: str, params: Mapping[str, Any]) -> str:
    """Build the URL of ``path`` with ``params`` applied."""
    url = builder.create_url(path, normalize_params(params))
    logger.debug("Created imgix URL %s", url)
    return url
