"""
Settings model for the imgix source used to build image URLs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from imgixmarkup.exceptions import ConfigurationError

DEFAULT_BLUEPRINT_SIZES: Tuple[int, ...] = (480, 768, 1024, 1440, 1920)

# Short keys accepted in plain settings mappings.
_SETTINGS_ALIASES = {
    "source": "IMGIX_SOURCE",
    "token": "IMGIX_TOKEN",
    "use_https": "IMGIX_USE_HTTPS",
    "include_library_param": "IMGIX_INCLUDE_LIBRARY_PARAM",
    "blueprint_sizes": "IMGIX_BLUEPRINT_SIZES",
}


def check_sizes(sizes: Iterable[Any]) -> Tuple[int, ...]:
    """
    Validate a list of pixel widths.

    Raises:
        ValueError: If a width is not a positive integer.
    """
    result = []
    for size in sizes:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"Blueprint sizes must be positive integers, got {size!r}")
        result.append(size)
    return tuple(result)


class ImgixSettings(BaseSettings):
    """
    Settings model for the imgix source via environment variables
    or other settings sources supported by `pydantic-settings`.
    """

    IMGIX_SOURCE: Optional[str] = Field(default=None, description="imgix source domain")
    IMGIX_TOKEN: Optional[SecretStr] = Field(default=None, description="URL signing token")
    IMGIX_USE_HTTPS: bool = True
    IMGIX_INCLUDE_LIBRARY_PARAM: bool = False
    IMGIX_BLUEPRINT_SIZES: List[int] = Field(default_factory=lambda: list(DEFAULT_BLUEPRINT_SIZES))

    model_config = SettingsConfigDict(
        env_file="imgix.env",
        extra="ignore",
        frozen=True,
    )

    @field_validator("IMGIX_SOURCE")
    def strip_source(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return v.strip() or None

    @field_validator("IMGIX_BLUEPRINT_SIZES")
    def validate_blueprint_sizes(cls, v: List[int]) -> List[int]:
        return list(check_sizes(v))

    @classmethod
    def from_env(cls, path: Optional[Union[str, Path]] = None) -> "ImgixSettings":
        """Create settings from environment variables, loading a dotenv file first."""
        from imgixmarkup.io.env import load_env

        load_env(path)
        return cls()

    def get_token(self) -> Optional[str]:
        """Get the signing token as a plain string, or None when URLs are not signed."""
        if self.IMGIX_TOKEN is None:
            return None
        return self.IMGIX_TOKEN.get_secret_value() or None

    @property
    def is_signed(self) -> bool:
        return self.get_token() is not None

    def validate_source(self) -> None:
        """Validate that the imgix source is present."""
        if not self.IMGIX_SOURCE:
            raise ConfigurationError("imgix source is missing (set IMGIX_SOURCE).")


def as_settings(settings: Union[ImgixSettings, Mapping[str, Any], None] = None) -> ImgixSettings:
    """
    Coerce ``settings`` into an :class:`ImgixSettings` instance.

    Plain mappings may use the short keys ``source``, ``token``, ``use_https``,
    ``include_library_param`` and ``blueprint_sizes`` or the full field names.
    ``None`` reads the settings from the environment.
    """
    if isinstance(settings, ImgixSettings):
        return settings

    values = {}
    for key, value in (settings or {}).items():
        values[_SETTINGS_ALIASES.get(key, key)] = value

    try:
        return ImgixSettings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid imgix settings: {e}") from e


__all__ = ["ImgixSettings", "DEFAULT_BLUEPRINT_SIZES", "as_settings", "check_sizes"]
