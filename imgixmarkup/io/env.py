"""
Helpers for loading imgix environment configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

IMGIX_ENV_FILENAME = "imgix.env"


def default_env_path() -> Path:
    """Environment file looked up in the current working directory."""

    return Path.cwd() / IMGIX_ENV_FILENAME


def load_env(path: Optional[Union[str, Path]] = None) -> bool:
    """
    Load variables from a dotenv file into the process environment.

    Variables that are already set are not overridden.

    Returns:
        True if the file was found and loaded.
    """

    path = Path(path) if path is not None else default_env_path()
    if not path.is_file():
        logger.debug("No env file at %s", path)
        return False
    logger.debug("Loading env file %s", path)
    return load_dotenv(path, override=False)
