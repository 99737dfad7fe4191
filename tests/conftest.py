"""
Shared fixtures: every test builds its settings explicitly.
"""

from urllib.parse import parse_qs, urlsplit

import pytest

from imgixmarkup.io.credentials import ImgixSettings

SOURCE = "example.imgix.net"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep IMGIX_* variables and imgix.env files from leaking into tests."""
    for name in (
        "IMGIX_SOURCE",
        "IMGIX_TOKEN",
        "IMGIX_USE_HTTPS",
        "IMGIX_INCLUDE_LIBRARY_PARAM",
        "IMGIX_BLUEPRINT_SIZES",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return ImgixSettings(IMGIX_SOURCE=SOURCE, IMGIX_BLUEPRINT_SIZES=[400, 800, 1200])


@pytest.fixture
def signed_settings():
    return ImgixSettings(
        IMGIX_SOURCE=SOURCE,
        IMGIX_TOKEN="s3cr3t",
        IMGIX_USE_HTTPS=False,
        IMGIX_BLUEPRINT_SIZES=[400, 800, 1200],
    )


def query(url: str) -> dict:
    """Query parameters of ``url`` as a flat dict."""
    return {key: values[0] for key, values in parse_qs(urlsplit(url).query).items()}
