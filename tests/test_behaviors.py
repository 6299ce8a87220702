"""Behaviour-layer stories: pure domain function tests."""

from __future__ import annotations

import pytest

from url_value.domain import behaviors
from url_value.domain.url import UrlValue


@pytest.mark.os_agnostic
def test_example_url_renders_reference_address() -> None:
    """The reference instance renders the canonical example address."""
    assert behaviors.render_url(behaviors.EXAMPLE_URL) == "http://www.example.com/index.html"


@pytest.mark.os_agnostic
def test_build_url_keeps_parts_in_order() -> None:
    """build_url stores protocol first and resource second."""
    url = behaviors.build_url("ftp", "files.example.org/data.zip")

    assert url == UrlValue("ftp", "files.example.org/data.zip")
    assert url.protocol == "ftp"
    assert url.resource == "files.example.org/data.zip"


@pytest.mark.os_agnostic
def test_render_url_matches_value_render() -> None:
    """render_url is a thin wrapper over UrlValue.render."""
    url = UrlValue("gopher", "example.org/1")

    assert behaviors.render_url(url) == url.render()
