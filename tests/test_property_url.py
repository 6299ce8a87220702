"""Property-based tests for UrlValue rendering.

Uses hypothesis so the concatenation contract is checked for arbitrary
text, not just hand-picked addresses.
"""

from __future__ import annotations

import copy
import dataclasses

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from url_value import SEPARATOR, UrlValue, build_url


@pytest.mark.os_agnostic
@given(protocol=st.text(), resource=st.text())
@settings(max_examples=200)
def test_render_is_exact_concatenation(protocol: str, resource: str) -> None:
    """Rendering is protocol + "://" + resource with no normalization."""
    assert build_url(protocol, resource).render() == protocol + "://" + resource


@pytest.mark.os_agnostic
@given(protocol=st.text(), resource=st.text())
def test_render_starts_with_protocol_and_ends_with_resource(protocol: str, resource: str) -> None:
    """The rendered form is framed by the two parts around the separator."""
    rendered = UrlValue(protocol, resource).render()

    assert rendered.startswith(protocol + SEPARATOR)
    assert rendered.endswith(SEPARATOR + resource)
    assert len(rendered) == len(protocol) + len(SEPARATOR) + len(resource)


@pytest.mark.os_agnostic
@given(protocol=st.text(), head=st.text(), tail=st.text())
def test_separator_inside_resource_is_preserved(protocol: str, head: str, tail: str) -> None:
    """A separator embedded in the resource survives verbatim."""
    resource = head + SEPARATOR + tail

    assert UrlValue(protocol, resource).render() == f"{protocol}://{head}://{tail}"


@pytest.mark.os_agnostic
@given(protocol=st.text(), resource=st.text(), new_protocol=st.text(), new_resource=st.text())
def test_copy_modification_never_changes_original(
    protocol: str, resource: str, new_protocol: str, new_resource: str
) -> None:
    """Replacing fields on a copy leaves the original rendering intact."""
    original = UrlValue(protocol, resource)
    before = original.render()

    dataclasses.replace(copy.copy(original), protocol=new_protocol, resource=new_resource)

    assert original.render() == before
