"""Tests for helpkit.utils.strings."""

import pytest

from helpkit.utils.strings import equals_ignoring_case


@pytest.mark.parametrize(
    "value,other,expected",
    [
        ("en-US", "en-us", True),
        ("EN", "en", True),
        ("", "", True),
        ("en", "fr", False),
        ("en", "en-US", False),
        ("Straße", "STRASSE", False),
    ],
)
def test_equals_ignoring_case(value, other, expected):
    assert equals_ignoring_case(value, other) is expected
