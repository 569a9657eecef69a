"""
Tests for slug derivation.
"""

import re

import pytest

from app.validation.slug import slugify

SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def test_slugify_example_title():
    assert slugify("Annual Tech Summit 2025!") == "annual-tech-summit-2025"


def test_slugify_collapses_runs_and_trims_dashes():
    assert slugify("  --Hello,   World!!--  ") == "hello-world"
    assert slugify("a___b...c") == "a-b-c"


def test_slugify_drops_non_ascii_letters():
    """Only [a-z0-9] survive; accented letters become separators."""
    assert slugify("Café Crème 2") == "caf-cr-me-2"


@pytest.mark.parametrize("title", ["", "   ", "!!!", "---", "¿¡ ?!"])
def test_slugify_without_alphanumerics_is_empty(title):
    assert slugify(title) == ""


@pytest.mark.parametrize("title", [
    "My Event",
    "PyCon US 2026: Pittsburgh",
    "already-a-slug",
    "  spaced   out  ",
])
def test_slugify_is_idempotent_and_url_safe(title):
    slug = slugify(title)
    assert SLUG_RE.match(slug)
    assert slugify(slug) == slug
