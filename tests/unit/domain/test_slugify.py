"""Tests for slug generation."""

import pytest

from quill.domain.shared.slug import slugify


class TestSlugify:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("TypeScript Best Practices in 2025", "typescript-best-practices-in-2025"),
            ("Hello, World!", "hello-world"),
            ("  leading and trailing  ", "leading-and-trailing"),
            ("snake_case and--dashes", "snake-case-and-dashes"),
            ("Crème Brûlée", "creme-brulee"),
            ("Tabs\tand\nnewlines", "tabs-and-newlines"),
        ],
    )
    def test_maps_text_to_slug(self, text, expected):
        assert slugify(text) == expected

    def test_is_deterministic(self):
        assert slugify("Same Title") == slugify("Same Title")

    def test_output_alphabet(self):
        slug = slugify("Wild *** input // with ~ symbols & 123")
        assert slug == slug.lower()
        assert all(c.isalnum() or c == "-" for c in slug)
        assert not slug.startswith("-")
        assert not slug.endswith("-")
        assert "--" not in slug

    def test_text_without_latin_characters_never_yields_empty_slug(self):
        slug = slugify("日本語")
        assert slug.startswith("untitled-")
        assert slug == slugify("日本語")
        assert slug != slugify("中文")

    def test_punctuation_only_falls_back(self):
        assert slugify("!!!").startswith("untitled-")

    def test_max_length_truncates_without_trailing_hyphen(self):
        slug = slugify("abc def ghi", max_length=4)
        assert slug == "abc"

    def test_max_length_not_applied_to_short_slugs(self):
        assert slugify("short", max_length=100) == "short"
