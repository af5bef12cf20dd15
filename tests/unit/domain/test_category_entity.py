"""Unit tests for the Category entity."""

import pytest

from quill.domain.category import Category, CategoryChanges
from quill.domain.category.entities.category import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
)
from quill.domain.shared.exceptions import ErrorCode, ValidationError


class TestCategory:
    def test_create_derives_slug(self):
        category = Category.create("Web Development", "Frontend and backend")

        assert category.name == "Web Development"
        assert category.slug == "web-development"
        assert category.description == "Frontend and backend"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ValidationError) as exc_info:
            Category.create(name)
        assert exc_info.value.code == ErrorCode.INVALID_CATEGORY_NAME

    def test_name_length_limit(self):
        Category.create("n" * MAX_NAME_LENGTH)
        with pytest.raises(ValidationError):
            Category.create("n" * (MAX_NAME_LENGTH + 1))

    def test_description_length_limit(self):
        with pytest.raises(ValidationError) as exc_info:
            Category.create("Design", "d" * (MAX_DESCRIPTION_LENGTH + 1))
        assert exc_info.value.code == ErrorCode.INVALID_DESCRIPTION

    def test_rename_rederives_slug(self):
        category = Category.create("Design")

        category.apply(CategoryChanges(name="UI Design"))

        assert category.slug == "ui-design"

    def test_description_only_change_keeps_slug(self):
        category = Category(name="Design", slug="legacy-design")
        before = category.updated_at

        category.apply(CategoryChanges(description="Visual work"))

        assert category.slug == "legacy-design"
        assert category.description == "Visual work"
        assert category.updated_at > before

    def test_invalid_description_leaves_name_untouched(self):
        category = Category.create("Design", "Visual work")
        before = category.updated_at

        with pytest.raises(ValidationError):
            category.apply(
                CategoryChanges(
                    name="UI Design",
                    description="d" * (MAX_DESCRIPTION_LENGTH + 1),
                ),
            )

        assert category.name == "Design"
        assert category.slug == "design"
        assert category.description == "Visual work"
        assert category.updated_at == before

    def test_description_can_be_cleared(self):
        category = Category.create("Design", "Visual work")

        category.apply(CategoryChanges(description=None))

        assert category.description is None

    def test_changes_is_empty(self):
        assert CategoryChanges().is_empty()
        assert not CategoryChanges(description=None).is_empty()
