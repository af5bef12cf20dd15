"""Category schemas for API request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from quill.domain.category import Category, CategoryChanges
from quill.domain.shared.unset import UNSET


class CategoryResponse(BaseModel):
    """Response schema for a category."""

    id: UUID = Field(..., description="Category ID")
    name: str = Field(..., description="Display name")
    slug: str = Field(..., description="URL slug derived from the name")
    description: Optional[str] = Field(None, description="Optional description")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last modification timestamp")

    @classmethod
    def from_category(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            description=category.description,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


class CategoryCreateRequest(BaseModel):
    """Request schema for creating a category."""

    name: str = Field(..., description="Category name (1-100 characters, unique)")
    description: Optional[str] = Field(
        None,
        description="Optional description (max 500 characters)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Web Development",
                "description": "Frontend, backend and everything in between",
            },
        },
    )


class CategoryUpdateRequest(BaseModel):
    """Request schema for updating a category.

    Omitted fields are left unchanged. ``description: null`` clears the
    description.
    """

    name: Optional[str] = Field(None, description="New category name")
    description: Optional[str] = Field(None, description="New description")

    def to_changes(self) -> CategoryChanges:
        fields = self.model_fields_set
        return CategoryChanges(
            name=self.name if "name" in fields and self.name is not None else UNSET,
            description=self.description if "description" in fields else UNSET,
        )
