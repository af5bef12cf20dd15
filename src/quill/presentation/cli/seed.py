"""Sample data for local development."""

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncEngine

from quill.application.commands import CreateCategoryCommand, CreatePostCommand
from quill.application.ports.identity import Principal
from quill.domain.category import CategoryAlreadyExistsError
from quill.domain.post import SlugAlreadyExistsError
from quill.infrastructure.persistence.sqlalchemy.engine import create_session_maker
from quill.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)

logger = logging.getLogger(__name__)

SEED_USER = Principal(
    id="00000000-0000-0000-0000-000000000000",
    email="test@example.com",
    full_name="Test User",
)

SEED_CATEGORIES = [
    ("Technology", "Software, hardware and the industry around them"),
    ("Web Development", "Frontend, backend and everything in between"),
    ("Design", "Visual design, UX and product thinking"),
    ("Business", "Startups, strategy and management"),
    ("Productivity", "Tools and habits for getting things done"),
]

SEED_POSTS = [
    (
        "Getting Started with Next.js 14",
        "The App Router changes how routing, layouts and data loading fit "
        "together. This post walks through a small project from scratch.",
        "A hands-on tour of the App Router.",
        ["Technology", "Web Development"],
    ),
    (
        "TypeScript Best Practices in 2025",
        "Strict mode, narrow types at the edges and let inference do the rest.",
        "Practical rules for a healthy TypeScript codebase.",
        ["Web Development"],
    ),
    (
        "Designing for Readability",
        "Line length, contrast and rhythm matter more than any font choice.",
        None,
        ["Design"],
    ),
]


@dataclass
class SeedResult:
    categories: list[str] = field(default_factory=list)
    posts: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


async def seed_database(engine: AsyncEngine) -> SeedResult:
    """Insert sample categories, a test user and published posts.

    Rows that already exist are skipped, so seeding twice is harmless.
    """
    result = SeedResult()
    session_maker = create_session_maker(engine)
    category_ids = {}

    async with session_maker() as session:
        factory = SQLAlchemyRepositoryFactory(session)
        category_repo = factory.category_repository()

        for name, description in SEED_CATEGORIES:
            existing = await category_repo.find_by_name(name)
            if existing:
                category_ids[name] = existing.id
                result.skipped.append(f"category:{name}")
                continue
            try:
                category = await CreateCategoryCommand.from_factory(factory).execute(
                    name=name,
                    description=description,
                )
                await session.commit()
            except CategoryAlreadyExistsError:
                await session.rollback()
                result.skipped.append(f"category:{name}")
                continue
            category_ids[name] = category.id
            result.categories.append(name)

        for title, content, excerpt, categories in SEED_POSTS:
            try:
                post = await CreatePostCommand.from_factory(factory).execute(
                    principal=SEED_USER,
                    title=title,
                    content=content,
                    excerpt=excerpt,
                    published=True,
                    category_ids=[
                        category_ids[c] for c in categories if c in category_ids
                    ],
                )
                await session.commit()
            except SlugAlreadyExistsError:
                await session.rollback()
                result.skipped.append(f"post:{title}")
                continue
            result.posts.append(post.slug)

    logger.info(
        "Seeded %d categories and %d posts (%d skipped)",
        len(result.categories),
        len(result.posts),
        len(result.skipped),
    )
    return result
