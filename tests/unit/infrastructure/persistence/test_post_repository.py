"""
Unit tests for PostRepositorySQLAlchemy.

Covers filter composition, the feed page, category association
replacement and the author dashboard counters.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from quill.domain.category import Category
from quill.domain.post import FeedQuery, Post, PostFilter, SlugAlreadyExistsError
from tests.shared.fixtures.identities import AUTHOR_ID, OTHER_AUTHOR_ID

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def create_test_post(minutes: int = 0, **overrides) -> Post:
    """Post created ``minutes`` after BASE_TIME, so ordering is deterministic."""
    created = BASE_TIME + timedelta(minutes=minutes)
    defaults = {
        "title": f"Post {minutes}",
        "content": "Some content",
        "author_id": AUTHOR_ID,
        "published": False,
        "created_at": created,
        "updated_at": created,
    }
    defaults.update(overrides)
    return Post(**defaults)


@pytest.mark.asyncio
class TestPostRepositoryCrud:
    async def test_save_and_find(self, post_repository, async_session):
        post = create_test_post(title="Hello World", excerpt="Short")
        await post_repository.save(post)
        await async_session.commit()

        by_id = await post_repository.find_by_id(post.id)
        by_slug = await post_repository.find_by_slug("hello-world")

        assert by_id == post
        assert by_slug is not None
        assert by_slug.excerpt == "Short"
        assert by_slug.created_at == BASE_TIME
        assert await post_repository.exists_with_slug("hello-world")
        assert not await post_repository.exists_with_slug("nope")

    async def test_find_missing(self, post_repository):
        assert await post_repository.find_by_id(uuid4()) is None
        assert await post_repository.find_by_slug("missing") is None

    async def test_save_updates_existing(self, post_repository, async_session):
        post = create_test_post(title="Draft")
        await post_repository.save(post)
        await async_session.commit()

        post.publish()
        await post_repository.save(post)
        await async_session.commit()

        stored = await post_repository.find_by_id(post.id)
        assert stored.published is True
        assert stored.updated_at > stored.created_at

    async def test_duplicate_slug_raises_domain_error(
        self,
        post_repository,
        async_session,
    ):
        await post_repository.save(create_test_post(title="Same Title"))
        await async_session.commit()

        duplicate = create_test_post(minutes=1, title="Same Title")
        with pytest.raises(SlugAlreadyExistsError):
            await post_repository.save(duplicate)

        # Session is still usable after the failed flush
        assert await post_repository.exists_with_slug("same-title")

    async def test_delete_removes_associations(
        self,
        post_repository,
        category_repository,
        async_session,
    ):
        category = Category.create("Design")
        await category_repository.save(category)
        post = create_test_post()
        await post_repository.save(post)
        await post_repository.replace_categories(post.id, [category.id])
        await async_session.commit()

        await post_repository.delete(post.id)
        await async_session.commit()

        assert await post_repository.find_by_id(post.id) is None
        assert await category_repository.count_posts(category.id) == 0


@pytest.mark.asyncio
class TestPostRepositoryFilters:
    @pytest.fixture
    async def seeded(self, post_repository, category_repository, async_session):
        """Four posts: two authors, two categories, mixed publish states."""
        web = Category.create("Web")
        design = Category.create("Design")
        await category_repository.save(web)
        await category_repository.save(design)

        posts = {
            "a_pub_web": create_test_post(0, published=True),
            "a_draft_web": create_test_post(1),
            "a_pub_design": create_test_post(2, published=True),
            "b_pub_web": create_test_post(3, published=True, author_id=OTHER_AUTHOR_ID),
        }
        for post in posts.values():
            await post_repository.save(post)
        await post_repository.replace_categories(posts["a_pub_web"].id, [web.id])
        await post_repository.replace_categories(posts["a_draft_web"].id, [web.id])
        await post_repository.replace_categories(
            posts["a_pub_design"].id,
            [design.id],
        )
        await post_repository.replace_categories(posts["b_pub_web"].id, [web.id])
        await async_session.commit()
        return posts, web, design

    async def test_no_filter_returns_all_newest_first(self, post_repository, seeded):
        posts, _, _ = seeded

        result = await post_repository.find_with_filter(PostFilter())

        assert [p.id for p in result] == [
            posts["b_pub_web"].id,
            posts["a_pub_design"].id,
            posts["a_draft_web"].id,
            posts["a_pub_web"].id,
        ]

    async def test_filters_combine_with_and(self, post_repository, seeded):
        posts, web, _ = seeded

        result = await post_repository.find_with_filter(
            PostFilter(published=True, author_id=AUTHOR_ID, category_id=web.id),
        )

        assert [p.id for p in result] == [posts["a_pub_web"].id]

    async def test_drafts_only(self, post_repository, seeded):
        posts, _, _ = seeded

        result = await post_repository.find_with_filter(PostFilter(published=False))

        assert [p.id for p in result] == [posts["a_draft_web"].id]

    async def test_limit(self, post_repository, seeded):
        result = await post_repository.find_with_filter(PostFilter(limit=2))
        assert len(result) == 2

    async def test_category_ids_for(self, post_repository, seeded):
        posts, web, design = seeded

        mapping = await post_repository.find_category_ids_for(
            [posts["a_pub_web"].id, posts["a_pub_design"].id],
        )

        assert mapping == {
            posts["a_pub_web"].id: [web.id],
            posts["a_pub_design"].id: [design.id],
        }

    async def test_author_stats(self, post_repository, seeded):
        stats = await post_repository.get_author_stats(AUTHOR_ID)

        assert stats.total_posts == 3
        assert stats.published_posts == 2
        assert stats.categories == 2

    async def test_author_stats_for_author_without_posts(self, post_repository):
        stats = await post_repository.get_author_stats("nobody")

        assert (stats.total_posts, stats.published_posts, stats.categories) == (0, 0, 0)


@pytest.mark.asyncio
class TestReplaceCategories:
    async def test_replace_and_clear(
        self,
        post_repository,
        category_repository,
        async_session,
    ):
        first, second = Category.create("First"), Category.create("Second")
        await category_repository.save(first)
        await category_repository.save(second)
        post = create_test_post()
        await post_repository.save(post)

        await post_repository.replace_categories(post.id, [first.id, first.id])
        assert await post_repository.find_category_ids(post.id) == [first.id]

        await post_repository.replace_categories(post.id, [second.id])
        assert await post_repository.find_category_ids(post.id) == [second.id]

        await post_repository.replace_categories(post.id, [])
        await async_session.commit()
        assert await post_repository.find_category_ids(post.id) == []


@pytest.mark.asyncio
class TestFeedPage:
    @pytest.fixture
    async def feed_posts(self, post_repository, async_session):
        """Nine published posts and one draft."""
        posts = [
            create_test_post(i, title=f"Published {i}", published=True)
            for i in range(9)
        ]
        posts.append(create_test_post(20, title="Secret Draft"))
        posts.append(
            create_test_post(
                21,
                title="Python Tips",
                content="Use 100% of your tools",
                published=True,
            ),
        )
        for post in posts:
            await post_repository.save(post)
        await async_session.commit()
        return posts

    async def test_pagination(self, post_repository, feed_posts):
        page_one, total = await post_repository.find_feed_page(
            FeedQuery(page=1, page_size=4),
        )
        page_three, _ = await post_repository.find_feed_page(
            FeedQuery(page=3, page_size=4),
        )
        beyond, beyond_total = await post_repository.find_feed_page(
            FeedQuery(page=10, page_size=4),
        )

        assert total == 10
        assert len(page_one) == 4
        assert page_one[0].title == "Python Tips"
        assert len(page_three) == 2
        assert beyond == []
        assert beyond_total == 10
        assert all(p.published for p in page_one + page_three)

    async def test_search_is_case_insensitive_on_title_and_content(
        self,
        post_repository,
        feed_posts,
    ):
        by_title, total = await post_repository.find_feed_page(
            FeedQuery(search="PYTHON"),
        )
        by_content, _ = await post_repository.find_feed_page(
            FeedQuery(search="your tools"),
        )

        assert total == 1
        assert by_title[0].title == "Python Tips"
        assert by_content[0].title == "Python Tips"

    async def test_search_escapes_wildcards(self, post_repository, feed_posts):
        percent, _ = await post_repository.find_feed_page(FeedQuery(search="100%"))
        literal, total = await post_repository.find_feed_page(FeedQuery(search="%"))

        assert [p.title for p in percent] == ["Python Tips"]
        assert total == 1
        assert [p.title for p in literal] == ["Python Tips"]

    async def test_search_never_returns_drafts(self, post_repository, feed_posts):
        result, total = await post_repository.find_feed_page(
            FeedQuery(search="secret"),
        )
        assert result == []
        assert total == 0
