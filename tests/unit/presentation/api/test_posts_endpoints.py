"""API tests for the posts endpoints."""

from datetime import datetime
from uuid import uuid4

from tests.shared.fixtures.identities import AUTHOR_EMAIL, AUTHOR_ID


def _create_post(client, prefix, headers, **overrides) -> dict:
    body = {"title": "My First Post", "content": "Hello there"}
    body.update(overrides)
    response = client.post(f"{prefix}/posts", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _create_category(client, prefix, headers, name: str) -> dict:
    response = client.post(
        f"{prefix}/categories",
        json={"name": name},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestCreatePost:
    def test_requires_authentication(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/posts",
            json={"title": "t", "content": "c"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_rejects_invalid_token(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/posts",
            json={"title": "t", "content": "c"},
            headers={"Authorization": "Bearer not-a-jwt"},
        )
        assert response.status_code == 401

    def test_creates_draft_with_derived_slug(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
    ):
        post = _create_post(
            test_client,
            api_v1_prefix,
            auth_headers,
            title="TypeScript Best Practices in 2025",
        )

        assert post["slug"] == "typescript-best-practices-in-2025"
        assert post["published"] is False
        assert post["author_id"] == AUTHOR_ID
        assert post["category_ids"] == []

    def test_provisions_author(self, test_client, api_v1_prefix, auth_headers):
        _create_post(test_client, api_v1_prefix, auth_headers)

        response = test_client.get(f"{api_v1_prefix}/users/{AUTHOR_ID}")

        assert response.status_code == 200
        assert response.json()["full_name"] == "Ada Author"

    def test_duplicate_title_conflicts(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        other_auth_headers,
    ):
        _create_post(test_client, api_v1_prefix, auth_headers, title="Same")

        response = test_client.post(
            f"{api_v1_prefix}/posts",
            json={"title": "same!", "content": "different"},
            headers=other_auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_SLUG"

    def test_author_email_owned_by_another_user_conflicts(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        token_service,
    ):
        _create_post(test_client, api_v1_prefix, auth_headers, title="First")
        token = token_service.create_access_token(
            subject="impostor-1",
            email=AUTHOR_EMAIL,
        )

        response = test_client.post(
            f"{api_v1_prefix}/posts",
            json={"title": "Second", "content": "c"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_EMAIL"
        missing = test_client.get(f"{api_v1_prefix}/posts/by-slug/second")
        assert missing.json() is None

    def test_validation_is_400(self, test_client, api_v1_prefix, auth_headers):
        response = test_client.post(
            f"{api_v1_prefix}/posts",
            json={"title": "x" * 201, "content": "c"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_TITLE"

    def test_unknown_category_is_404_and_nothing_written(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/posts",
            json={"title": "Orphan", "content": "c", "category_ids": [str(uuid4())]},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "CATEGORY_NOT_FOUND"
        assert test_client.get(f"{api_v1_prefix}/posts/by-slug/orphan").json() is None


class TestPostLifecycle:
    def test_create_read_publish_round_trip(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
    ):
        category = _create_category(test_client, api_v1_prefix, auth_headers, "Web")
        created = _create_post(
            test_client,
            api_v1_prefix,
            auth_headers,
            title="Round Trip",
            category_ids=[category["id"], category["id"]],
        )
        assert created["category_ids"] == [category["id"]]

        detail = test_client.get(f"{api_v1_prefix}/posts/by-slug/round-trip").json()
        assert detail["id"] == created["id"]
        assert detail["category_ids"] == [category["id"]]
        assert detail["author"]["id"] == AUTHOR_ID

        response = test_client.patch(
            f"{api_v1_prefix}/posts/{created['id']}",
            json={"published": True},
            headers=auth_headers,
        )
        assert response.status_code == 200
        updated = response.json()
        assert updated["published"] is True
        assert updated["slug"] == "round-trip"
        assert updated["category_ids"] == [category["id"]]
        before = datetime.fromisoformat(created["updated_at"])
        assert datetime.fromisoformat(updated["updated_at"]) > before

    def test_missing_slug_returns_null(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/posts/by-slug/does-not-exist")

        assert response.status_code == 200
        assert response.json() is None

    def test_retitle_rederives_slug(self, test_client, api_v1_prefix, auth_headers):
        created = _create_post(test_client, api_v1_prefix, auth_headers, title="Old")

        updated = test_client.patch(
            f"{api_v1_prefix}/posts/{created['id']}",
            json={"title": "Brand New"},
            headers=auth_headers,
        ).json()

        assert updated["slug"] == "brand-new"

    def test_empty_category_list_clears_categories(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
    ):
        category = _create_category(test_client, api_v1_prefix, auth_headers, "Tmp")
        created = _create_post(
            test_client,
            api_v1_prefix,
            auth_headers,
            category_ids=[category["id"]],
        )

        updated = test_client.patch(
            f"{api_v1_prefix}/posts/{created['id']}",
            json={"category_ids": []},
            headers=auth_headers,
        ).json()

        assert updated["category_ids"] == []

    def test_other_author_cannot_update_or_delete(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        other_auth_headers,
    ):
        created = _create_post(test_client, api_v1_prefix, auth_headers)

        update = test_client.patch(
            f"{api_v1_prefix}/posts/{created['id']}",
            json={"title": "Hijacked"},
            headers=other_auth_headers,
        )
        delete = test_client.delete(
            f"{api_v1_prefix}/posts/{created['id']}",
            headers=other_auth_headers,
        )

        assert update.status_code == 403
        assert update.json()["code"] == "NOT_POST_AUTHOR"
        assert delete.status_code == 403
        stored = test_client.get(
            f"{api_v1_prefix}/posts/by-slug/{created['slug']}",
        ).json()
        assert stored["title"] == created["title"]
        assert stored["updated_at"] == created["updated_at"]

    def test_update_missing_post_is_404(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
    ):
        response = test_client.patch(
            f"{api_v1_prefix}/posts/{uuid4()}",
            json={"title": "x"},
            headers=auth_headers,
        )
        assert response.status_code == 404

    def test_delete_is_idempotent(self, test_client, api_v1_prefix, auth_headers):
        created = _create_post(test_client, api_v1_prefix, auth_headers)

        first = test_client.delete(
            f"{api_v1_prefix}/posts/{created['id']}",
            headers=auth_headers,
        )
        second = test_client.delete(
            f"{api_v1_prefix}/posts/{created['id']}",
            headers=auth_headers,
        )

        assert first.status_code == 204
        assert second.status_code == 204
        assert (
            test_client.get(f"{api_v1_prefix}/posts/by-slug/{created['slug']}").json()
            is None
        )


class TestListingAndFeed:
    def test_list_filters(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        other_auth_headers,
    ):
        _create_post(test_client, api_v1_prefix, auth_headers, title="A1")
        _create_post(
            test_client,
            api_v1_prefix,
            auth_headers,
            title="A2",
            published=True,
        )
        _create_post(
            test_client,
            api_v1_prefix,
            other_auth_headers,
            title="B1",
            published=True,
        )

        mine = test_client.get(
            f"{api_v1_prefix}/posts",
            params={"author_id": AUTHOR_ID},
        ).json()
        published = test_client.get(
            f"{api_v1_prefix}/posts",
            params={"published": "true"},
        ).json()

        assert {p["title"] for p in mine["posts"]} == {"A1", "A2"}
        assert mine["total"] == 2
        assert {p["title"] for p in published["posts"]} == {"A2", "B1"}

    def test_limit_out_of_range_is_400(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/posts", params={"limit": 0})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_LIMIT"

    def test_feed_pages(self, test_client, api_v1_prefix, auth_headers):
        for i in range(5):
            _create_post(
                test_client,
                api_v1_prefix,
                auth_headers,
                title=f"Feed {i}",
                published=True,
            )
        _create_post(test_client, api_v1_prefix, auth_headers, title="Hidden Draft")

        first = test_client.get(f"{api_v1_prefix}/posts/feed").json()
        second = test_client.get(
            f"{api_v1_prefix}/posts/feed",
            params={"page": 2},
        ).json()
        search = test_client.get(
            f"{api_v1_prefix}/posts/feed",
            params={"search": "feed 3"},
        ).json()

        assert first["total"] == 5
        assert first["page_size"] == 4
        assert first["pages"] == 2
        assert len(first["items"]) == 4
        assert len(second["items"]) == 1
        assert [p["title"] for p in search["items"]] == ["Feed 3"]

    def test_empty_feed_has_one_page(self, test_client, api_v1_prefix):
        feed = test_client.get(f"{api_v1_prefix}/posts/feed").json()

        assert feed["items"] == []
        assert feed["pages"] == 1

    def test_feed_page_zero_is_400(self, test_client, api_v1_prefix):
        response = test_client.get(
            f"{api_v1_prefix}/posts/feed",
            params={"page": 0},
        )
        assert response.status_code == 400

    def test_feed_page_size_zero_is_400(self, test_client, api_v1_prefix):
        response = test_client.get(
            f"{api_v1_prefix}/posts/feed",
            params={"page_size": 0},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_LIMIT"
