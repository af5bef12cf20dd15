"""API tests for the categories endpoints."""

from uuid import uuid4


class TestCategoriesEndpoints:
    def test_create_and_list(self, test_client, api_v1_prefix, auth_headers):
        response = test_client.post(
            f"{api_v1_prefix}/categories",
            json={"name": "Web Development", "description": "All things web"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["slug"] == "web-development"

        listed = test_client.get(f"{api_v1_prefix}/categories").json()
        assert [c["name"] for c in listed] == ["Web Development"]

    def test_create_requires_authentication(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/categories",
            json={"name": "Anonymous"},
        )
        assert response.status_code == 401

    def test_duplicate_name_conflicts(self, test_client, api_v1_prefix, auth_headers):
        test_client.post(
            f"{api_v1_prefix}/categories",
            json={"name": "Design"},
            headers=auth_headers,
        )

        response = test_client.post(
            f"{api_v1_prefix}/categories",
            json={"name": "Design"},
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_CATEGORY"

    def test_update_rename_and_clear_description(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
    ):
        created = test_client.post(
            f"{api_v1_prefix}/categories",
            json={"name": "Design", "description": "Visual"},
            headers=auth_headers,
        ).json()

        response = test_client.patch(
            f"{api_v1_prefix}/categories/{created['id']}",
            json={"name": "UX Design", "description": None},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["slug"] == "ux-design"
        assert body["description"] is None

    def test_update_missing_is_404(self, test_client, api_v1_prefix, auth_headers):
        response = test_client.patch(
            f"{api_v1_prefix}/categories/{uuid4()}",
            json={"name": "x"},
            headers=auth_headers,
        )
        assert response.status_code == 404

    def test_delete_in_use_conflicts(self, test_client, api_v1_prefix, auth_headers):
        category = test_client.post(
            f"{api_v1_prefix}/categories",
            json={"name": "Busy"},
            headers=auth_headers,
        ).json()
        test_client.post(
            f"{api_v1_prefix}/posts",
            json={"title": "Filed", "content": "c", "category_ids": [category["id"]]},
            headers=auth_headers,
        )

        response = test_client.delete(
            f"{api_v1_prefix}/categories/{category['id']}",
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json() == {
            "detail": "Cannot delete category with assigned posts",
            "code": "CATEGORY_IN_USE",
        }

    def test_delete_unused(self, test_client, api_v1_prefix, auth_headers):
        category = test_client.post(
            f"{api_v1_prefix}/categories",
            json={"name": "Unused"},
            headers=auth_headers,
        ).json()

        response = test_client.delete(
            f"{api_v1_prefix}/categories/{category['id']}",
            headers=auth_headers,
        )

        assert response.status_code == 204
        assert test_client.get(f"{api_v1_prefix}/categories").json() == []
