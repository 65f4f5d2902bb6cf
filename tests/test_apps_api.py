"""
Tests for app endpoints
"""
import pytest


@pytest.fixture
def created_app(client, signed_in_user):
    response = client.post(
        "/apps/new",
        data={
            "user_id": signed_in_user["user_id"],
            "name": "summarizer",
            "dust_api_project_id": "12",
            "description": "Summarizes long documents",
        },
    )
    assert response.status_code == 200
    return response.json()


def test_create_app(created_app, signed_in_user):
    assert created_app["name"] == "summarizer"
    assert created_app["description"] == "Summarizes long documents"
    assert created_app["visibility"] == "private"
    assert created_app["dust_api_project_id"] == "12"
    assert created_app["user_id"] == signed_in_user["user_id"]
    assert len(created_app["u_id"]) == 64
    assert created_app["s_id"] == created_app["u_id"][:10]


def test_create_app_for_missing_user(client):
    response = client.post(
        "/apps/new",
        data={"user_id": "ghost", "name": "x", "dust_api_project_id": "1"},
    )
    assert response.status_code == 404


def test_create_app_requires_project_id(client, signed_in_user):
    response = client.post(
        "/apps/new",
        data={"user_id": signed_in_user["user_id"], "name": "x"},
    )
    assert response.status_code == 422


def test_list_apps(client, signed_in_user, created_app):
    client.post(
        "/apps/new",
        data={
            "user_id": signed_in_user["user_id"],
            "name": "translator",
            "dust_api_project_id": "13",
            "visibility": "public",
        },
    )
    response = client.get(f"/apps/user/{signed_in_user['user_id']}")
    assert response.status_code == 200
    apps = response.json()
    assert {app["name"] for app in apps} == {"summarizer", "translator"}
    assert {app["visibility"] for app in apps} == {"private", "public"}


def test_get_app_includes_specification(client, created_app):
    response = client.get(f"/apps/{created_app['id']}")
    assert response.status_code == 200
    assert response.json()["saved_specification"] is None


def test_update_app(client, created_app):
    response = client.patch(
        "/apps/update",
        data={"app_id": created_app["id"], "name": "digest", "visibility": "public"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "digest"
    assert data["visibility"] == "public"
    assert data["description"] == "Summarizes long documents"


def test_save_specification(client, created_app):
    spec = "input INPUT {}\nllm MODEL {}\n"
    response = client.patch(
        "/apps/specification",
        data={"app_id": created_app["id"], "saved_specification": spec},
    )
    assert response.status_code == 200
    assert response.json()["saved_specification"] == spec
    assert client.get(f"/apps/{created_app['id']}").json()["saved_specification"] == spec


def test_update_missing_app(client):
    response = client.patch("/apps/update", data={"app_id": "nope", "name": "x"})
    assert response.status_code == 404


def test_delete_app(client, signed_in_user, created_app):
    response = client.delete(f"/apps/delete/{created_app['id']}")
    assert response.status_code == 200
    assert client.get(f"/apps/{created_app['id']}").status_code == 404
    assert client.get(f"/apps/user/{signed_in_user['user_id']}").json() == []
    # Owner survives
    assert client.get(f"/users/{signed_in_user['user_id']}").status_code == 200


@pytest.mark.parametrize("visibility", ["banana", "PUBLIC", "deleted"])
def test_create_app_rejects_unknown_visibility(client, signed_in_user, visibility):
    response = client.post(
        "/apps/new",
        data={
            "user_id": signed_in_user["user_id"],
            "name": "x",
            "dust_api_project_id": "1",
            "visibility": visibility,
        },
    )
    assert response.status_code == 422
    assert client.get(f"/apps/user/{signed_in_user['user_id']}").json() == []


def test_update_app_rejects_unknown_visibility(client, created_app):
    response = client.patch(
        "/apps/update",
        data={"app_id": created_app["id"], "visibility": "banana"},
    )
    assert response.status_code == 422
    assert client.get(f"/apps/{created_app['id']}").json()["visibility"] == "private"


def test_clear_description(client, created_app):
    response = client.patch(
        "/apps/update",
        data={"app_id": created_app["id"], "clear_description": "true"},
    )
    assert response.status_code == 200
    assert response.json()["description"] is None
    assert client.get(f"/apps/{created_app['id']}").json()["description"] is None


def test_empty_description_leaves_it_unchanged(client, created_app):
    response = client.patch(
        "/apps/update",
        data={"app_id": created_app["id"], "description": ""},
    )
    assert response.status_code == 200
    assert response.json()["description"] == "Summarizes long documents"
