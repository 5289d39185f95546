import uuid

from donorhub.models.blog import Blog


def _create_blog(client, **overrides) -> str:
    payload = {
        "title": "Why donate blood?",
        "thumbnail": "https://i.ibb.co/thumb.png",
        "content": "<p>One donation can save up to three lives.</p>",
        "createdBy": "admin@bloodbank.org",
    }
    payload.update(overrides)
    response = client.post("/content-management/blog", json=payload)
    assert response.status_code == 201
    return response.json()["data"]["blogId"]


def test_create_blog_starts_as_draft(client):
    blog_id = _create_blog(client)

    response = client.get(f"/content-management/blogs/{blog_id}")
    assert response.status_code == 200
    blog = response.json()["data"]
    assert blog["status"] == "draft"
    assert blog["createdBy"] == "admin@bloodbank.org"
    assert blog["updatedAt"] is None


def test_create_blog_requires_title(client, db_session):
    response = client.post("/content-management/blog", json={"content": "body only"})
    assert response.status_code == 400
    assert db_session.query(Blog).count() == 0


def test_list_blogs_with_status_filter(client):
    first = _create_blog(client, title="First")
    _create_blog(client, title="Second")
    client.patch(f"/content-management/blogs/{first}/publish")

    data = client.get("/content-management/blogs").json()["data"]
    assert data["count"] == 2

    data = client.get("/content-management/blogs", params={"status": "published"}).json()["data"]
    assert [blog["id"] for blog in data["blogs"]] == [first]

    assert client.get("/content-management/blogs", params={"status": "archived"}).status_code == 400


def test_publish_and_unpublish(client, db_session):
    blog_id = _create_blog(client)

    response = client.patch(f"/content-management/blogs/{blog_id}/publish")
    assert response.status_code == 200

    again = client.patch(f"/content-management/blogs/{blog_id}/publish")
    assert again.status_code == 404
    assert again.json()["error_code"] == "BLOG_NOT_FOUND_OR_PUBLISHED"
    assert db_session.get(Blog, blog_id).status == "published"

    response = client.patch(f"/content-management/blogs/{blog_id}/unpublish")
    assert response.status_code == 200

    again = client.patch(f"/content-management/blogs/{blog_id}/unpublish")
    assert again.status_code == 404
    assert again.json()["error_code"] == "BLOG_NOT_FOUND_OR_UNPUBLISHED"


def test_publish_missing_blog_matches_already_published(client):
    response = client.patch(f"/content-management/blogs/{uuid.uuid4().hex}/publish")
    assert response.status_code == 404
    assert response.json()["error_code"] == "BLOG_NOT_FOUND_OR_PUBLISHED"


def test_update_blog_overwrites_fields(client):
    blog_id = _create_blog(client)

    response = client.put(
        f"/content-management/blogs/{blog_id}",
        json={"title": "Updated", "content": "New body"},
    )
    assert response.status_code == 200
    blog = response.json()["data"]
    assert blog["title"] == "Updated"
    assert blog["thumbnail"] is None
    assert blog["createdBy"] is None
    assert blog["updatedAt"] is not None
    assert blog["status"] == "draft"

    missing = client.put(
        f"/content-management/blogs/{uuid.uuid4().hex}",
        json={"title": "Nope", "content": "Nope"},
    )
    assert missing.status_code == 404


def test_delete_blog(client, db_session):
    blog_id = _create_blog(client)
    client.patch(f"/content-management/blogs/{blog_id}/publish")

    assert client.delete(f"/content-management/blogs/{blog_id}").status_code == 200
    assert client.delete(f"/content-management/blogs/{blog_id}").status_code == 404
    assert client.get(f"/content-management/blogs/{blog_id}").status_code == 404
    assert client.delete("/content-management/blogs/xyz").status_code == 400
    assert db_session.query(Blog).count() == 0
