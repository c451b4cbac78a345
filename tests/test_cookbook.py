"""Cookbook API tests."""

import uuid
from datetime import UTC, datetime

from cook_mastery.models import CookbookEntry


def create_entry(client, headers, title="Banana Bread", url=None, notes=None):
    payload = {"url": url or f"https://recipes.example.com/{title.lower().replace(' ', '-')}"}
    payload["title"] = title
    if notes is not None:
        payload["notes"] = notes
    response = client.post("/api/cookbook", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_entry(client, auth_headers):
    """Test saving a recipe link."""
    entry = create_entry(client, auth_headers, notes="Use very ripe bananas")
    assert entry["title"] == "Banana Bread"
    assert entry["url"] == "https://recipes.example.com/banana-bread"
    assert entry["notes"] == "Use very ripe bananas"
    assert entry["user_id"] == auth_headers.user_id


def test_create_entry_validation(client, auth_headers):
    """Test invalid url and blank title are rejected."""
    response = client.post(
        "/api/cookbook", headers=auth_headers, json={"url": "not a url", "title": "X"}
    )
    assert response.status_code == 400
    assert "url" in response.json()["error"]["details"]

    response = client.post(
        "/api/cookbook",
        headers=auth_headers,
        json={"url": "https://example.com/recipe", "title": "   "},
    )
    assert response.status_code == 400
    assert "title" in response.json()["error"]["details"]


def test_url_is_stored_as_submitted(client, auth_headers):
    """Test URLs round-trip without normalisation."""
    url = "https://Example.com"
    entry = create_entry(client, auth_headers, "Mixed Case Host", url=url)
    assert entry["url"] == url

    fetched = client.get(f"/api/cookbook/{entry['id']}", headers=auth_headers).json()
    assert fetched["url"] == url

    new_url = "https://Recipes.Example.com/Banana%20Bread?src=Share"
    response = client.patch(
        f"/api/cookbook/{entry['id']}", headers=auth_headers, json={"url": new_url}
    )
    assert response.status_code == 200
    assert response.json()["url"] == new_url


def test_update_rejects_invalid_url(client, auth_headers):
    """Test url updates are still validated."""
    entry = create_entry(client, auth_headers)
    response = client.patch(
        f"/api/cookbook/{entry['id']}", headers=auth_headers, json={"url": "ftp://example.com/x"}
    )
    assert response.status_code == 400
    assert "url" in response.json()["error"]["details"]


def test_list_sorted_by_title(client, auth_headers):
    """Test title_asc ordering and pagination metadata."""
    create_entry(client, auth_headers, "Banana Bread")
    create_entry(client, auth_headers, "Apple Pie")

    response = client.get(
        "/api/cookbook", headers=auth_headers, params={"sort": "title_asc", "page": 1, "limit": 2}
    )
    assert response.status_code == 200
    data = response.json()
    assert [e["title"] for e in data["entries"]] == ["Apple Pie", "Banana Bread"]
    assert data["pagination"] == {"page": 1, "limit": 2, "total_items": 2, "total_pages": 1}


def test_list_newest_and_oldest(client, db, auth_headers):
    """Test created_at ordering in both directions."""
    user_id = uuid.UUID(auth_headers.user_id)
    for day, title in ((1, "First"), (2, "Second"), (3, "Third")):
        created = datetime(2026, 3, day, tzinfo=UTC)
        db.add(
            CookbookEntry(
                user_id=user_id,
                url=f"https://example.com/{day}",
                title=title,
                created_at=created,
                updated_at=created,
            )
        )
    db.commit()

    newest = client.get("/api/cookbook", headers=auth_headers, params={"sort": "newest"})
    assert [e["title"] for e in newest.json()["entries"]] == ["Third", "Second", "First"]

    oldest = client.get("/api/cookbook", headers=auth_headers, params={"sort": "oldest"})
    assert [e["title"] for e in oldest.json()["entries"]] == ["First", "Second", "Third"]


def test_equal_titles_paginate_stably(client, auth_headers):
    """Test identical sort keys never repeat or skip across pages."""
    for _ in range(5):
        create_entry(client, auth_headers, "Same Title", url=f"https://example.com/{uuid.uuid4()}")

    ids = []
    for page in (1, 2, 3):
        response = client.get(
            "/api/cookbook",
            headers=auth_headers,
            params={"sort": "title_asc", "page": page, "limit": 2},
        )
        ids.extend(e["id"] for e in response.json()["entries"])

    assert len(ids) == 5
    assert len(set(ids)) == 5
    assert ids == sorted(ids, key=lambda i: uuid.UUID(i).hex)


def test_list_is_scoped_to_owner(client, auth_headers, other_auth_headers):
    """Test users only see their own entries."""
    create_entry(client, auth_headers, "Mine")
    create_entry(client, other_auth_headers, "Theirs")

    response = client.get("/api/cookbook", headers=auth_headers)
    assert [e["title"] for e in response.json()["entries"]] == ["Mine"]


def test_get_entry(client, auth_headers):
    """Test reading one entry."""
    entry = create_entry(client, auth_headers)
    response = client.get(f"/api/cookbook/{entry['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == entry


def test_partial_update(client, auth_headers):
    """Test only provided fields change."""
    entry = create_entry(client, auth_headers, notes="Original notes")

    response = client.patch(
        f"/api/cookbook/{entry['id']}", headers=auth_headers, json={"title": "Best Banana Bread"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Best Banana Bread"
    assert data["url"] == entry["url"]
    assert data["notes"] == "Original notes"


def test_update_can_clear_notes(client, auth_headers):
    """Test notes can be explicitly nulled."""
    entry = create_entry(client, auth_headers, notes="Remove me")
    response = client.patch(
        f"/api/cookbook/{entry['id']}", headers=auth_headers, json={"notes": None}
    )
    assert response.status_code == 200
    assert response.json()["notes"] is None


def test_update_with_no_fields_is_rejected(client, auth_headers):
    """Test an empty update body is a validation error."""
    entry = create_entry(client, auth_headers)
    response = client.patch(f"/api/cookbook/{entry['id']}", headers=auth_headers, json={})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_update_rejects_null_title(client, auth_headers):
    """Test required columns cannot be nulled."""
    entry = create_entry(client, auth_headers)
    response = client.patch(
        f"/api/cookbook/{entry['id']}", headers=auth_headers, json={"title": None}
    )
    assert response.status_code == 400


def test_other_users_entry_is_not_found(client, auth_headers, other_auth_headers):
    """Test another user's entry is indistinguishable from a missing one."""
    entry = create_entry(client, other_auth_headers, "Secret Recipe")
    path = f"/api/cookbook/{entry['id']}"

    assert client.get(path, headers=auth_headers).status_code == 404
    assert client.patch(path, headers=auth_headers, json={"title": "Mine now"}).status_code == 404
    assert client.delete(path, headers=auth_headers).status_code == 404

    missing = client.get(f"/api/cookbook/{uuid.uuid4()}", headers=auth_headers)
    assert missing.json() == client.get(path, headers=auth_headers).json()

    # Still intact for the owner
    response = client.get(path, headers=other_auth_headers)
    assert response.status_code == 200
    assert response.json()["title"] == "Secret Recipe"


def test_delete_entry(client, auth_headers):
    """Test delete succeeds once and then reports not found."""
    entry = create_entry(client, auth_headers)
    path = f"/api/cookbook/{entry['id']}"

    response = client.delete(path, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Cookbook entry deleted successfully"

    assert client.delete(path, headers=auth_headers).status_code == 404
    assert client.get(path, headers=auth_headers).status_code == 404


def test_cookbook_requires_auth(client):
    """Test cookbook writes need a signed-in user."""
    response = client.post(
        "/api/cookbook", json={"url": "https://example.com/x", "title": "Anon"}
    )
    assert response.status_code == 401
