"""
/api/categories end to end over the in-memory database.
"""
import uuid


def _create(client, name, parent_uid=None):
    payload = {"name": name}
    if parent_uid is not None:
        payload["parentCategoryUid"] = parent_uid
    response = client.post("/api/categories", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_list_is_no_content_when_empty(client):
    assert client.get("/api/categories").status_code == 204


def test_create_and_fetch(admin_client):
    created = _create(admin_client, "Shoes")

    response = admin_client.get(f"/api/categories/{created['uid']}")

    assert response.status_code == 200
    assert response.json()["name"] == "Shoes"
    assert response.json()["parentCategoryUid"] is None
    assert "id" not in response.json()


def test_unknown_category_is_not_found(client):
    response = client.get(f"/api/categories/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.content == b""


def test_create_with_unknown_parent_is_not_found(admin_client):
    response = admin_client.post(
        "/api/categories", json={"name": "Boots", "parentCategoryUid": str(uuid.uuid4())}
    )

    assert response.status_code == 404
    assert admin_client.get("/api/categories").status_code == 204


def test_subcategories(admin_client):
    shoes = _create(admin_client, "Shoes")
    boots = _create(admin_client, "Boots", shoes["uid"])

    response = admin_client.get(f"/api/categories/{shoes['uid']}/subcategories")

    assert response.status_code == 200
    assert [c["uid"] for c in response.json()] == [boots["uid"]]
    assert response.json()[0]["parentCategoryUid"] == shoes["uid"]
    assert admin_client.get(f"/api/categories/{boots['uid']}/subcategories").status_code == 204


def test_reparenting_under_a_descendant_is_rejected(admin_client):
    shoes = _create(admin_client, "Shoes")
    boots = _create(admin_client, "Boots", shoes["uid"])
    winter = _create(admin_client, "Winter boots", boots["uid"])

    response = admin_client.put(
        f"/api/categories/{shoes['uid']}",
        json={"name": "Shoes", "parentCategoryUid": winter["uid"]},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_FAILURE"
    assert response.json()["errors"][0]["field"] == "parentCategoryUid"


def test_category_cannot_be_its_own_parent(admin_client):
    shoes = _create(admin_client, "Shoes")

    response = admin_client.put(
        f"/api/categories/{shoes['uid']}",
        json={"name": "Shoes", "parentCategoryUid": shoes["uid"]},
    )

    assert response.status_code == 400


def test_update_replaces_fields(admin_client):
    shoes = _create(admin_client, "Shoes")
    admin_client.put(
        f"/api/categories/{shoes['uid']}",
        json={"name": "Shoes", "description": "All shoes", "icon": "shoe"},
    )

    response = admin_client.put(f"/api/categories/{shoes['uid']}", json={"name": "Footwear"})

    assert response.status_code == 200
    body = response.json()
    assert body["uid"] == shoes["uid"]
    assert body["name"] == "Footwear"
    assert body["description"] is None
    assert body["icon"] is None


def test_delete_detaches_children(admin_client):
    shoes = _create(admin_client, "Shoes")
    boots = _create(admin_client, "Boots", shoes["uid"])

    assert admin_client.delete(f"/api/categories/{shoes['uid']}").status_code == 204

    assert admin_client.get(f"/api/categories/{shoes['uid']}").status_code == 404
    child = admin_client.get(f"/api/categories/{boots['uid']}").json()
    assert child["parentCategoryUid"] is None


def test_delete_unknown_category_is_not_found(admin_client):
    assert admin_client.delete(f"/api/categories/{uuid.uuid4()}").status_code == 404


def test_products_by_category_end_to_end(admin_client):
    shoes = _create(admin_client, "Shoes")
    empty = _create(admin_client, "Empty")
    admin_client.post("/api/products", json={"name": "Sneaker", "categoryUids": [shoes["uid"]]})

    assert admin_client.get(f"/api/products/by-category/{shoes['uid']}").status_code == 200
    assert admin_client.get(f"/api/products/by-category/{empty['uid']}").status_code == 204
    assert admin_client.get(f"/api/products/by-category/{uuid.uuid4()}").status_code == 404


def test_writes_require_authentication(client):
    assert client.post("/api/categories", json={"name": "Shoes"}).status_code == 401
