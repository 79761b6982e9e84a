"""Tests des catégories"""


def test_create_category(client):
    response = client.post("/api/categories", json={"name": "  Garden  "})
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"] == "Garden"
    assert data["id"]
    assert data["createdAt"] == data["updatedAt"]


def test_create_category_without_name(client):
    response = client.post("/api/categories", json={})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Name is required"}


def test_list_categories(client, test_category):
    client.post("/api/categories", json={"name": "Garden"})

    response = client.get("/api/categories")
    assert response.status_code == 200
    names = [c["name"] for c in response.json()["data"]]
    assert names == ["Electronics", "Garden"]


def test_get_category(client, test_category):
    response = client.get(f"/api/categories/{test_category['id']}")
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Electronics"


def test_get_unknown_category(client):
    response = client.get("/api/categories/missing")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Category not found"}


def test_update_category(client, test_category):
    response = client.put(
        f"/api/categories/{test_category['id']}", json={"name": "Consumer electronics"}
    )
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Consumer electronics"


def test_update_category_blank_name(client, test_category):
    response = client.put(f"/api/categories/{test_category['id']}", json={"name": " "})
    assert response.status_code == 400

    fetched = client.get(f"/api/categories/{test_category['id']}").json()["data"]
    assert fetched["name"] == "Electronics"


def test_delete_category(client, test_category):
    response = client.delete(f"/api/categories/{test_category['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Category deleted successfully"}

    assert client.get(f"/api/categories/{test_category['id']}").status_code == 404
    assert client.delete(f"/api/categories/{test_category['id']}").status_code == 404


def test_products_keep_deleted_category_name(client, test_category, test_product):
    client.delete(f"/api/categories/{test_category['id']}")

    product = client.get(f"/api/products/{test_product['id']}").json()["data"]
    assert product["category"] == "Electronics"
