"""
End-to-end walk through two users sharing the catalog.
"""
from marketplace.core.config import settings


def test_ann_and_bob(make_client):
	ann, bob = make_client(), make_client()

	response = ann.post("/register", json={"username": "ann", "password": "secret1"})
	assert response.status_code == 201

	response = ann.post("/login", json={"username": "ann", "password": "secret1"})
	assert response.status_code == 200
	assert settings.SESSION_COOKIE_NAME in response.cookies

	response = ann.post("/items", json={"name": "Bike", "price": 100})
	assert response.status_code == 201
	item = response.json()
	assert item["owner"] == "ann"

	response = ann.get("/my-items")
	assert response.status_code == 200
	assert len(response.json()) == 1

	assert bob.post("/register", json={"username": "bob", "password": "secret2"}).status_code == 201
	assert bob.post("/login", json={"username": "bob", "password": "secret2"}).status_code == 200

	response = bob.delete(f"/my-items/{item['id']}")
	assert response.status_code == 404
	assert response.json()["message"] == "Item not found or not yours."

	assert ann.get(f"/items/{item['id']}").status_code == 200
	assert ann.delete(f"/my-items/{item['id']}").status_code == 200
