"""Integration tests for /users and /items via TestClient."""

import re

import pytest

from app.exceptions import NotFoundException
from app.services.item_service import ItemService


class TestRegisterEndpoint:
    def test_register(self, client):
        response = client.post("/users", json={"username": "alice", "password": "secret"})

        assert response.status_code == 201
        assert response.json() == {
            "id": 1,
            "username": "alice",
            "message": "User created successfully",
        }

    def test_duplicate_username(self, client, store):
        client.post("/users", json={"username": "alice", "password": "secret"})

        response = client.post("/users", json={"username": "alice", "password": "other"})

        assert response.status_code == 400
        assert response.json() == {"message": "User already exists"}
        assert len(store.users.list_users()) == 1

    def test_missing_password(self, client):
        response = client.post("/users", json={"username": "alice"})

        assert response.status_code == 400

    def test_list_users_is_public_and_hides_passwords(self, client):
        client.post("/users", json={"username": "alice", "password": "secret"})
        client.post("/users", json={"username": "bob", "password": "secret"})

        response = client.get("/users")

        assert response.json() == [
            {"id": 1, "username": "alice"},
            {"id": 2, "username": "bob"},
        ]


class TestLoginEndpoint:
    def test_login_issues_token(self, client):
        client.post("/users", json={"username": "alice", "password": "secret"})

        response = client.post("/users/login", json={"username": "alice", "password": "secret"})

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 1
        assert re.fullmatch(r"token_1_\d+_[a-z0-9]{9}", body["token"])

    def test_unknown_user(self, client):
        response = client.post("/users/login", json={"username": "ghost", "password": "x"})

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid username/password"}

    def test_issued_token_opens_protected_endpoints(self, client):
        client.post("/users", json={"username": "alice", "password": "secret"})
        token = client.post(
            "/users/login", json={"username": "alice", "password": "secret"}
        ).json()["token"]

        response = client.get("/carts", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200


class TestItemsEndpoint:
    def test_seeded_catalog(self, client):
        items = client.get("/items").json()

        assert len(items) == 8
        assert items[0]["id"] == 1
        assert items[0]["name"] == "Laptop"
        assert items[0]["price"] == 999.99
        assert isinstance(items[0]["price"], float)

    def test_add_item(self, client, auth_headers):
        response = client.post(
            "/items",
            json={"name": "Desk Lamp", "price": 24.5},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["id"] == 9
        assert response.json()["price"] == 24.5
        assert response.json()["description"] == ""

    def test_add_item_requires_price(self, client, auth_headers):
        response = client.post("/items", json={"name": "Desk Lamp"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"message": "Name and price required"}

    def test_price_lookup(self, store):
        service = ItemService(store.items)

        assert str(service.get_item(3).price) == "14.99"
        with pytest.raises(NotFoundException):
            service.get_item(999)
