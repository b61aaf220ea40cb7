"""Tests for the read-only users router."""

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from src.user_directory.core.services import DbSessionService


class TestListUsers:
    def test_lists_seeded_demo_user(self, client: TestClient):
        response = client.get("/users")

        assert response.status_code == 200
        assert response.json() == [{"id": 1, "email": "demo@localhost", "role": "USER"}]

    def test_password_hash_never_exposed(self, client: TestClient):
        response = client.get("/users")

        assert all("password_hash" not in user for user in response.json())

    def test_empty_directory(
        self,
        client_factory: Callable[[DbSessionService], TestClient],
        db_service: DbSessionService,
    ):
        response = client_factory(db_service).get("/users")

        assert response.status_code == 200
        assert response.json() == []


class TestGetUserById:
    def test_found(self, client: TestClient):
        response = client.get("/users/1")

        assert response.status_code == 200
        assert response.json() == {"id": 1, "email": "demo@localhost", "role": "USER"}

    def test_not_found(self, client: TestClient):
        response = client.get("/users/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    @pytest.mark.parametrize("user_id", [2**70, -(2**70), 2**63])
    def test_id_outside_64_bit_range_rejected(self, client: TestClient, user_id: int):
        response = client.get(f"/users/{user_id}")

        assert response.status_code == 422

    def test_largest_id_is_a_plain_miss(self, client: TestClient):
        response = client.get(f"/users/{2**63 - 1}")

        assert response.status_code == 404

    def test_non_integer_id_rejected(self, client: TestClient):
        response = client.get("/users/abc")

        assert response.status_code == 422


class TestGetUserByEmail:
    def test_found(self, client: TestClient):
        response = client.get("/users/by-email", params={"email": "demo@localhost"})

        assert response.status_code == 200
        assert response.json()["id"] == 1

    def test_match_is_exact(self, client: TestClient):
        response = client.get("/users/by-email", params={"email": "DEMO@localhost"})

        assert response.status_code == 404

    def test_not_found(self, client: TestClient):
        response = client.get("/users/by-email", params={"email": "missing@x.com"})

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_email_required(self, client: TestClient):
        response = client.get("/users/by-email")

        assert response.status_code == 422


class TestStorageUnavailable:
    def test_lookups_return_503(
        self,
        client_factory: Callable[[DbSessionService], TestClient],
        tableless_db_service: DbSessionService,
    ):
        client = client_factory(tableless_db_service)

        for path, params in [
            ("/users", None),
            ("/users/1", None),
            ("/users/by-email", {"email": "demo@localhost"}),
        ]:
            response = client.get(path, params=params)

            assert response.status_code == 503
            assert response.json() == {"detail": "User storage unavailable"}
