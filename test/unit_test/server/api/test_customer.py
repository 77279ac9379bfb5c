"""
Unit tests for customer registration and login.

Tests cover:
- Registration with valid data, duplicate emails and missing fields
- Login with valid credentials, wrong passwords and inactive accounts
"""

import bcrypt
import pytest
from httpx import AsyncClient

from venuease.core.database.entities import Customer

pytestmark = pytest.mark.asyncio

REGISTER = {
    "full_name": "Ada Lovelace",
    "email": "Ada@Example.com",
    "password": "secret123",
    "phone": "555-0100",
}


class TestRegisterCustomer:
    async def test_register_success(self, client: AsyncClient, repos):
        response = await client.post("/api/customer/register", json=REGISTER)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Customer registered successfully"
        assert data["email"] == "ada@example.com"
        assert data["full_name"] == "Ada Lovelace"
        assert "password" not in data

        stored = await repos.customers.get_by_id(data["customer_id"])
        assert stored.password_hash.startswith("$2b$10$")

    async def test_register_duplicate_email(self, client: AsyncClient):
        await client.post("/api/customer/register", json=REGISTER)

        response = await client.post("/api/customer/register", json={**REGISTER, "email": "ada@example.com"})

        assert response.status_code == 400
        assert response.json()["error"] == "Customer already exists with this email"

    async def test_register_missing_fields(self, client: AsyncClient):
        response = await client.post("/api/customer/register", json={"email": "ada@example.com"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"].startswith("Invalid request")
        assert any("full_name" in detail for detail in body["details"])

    async def test_register_invalid_email(self, client: AsyncClient):
        response = await client.post("/api/customer/register", json={**REGISTER, "email": "not-an-email"})
        assert response.status_code == 400


class TestLoginCustomer:
    async def test_login_success(self, client: AsyncClient):
        registered = (await client.post("/api/customer/register", json=REGISTER)).json()

        response = await client.post(
            "/api/customer/login", json={"email": "ADA@example.com", "password": "secret123"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["user_id"] == registered["customer_id"]
        assert data["user"]["user_type"] == "customer"
        assert data["user"]["phone"] == "555-0100"

    async def test_login_wrong_password(self, client: AsyncClient):
        await client.post("/api/customer/register", json=REGISTER)

        response = await client.post("/api/customer/login", json={"email": "ada@example.com", "password": "nope"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email or password"}

    async def test_login_unknown_email(self, client: AsyncClient):
        response = await client.post("/api/customer/login", json={"email": "ghost@example.com", "password": "x"})
        assert response.status_code == 400

    async def test_login_inactive_customer(self, client: AsyncClient):
        registered = (await client.post("/api/customer/register", json=REGISTER)).json()
        await client.put(f"/api/admin/customers/{registered['customer_id']}/status", json={"is_active": False})

        response = await client.post("/api/customer/login", json={"email": "ada@example.com", "password": "secret123"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid email or password"

    async def test_login_with_existing_bcrypt_account(self, client: AsyncClient, repos):
        """Accounts created by the previous backend carry cost-10 ``$2b$`` hashes."""
        password_hash = bcrypt.hashpw(b"secret123", bcrypt.gensalt(10)).decode("ascii")
        customer = await repos.customers.create(
            Customer(full_name="Grace Hopper", email="grace@example.com", password_hash=password_hash)
        )

        response = await client.post("/api/customer/login", json={"email": "grace@example.com", "password": "secret123"})

        assert response.status_code == 200
        assert response.json()["user"]["user_id"] == customer.customer_id
