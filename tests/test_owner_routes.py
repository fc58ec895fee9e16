"""
PetCarePlus Backend: Owner Route Tests
========================================

What:  /api/owners CRUD through the real app against SQLite.
"""

import pytest

OWNER = {
    "owner_id": 1,
    "first_name": "Jane",
    "last_name": "Doe",
    "phone": "905-555-0100",
    "email": "jane@example.com",
    "address": "1 King St",
}


class TestOwnerCrud:

    @pytest.mark.asyncio
    async def test_create_and_get(self, admin_client):
        response = await admin_client.post("/api/owners", json=OWNER)
        assert response.status_code == 201
        assert response.json() == {"message": "Owner created", "owner_id": 1}

        response = await admin_client.get("/api/owners/1")
        assert response.status_code == 200
        assert response.json() == OWNER

    @pytest.mark.asyncio
    async def test_optional_fields_default_to_empty(self, admin_client):
        body = {"owner_id": "7", "first_name": "Sam", "last_name": "Lee", "email": "sam@x.io"}
        response = await admin_client.post("/api/owners", json=body)
        assert response.status_code == 201
        assert response.json()["owner_id"] == 7

        owner = (await admin_client.get("/api/owners/7")).json()
        assert owner["phone"] == ""
        assert owner["address"] == ""

    @pytest.mark.asyncio
    async def test_list_is_ordered_by_id(self, admin_client):
        for owner_id in (3, 1, 2):
            body = {**OWNER, "owner_id": owner_id}
            assert (await admin_client.post("/api/owners", json=body)).status_code == 201

        response = await admin_client.get("/api/owners")
        assert [o["owner_id"] for o in response.json()] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_update_overwrites_fields(self, admin_client):
        await admin_client.post("/api/owners", json=OWNER)
        update = {"first_name": "Janet", "last_name": "Doe", "email": "janet@example.com"}

        response = await admin_client.put("/api/owners/1", json=update)
        assert response.status_code == 200
        assert response.json() == {"message": "Owner updated"}

        owner = (await admin_client.get("/api/owners/1")).json()
        assert owner["first_name"] == "Janet"
        assert owner["email"] == "janet@example.com"
        assert owner["phone"] == ""

    @pytest.mark.asyncio
    async def test_delete(self, admin_client):
        await admin_client.post("/api/owners", json=OWNER)

        response = await admin_client.delete("/api/owners/1")
        assert response.status_code == 200
        assert response.json() == {"message": "Owner deleted"}

        response = await admin_client.get("/api/owners/1")
        assert response.status_code == 404
        assert response.json() == {"error": "Owner not found"}


class TestOwnerErrors:

    @pytest.mark.asyncio
    async def test_get_missing_is_404(self, user_client):
        response = await user_client.get("/api/owners/99")
        assert response.status_code == 404
        assert response.json() == {"error": "Owner not found"}

    @pytest.mark.asyncio
    async def test_non_integer_path_id_is_400(self, user_client):
        response = await user_client.get("/api/owners/abc")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid owner_id"}

    @pytest.mark.asyncio
    async def test_update_missing_is_404(self, admin_client):
        update = {"first_name": "A", "last_name": "B", "email": "a@b.co"}
        response = await admin_client.put("/api/owners/42", json=update)
        assert response.status_code == 404
        assert response.json() == {"error": "Owner not found"}

    @pytest.mark.asyncio
    async def test_delete_missing_is_404(self, admin_client):
        response = await admin_client.delete("/api/owners/42")
        assert response.status_code == 404
        assert response.json() == {"error": "Owner not found"}

    @pytest.mark.asyncio
    async def test_duplicate_id_is_database_error(self, admin_client):
        assert (await admin_client.post("/api/owners", json=OWNER)).status_code == 201
        response = await admin_client.post("/api/owners", json=OWNER)
        assert response.status_code == 500
        assert response.json() == {"error": "Database error"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("owner_id", [None, "abc", 1.5, True])
    async def test_non_integer_owner_id_is_400(self, admin_client, owner_id):
        response = await admin_client.post("/api/owners", json={**OWNER, "owner_id": owner_id})
        assert response.status_code == 400
        assert response.json() == {"error": "owner_id must be an integer"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["first_name", "last_name", "email"])
    async def test_required_fields(self, admin_client, missing):
        body = {k: v for k, v in OWNER.items() if k != missing}
        response = await admin_client.post("/api/owners", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "first_name, last_name, and email are required"}

    @pytest.mark.asyncio
    async def test_blank_name_is_required_error(self, admin_client):
        response = await admin_client.post("/api/owners", json={**OWNER, "first_name": "  "})
        assert response.status_code == 400
        assert response.json() == {"error": "first_name, last_name, and email are required"}

    @pytest.mark.asyncio
    async def test_bad_email_on_update(self, admin_client):
        await admin_client.post("/api/owners", json=OWNER)
        response = await admin_client.put("/api/owners/1", json={**OWNER, "email": "jane.example.com"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email format"}

    @pytest.mark.asyncio
    async def test_user_cannot_create(self, user_client):
        response = await user_client.post("/api/owners", json=OWNER)
        assert response.status_code == 403
        assert response.json() == {"error": "Forbidden: insufficient role"}

        response = await user_client.get("/api/owners")
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_validation_runs_after_role_check(self, user_client):
        response = await user_client.post("/api/owners", json={})
        assert response.status_code == 403


class TestOutOfRangeIds:
    """Ids no INTEGER key column can hold are simply not found."""

    HUGE = "99999999999999999999"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("owner_id", [HUGE, "3000000000", "-2147483649"])
    async def test_delete_is_404(self, admin_client, owner_id):
        response = await admin_client.delete(f"/api/owners/{owner_id}")
        assert response.status_code == 404
        assert response.json() == {"error": "Owner not found"}

    @pytest.mark.asyncio
    async def test_get_is_404(self, user_client):
        response = await user_client.get(f"/api/owners/{self.HUGE}")
        assert response.status_code == 404
        assert response.json() == {"error": "Owner not found"}

    @pytest.mark.asyncio
    async def test_update_is_404(self, admin_client):
        update = {"first_name": "A", "last_name": "B", "email": "a@b.co"}
        response = await admin_client.put(f"/api/owners/{self.HUGE}", json=update)
        assert response.status_code == 404
        assert response.json() == {"error": "Owner not found"}

    @pytest.mark.asyncio
    async def test_largest_key_is_still_stored(self, admin_client):
        body = {**OWNER, "owner_id": 2147483647}
        assert (await admin_client.post("/api/owners", json=body)).status_code == 201
        response = await admin_client.get("/api/owners/2147483647")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_create_with_unstorable_key_is_database_error(self, admin_client):
        body = {**OWNER, "owner_id": int(self.HUGE)}
        response = await admin_client.post("/api/owners", json=body)
        assert response.status_code == 500
        assert response.json() == {"error": "Database error"}


class TestNumericTextFields:

    @pytest.mark.asyncio
    async def test_numeric_phone_is_stored_as_text(self, admin_client):
        response = await admin_client.post("/api/owners", json={**OWNER, "phone": 9055550100})
        assert response.status_code == 201

        owner = (await admin_client.get("/api/owners/1")).json()
        assert owner["phone"] == "9055550100"

    @pytest.mark.asyncio
    async def test_numeric_address_on_update(self, admin_client):
        await admin_client.post("/api/owners", json=OWNER)
        response = await admin_client.put("/api/owners/1", json={**OWNER, "address": 42})
        assert response.status_code == 200
        assert (await admin_client.get("/api/owners/1")).json()["address"] == "42"

    @pytest.mark.asyncio
    async def test_numeric_email_is_format_error(self, admin_client):
        response = await admin_client.post("/api/owners", json={**OWNER, "email": 12345})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email format"}
