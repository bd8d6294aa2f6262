"""
Tests for Adoption API endpoints.

Tests cover:
- Registering interest (available / unavailable / unknown pet)
- Status workflow, including approval moving the pet to in_process
- Listing, per pet / per user reads and stats
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from typing import Dict, Any

from database.models import UserORM, PetORM, AdoptionInterestORM
from tests.conftest import make_pet


@pytest.fixture
def interest_payload(pet: PetORM) -> Dict[str, Any]:
    return {
        "pet_id": pet.id,
        "user_name": "João Santos",
        "user_email": "joao@email.com",
        "user_phone": "(21) 97777-6666",
        "message": "Looking for a dog for my family.",
    }


class TestRegisterInterest:
    """Tests for POST /adoption/interest."""

    def test_register_interest(self, client: TestClient, interest_payload: Dict[str, Any]):
        response = client.post("/adoption/interest", json=interest_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Interest registered successfully"
        assert isinstance(data["interestId"], int)

        stored = client.get(f"/adoption/interest/{data['interestId']}").json()
        assert stored["status"] == "pending"
        assert stored["pet_name"] == "Luna"
        assert stored["pet_image"] == "https://img.example.com/luna.jpg"

    def test_register_interest_with_user(
        self, client: TestClient, interest_payload: Dict[str, Any], user: UserORM
    ):
        interest_payload["user_id"] = user.id
        response = client.post("/adoption/interest", json=interest_payload)

        assert response.status_code == 201
        assert len(client.get(f"/adoption/user/{user.id}").json()) == 1

    def test_register_interest_blank_name(
        self, client: TestClient, interest_payload: Dict[str, Any]
    ):
        interest_payload["user_name"] = "   "
        response = client.post("/adoption/interest", json=interest_payload)

        assert response.status_code == 400
        assert response.json()["error"].startswith("user_name:")

    def test_register_interest_trims_name(
        self, client: TestClient, interest_payload: Dict[str, Any]
    ):
        interest_payload["user_name"] = "  João Santos "
        interest_id = client.post("/adoption/interest", json=interest_payload).json()["interestId"]

        stored = client.get(f"/adoption/interest/{interest_id}").json()
        assert stored["user_name"] == "João Santos"

    def test_register_interest_unknown_pet(
        self, client: TestClient, interest_payload: Dict[str, Any]
    ):
        interest_payload["pet_id"] = 9999
        response = client.post("/adoption/interest", json=interest_payload)

        assert response.status_code == 404
        assert response.json() == {"error": "Pet not found"}

    @pytest.mark.parametrize("status", ["adopted", "in_process"])
    def test_register_interest_unavailable_pet(
        self,
        client: TestClient,
        db_session: Session,
        interest_payload: Dict[str, Any],
        status: str,
    ):
        unavailable = make_pet(db_session, name="Taken", status=status)
        interest_payload["pet_id"] = unavailable.id

        response = client.post("/adoption/interest", json=interest_payload)

        assert response.status_code == 400
        assert response.json() == {"error": "This pet is not available for adoption"}

    def test_register_interest_missing_fields(self, client: TestClient, pet: PetORM):
        response = client.post("/adoption/interest", json={"pet_id": pet.id})

        assert response.status_code == 400
        error = response.json()["error"]
        assert "user_name" in error and "user_email" in error

    def test_register_interest_invalid_email(
        self, client: TestClient, interest_payload: Dict[str, Any]
    ):
        interest_payload["user_email"] = "not-an-email"
        response = client.post("/adoption/interest", json=interest_payload)

        assert response.status_code == 400
        assert "user_email" in response.json()["error"]


class TestInterestStatus:
    """Tests for PUT /adoption/{id}/status."""

    def test_mark_contacted(
        self, client: TestClient, interest: AdoptionInterestORM, pet: PetORM
    ):
        response = client.put(
            f"/adoption/{interest.id}/status",
            json={"status": "contacted", "notes": "Called on Monday"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Status updated successfully"
        assert data["interest"]["status"] == "contacted"
        assert data["interest"]["notes"] == "Called on Monday"
        assert client.get(f"/pets/{pet.id}").json()["status"] == "available"

    def test_approve_moves_pet_to_in_process(
        self, client: TestClient, interest: AdoptionInterestORM, pet: PetORM
    ):
        before = client.get(f"/pets/{pet.id}").json()

        response = client.put(f"/adoption/{interest.id}/status", json={"status": "approved"})

        assert response.status_code == 200
        assert response.json()["interest"]["status"] == "approved"
        after = client.get(f"/pets/{pet.id}").json()
        assert after["status"] == "in_process"
        # solo cambian status y updated_at
        for key in set(before) - {"status", "updated_at"}:
            assert after[key] == before[key]

    def test_approve_leaves_adopted_pet_untouched(
        self,
        client: TestClient,
        db_session: Session,
        interest: AdoptionInterestORM,
        pet: PetORM,
    ):
        pet.status = "adopted"
        db_session.commit()

        client.put(f"/adoption/{interest.id}/status", json={"status": "approved"})

        assert client.get(f"/pets/{pet.id}").json()["status"] == "adopted"

    def test_invalid_status(self, client: TestClient, interest: AdoptionInterestORM):
        response = client.put(f"/adoption/{interest.id}/status", json={"status": "maybe"})

        assert response.status_code == 400

    def test_unknown_interest(self, client: TestClient):
        response = client.put("/adoption/9999/status", json={"status": "rejected"})

        assert response.status_code == 404
        assert response.json() == {"error": "Adoption interest not found"}


class TestInterestReads:
    """Tests for the adoption read endpoints."""

    def test_list_with_status_filter(
        self, client: TestClient, interest: AdoptionInterestORM, interest_payload: Dict[str, Any]
    ):
        client.post("/adoption/interest", json=interest_payload)
        client.put(f"/adoption/{interest.id}/status", json={"status": "rejected"})

        all_items = client.get("/adoption/").json()
        rejected = client.get("/adoption/", params={"status": "rejected"}).json()
        limited = client.get("/adoption/", params={"limit": 1}).json()

        assert len(all_items) == 2
        assert [i["id"] for i in rejected] == [interest.id]
        assert len(limited) == 1
        assert limited[0]["user_name"] == "João Santos"

    @pytest.mark.parametrize("key", ["status", "limit", "offset"])
    def test_empty_query_param_counts_as_absent(
        self, client: TestClient, interest: AdoptionInterestORM, key: str
    ):
        response = client.get(f"/adoption/?{key}=")

        assert response.status_code == 200
        assert [i["id"] for i in response.json()] == [interest.id]

    def test_by_pet(self, client: TestClient, interest: AdoptionInterestORM, pet: PetORM):
        response = client.get(f"/adoption/pet/{pet.id}")

        assert [i["id"] for i in response.json()] == [interest.id]

    def test_get_interest_not_found(self, client: TestClient):
        response = client.get("/adoption/interest/9999")

        assert response.status_code == 404

    def test_stats(self, client: TestClient, interest: AdoptionInterestORM):
        client.put(f"/adoption/{interest.id}/status", json={"status": "contacted"})

        response = client.get("/adoption/stats")

        assert response.json() == {
            "total_interests": 1,
            "pending": 0,
            "contacted": 1,
            "approved": 0,
            "rejected": 0,
        }
