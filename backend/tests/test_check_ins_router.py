"""Tests for check-in endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from models.progress import CheckIn
from models.user import User
from services.exceptions import RemoteCallFailed
from services.gateway import RemoteDataGateway


@pytest.mark.integration
class TestCheckIn:
    """Test POST /api/v1/check-ins endpoint."""

    def test_check_in_awards_points_and_refreshes_progress(
        self, client: TestClient, catalog: dict, auth_headers: dict
    ):
        response = client.post(
            "/api/v1/check-ins",
            json={"location_id": "loc-wat-arun", "mission_id": "m-arun-climb"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["check_in"]["points_earned"] == 10
        assert data["completed_mission_ids"] == ["m-arun-climb"]
        assert data["progress"]["completed_points"] == 10
        assert data["progress"]["total_points"] == 30
        assert data["progress"]["is_complete"] is False

    def test_completing_all_missions(self, client: TestClient, catalog: dict, auth_headers: dict):
        client.post(
            "/api/v1/check-ins",
            json={"location_id": "loc-wat-arun", "mission_id": "m-arun-climb"},
            headers=auth_headers,
        )
        response = client.post(
            "/api/v1/check-ins",
            json={"location_id": "loc-wat-arun", "mission_id": "m-arun-porcelain"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["completed_mission_ids"] == ["m-arun-climb", "m-arun-porcelain"]
        assert data["progress"]["is_complete"] is True
        assert data["progress"]["completion_ratio"] == 1.0

    def test_repeat_check_in_returns_409_without_backend_call(
        self, client: TestClient, db_session: Session, catalog: dict, auth_headers: dict
    ):
        payload = {"location_id": "loc-wat-arun", "mission_id": "m-arun-climb"}
        client.post("/api/v1/check-ins", json=payload, headers=auth_headers)

        with patch.object(RemoteDataGateway, "handle_check_in") as mock_procedure:
            response = client.post("/api/v1/check-ins", json=payload, headers=auth_headers)

        assert response.status_code == 409
        assert response.json()["detail"]["error"] == "already_completed"
        mock_procedure.assert_not_called()
        assert db_session.query(CheckIn).count() == 1

    def test_concurrent_duplicate_returns_409(
        self, client: TestClient, db_session: Session, catalog: dict, auth_headers: dict
    ):
        payload = {"location_id": "loc-wat-arun", "mission_id": "m-arun-climb"}
        client.post("/api/v1/check-ins", json=payload, headers=auth_headers)

        # History read before the first check-in landed: only the constraint catches it
        with patch.object(RemoteDataGateway, "list_check_ins", return_value=[]):
            response = client.post("/api/v1/check-ins", json=payload, headers=auth_headers)

        assert response.status_code == 409
        assert response.json()["detail"]["error"] == "already_completed"
        assert db_session.query(CheckIn).count() == 1

    def test_unauthenticated_returns_401_without_backend_call(
        self, client: TestClient, db_session: Session, catalog: dict
    ):
        with patch.object(RemoteDataGateway, "handle_check_in") as mock_procedure:
            response = client.post(
                "/api/v1/check-ins",
                json={"location_id": "loc-wat-arun", "mission_id": "m-arun-climb"},
            )

        assert response.status_code == 401
        mock_procedure.assert_not_called()
        assert db_session.query(CheckIn).count() == 0

    def test_inactive_mission_returns_404(self, client: TestClient, catalog: dict, auth_headers: dict):
        response = client.post(
            "/api/v1/check-ins",
            json={"location_id": "loc-wat-pho", "mission_id": "m-pho-retired"},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "check_in_failed"

    def test_backend_failure_returns_503(self, client: TestClient, catalog: dict, auth_headers: dict):
        with patch.object(
            RemoteDataGateway, "handle_check_in", side_effect=RemoteCallFailed("down")
        ):
            response = client.post(
                "/api/v1/check-ins",
                json={"location_id": "loc-wat-arun", "mission_id": "m-arun-climb"},
                headers=auth_headers,
            )

        assert response.status_code == 503
        assert response.json()["detail"]["error"] == "check_in_failed"

    def test_empty_ids_rejected(self, client: TestClient, auth_headers: dict):
        response = client.post(
            "/api/v1/check-ins",
            json={"location_id": "", "mission_id": "m"},
            headers=auth_headers,
        )

        assert response.status_code == 422


@pytest.mark.integration
class TestCheckInHistory:
    """Test GET /api/v1/check-ins endpoint."""

    def test_lists_only_own_check_ins(
        self,
        client: TestClient,
        db_session: Session,
        catalog: dict,
        test_user: User,
        other_user: User,
        auth_headers: dict,
    ):
        gateway = RemoteDataGateway(db_session)
        gateway.handle_check_in(test_user.id, "loc-wat-arun", "m-arun-climb")
        gateway.handle_check_in(other_user.id, "loc-grand-palace", "m-palace-buddha")

        response = client.get("/api/v1/check-ins", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["mission"]["title"] == "Climb the prang"
        assert data[0]["location"]["name"] == "Wat Arun"

    def test_returns_401_unauthenticated(self, client: TestClient):
        response = client.get("/api/v1/check-ins")

        assert response.status_code == 401
