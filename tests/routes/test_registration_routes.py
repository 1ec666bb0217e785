from fastapi.testclient import TestClient


class TestRegistrationRoutes:

    def test_capacity_scenario(self, client: TestClient, admin, make_user, auth_headers):
        response = client.post(
            "/events",
            json={"title": "Hack", "start_datetime": "2025-01-01T10:00", "capacity": 1},
            headers=auth_headers(admin),
        )
        event_id = response.json()["id"]

        first = client.post("/registrations", json={"event_id": event_id}, headers=auth_headers(make_user()))
        assert first.status_code == 201
        assert first.json()["message"] == "Registered successfully"

        second = client.post("/registrations", json={"event_id": event_id}, headers=auth_headers(make_user()))
        assert second.status_code == 400
        assert second.json() == {"message": "Event is full"}

    def test_duplicate_is_conflict(self, client: TestClient, make_user, make_event, auth_headers):
        event = make_event()
        headers = auth_headers(make_user())
        assert client.post("/registrations", json={"event_id": event.id}, headers=headers).status_code == 201

        response = client.post("/registrations", json={"event_id": event.id}, headers=headers)
        assert response.status_code == 409
        assert response.json() == {"message": "Already registered"}

    def test_my_registrations_and_cancel(self, client: TestClient, make_user, make_event, auth_headers):
        event = make_event(title="Hack", venue="Hall B")
        owner_headers = auth_headers(make_user())
        registration_id = client.post("/registrations", json={"event_id": event.id}, headers=owner_headers).json()["id"]

        mine = client.get("/registrations/my", headers=owner_headers).json()
        assert [(r["id"], r["event_name"], r["venue"], r["status"]) for r in mine] == [
            (registration_id, "Hack", "Hall B", "registered"),
        ]

        stranger = client.delete(f"/registrations/{registration_id}", headers=auth_headers(make_user()))
        assert stranger.status_code == 403
        assert stranger.json() == {"message": "Not allowed"}

        response = client.delete(f"/registrations/{registration_id}", headers=owner_headers)
        assert response.status_code == 200
        assert client.get("/registrations/my", headers=owner_headers).json() == []
        assert client.delete(f"/registrations/{registration_id}", headers=owner_headers).status_code == 404

    def test_missing_event_id(self, client: TestClient, make_user, auth_headers):
        response = client.post("/registrations", json={}, headers=auth_headers(make_user()))
        assert response.status_code == 400
