from fastapi.testclient import TestClient


class TestEventRoutes:

    def test_admin_creates_event_and_rules_default_to_empty(self, client: TestClient, admin, auth_headers):
        response = client.post(
            "/events",
            json={"title": "Hack", "start_datetime": "2025-01-01T10:00", "capacity": 1},
            headers=auth_headers(admin),
        )
        assert response.status_code == 201
        event_id = response.json()["id"]

        event = client.get(f"/events/{event_id}").json()
        assert event["rules"] == ""
        assert event["registration_status"] == "open"
        assert all(e["rules"] is not None for e in client.get("/events").json())

    def test_participant_cannot_write_events(self, client: TestClient, make_user, make_event, auth_headers):
        headers = auth_headers(make_user())
        event = make_event()

        response = client.post("/events", json={"title": "X", "start_datetime": "2025-01-01T10:00"}, headers=headers)
        assert response.status_code == 403
        assert response.json() == {"message": "Forbidden"}
        assert client.delete(f"/events/{event.id}", headers=headers).status_code == 403
        assert client.delete(f"/events/{event.id}").status_code == 401

    def test_update_requires_title_and_start(self, client: TestClient, admin, make_event, auth_headers):
        event = make_event()
        response = client.put(f"/events/{event.id}", json={"venue": "Hall"}, headers=auth_headers(admin))
        assert response.status_code == 400

        response = client.put(
            f"/events/{event.id}",
            json={"title": "Hack v2", "start_datetime": "2025-02-01T09:00", "rules": "Be nice"},
            headers=auth_headers(admin),
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Hack v2"
        assert response.json()["rules"] == "Be nice"

    def test_missing_event(self, client: TestClient, admin, auth_headers):
        assert client.get("/events/999").json() == {"message": "Event not found"}
        assert client.get("/events/999").status_code == 404
        assert client.delete("/events/999", headers=auth_headers(admin)).status_code == 404

    def test_sorting_and_count(self, client: TestClient, make_event):
        make_event(title="Zulu")
        make_event(title="Alpha")
        titles = [e["title"] for e in client.get("/events", params={"sortBy": "alphabetical"}).json()]
        assert titles == ["Alpha", "Zulu"]
        assert client.get("/events/count").json() == {"count": 2}

    def test_delete_event(self, client: TestClient, admin, make_event, auth_headers):
        event = make_event()
        response = client.delete(f"/events/{event.id}", headers=auth_headers(admin))
        assert response.status_code == 200
        assert response.json() == {"message": "Event deleted successfully"}
        assert client.get("/events/count").json() == {"count": 0}
