from fastapi.testclient import TestClient


class TestSessionRoutes:

    def test_sessions_are_listed_in_start_order(self, client: TestClient, admin, make_event, auth_headers):
        event = make_event()
        headers = auth_headers(admin)
        for title, start in (("Closing", "2025-01-01T17:00"), ("Kickoff", "2025-01-01T10:00")):
            response = client.post(
                "/sessions",
                json={"event_id": event.id, "title": title, "start_time": start},
                headers=headers,
            )
            assert response.status_code == 201

        sessions = client.get(f"/sessions/event/{event.id}").json()
        assert [s["title"] for s in sessions] == ["Kickoff", "Closing"]
        assert client.get("/sessions/count").json() == {"count": 2}

        response = client.delete(f"/sessions/{sessions[0]['id']}", headers=headers)
        assert response.status_code == 200
        assert client.get("/sessions/count").json() == {"count": 1}

    def test_session_validation(self, client: TestClient, admin, make_event, auth_headers):
        event = make_event()
        response = client.post(
            "/sessions",
            json={"event_id": event.id, "title": "Bad", "start_time": "2025-01-01T10:00", "end_time": "2025-01-01T09:00"},
            headers=auth_headers(admin),
        )
        assert response.status_code == 400

        response = client.post(
            "/sessions",
            json={"event_id": 999, "title": "Orphan", "start_time": "2025-01-01T10:00"},
            headers=auth_headers(admin),
        )
        assert response.status_code == 404
