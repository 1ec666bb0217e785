from fastapi.testclient import TestClient


class TestAuthRoutes:

    def test_register_then_login(self, client: TestClient):
        response = client.post("/auth/register", json={
            "name": "Dana", "email": "dana@example.com", "password": "hunter22", "phone": "555-0101",
        })
        assert response.status_code == 201
        assert response.json() == {"message": "Registration successful"}

        response = client.post("/auth/login", json={"email": "dana@example.com", "password": "hunter22"})
        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["token"] == body["access_token"]
        assert body["user"]["email"] == "dana@example.com"
        assert body["user"]["role"] == "participant"

        me = client.get("/users/me", headers={"Authorization": f"Bearer {body['access_token']}"})
        assert me.status_code == 200
        assert me.json()["phone"] == "555-0101"

    def test_duplicate_registration(self, client: TestClient, make_user):
        make_user(email="dana@example.com")
        response = client.post("/auth/register", json={
            "name": "Dana", "email": "dana@example.com", "password": "hunter22",
        })
        assert response.status_code == 400
        assert response.json()["message"] == "Email already exists"

    def test_bad_credentials(self, client: TestClient, make_user):
        make_user(email="dana@example.com")
        response = client.post("/auth/login", json={"email": "dana@example.com", "password": "nope"})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email or password"

    def test_validation_errors_are_400_with_message(self, client: TestClient):
        response = client.post("/auth/register", json={"email": "not-an-email"})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"

    def test_missing_and_invalid_tokens(self, client: TestClient):
        response = client.get("/users/me")
        assert response.status_code == 401
        assert response.json() == {"message": "Authorization required"}

        response = client.get("/users/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid or expired token"}
