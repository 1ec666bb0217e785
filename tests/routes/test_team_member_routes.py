import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def setup(client: TestClient, make_user, make_event, auth_headers):
    captain = make_user(name="Carol", email="carol@example.com")
    invitee = make_user(name="Ivan", email="ivan@example.com")
    event = make_event()
    captain_headers = auth_headers(captain)
    team_id = client.post("/teams", json={"name": "Alpha", "event_id": event.id}, headers=captain_headers).json()["id"]
    return {
        "team_id": team_id,
        "captain_headers": captain_headers,
        "invitee_headers": auth_headers(invitee),
    }


def _invite(client, setup, email="ivan@example.com"):
    return client.post(
        "/team-members/invite",
        json={"team_id": setup["team_id"], "user_email": email},
        headers=setup["captain_headers"],
    )


class TestInvitationFlow:

    def test_invite_accept_and_repeat_invites(self, client: TestClient, setup):
        response = _invite(client, setup)
        assert response.status_code == 201
        invitation_id = response.json()["invitation_id"]

        again = _invite(client, setup)
        assert again.status_code == 400
        assert again.json()["message"] == "Invitation already sent to this user"

        invitations = client.get("/team-members/my-invitations", headers=setup["invitee_headers"]).json()
        assert [(i["id"], i["team_name"], i["invited_by_name"]) for i in invitations] == [(invitation_id, "Alpha", "Carol")]

        # Only the addressed user may decide
        response = client.put(f"/team-members/accept/{invitation_id}", headers=setup["captain_headers"])
        assert response.status_code == 403

        response = client.put(f"/team-members/accept/{invitation_id}", headers=setup["invitee_headers"])
        assert response.status_code == 200
        assert response.json() == {"message": "Invitation accepted successfully"}

        response = client.put(f"/team-members/reject/{invitation_id}", headers=setup["invitee_headers"])
        assert response.status_code == 400
        assert response.json() == {"message": "Invitation already processed"}

        member_again = _invite(client, setup)
        assert member_again.status_code == 400
        assert member_again.json()["message"] == "User is already a team member"

        my_teams = client.get("/team-members/my-teams", headers=setup["invitee_headers"]).json()
        assert [t["team_name"] for t in my_teams] == ["Alpha"]

        roster = client.get(f"/team-members/team/{setup['team_id']}").json()
        assert [(m["name"], m["role"]) for m in roster] == [("Carol", "Leader"), ("Ivan", "Member")]

    def test_rejected_invitation_can_be_resent(self, client: TestClient, setup):
        invitation_id = _invite(client, setup).json()["invitation_id"]
        response = client.put(f"/team-members/reject/{invitation_id}", headers=setup["invitee_headers"])
        assert response.status_code == 200

        response = _invite(client, setup)
        assert response.status_code == 200
        assert response.json() == {"message": "Invitation resent successfully", "invitation_id": invitation_id}
        roster = client.get(f"/team-members/team/{setup['team_id']}").json()
        assert {m["name"]: m["status"] for m in roster}["Ivan"] == "pending"

    def test_invite_errors(self, client: TestClient, setup):
        assert _invite(client, setup, email="carol@example.com").status_code == 400
        assert _invite(client, setup, email="ghost@example.com").status_code == 404

        response = client.post(
            "/team-members/invite",
            json={"team_id": setup["team_id"], "user_email": "carol@example.com"},
            headers=setup["invitee_headers"],
        )
        assert response.status_code == 403

        response = client.post("/team-members/invite", json={"team_id": setup["team_id"]}, headers=setup["captain_headers"])
        assert response.status_code == 400


class TestLeavingAndRemoval:

    def _join(self, client, setup):
        invitation_id = _invite(client, setup).json()["invitation_id"]
        client.put(f"/team-members/accept/{invitation_id}", headers=setup["invitee_headers"])
        return invitation_id

    def test_member_leaves(self, client: TestClient, setup):
        self._join(client, setup)
        response = client.delete(f"/team-members/leave/{setup['team_id']}", headers=setup["invitee_headers"])
        assert response.status_code == 200
        assert response.json() == {"message": "You have left the team"}

        response = client.delete(f"/team-members/leave/{setup['team_id']}", headers=setup["captain_headers"])
        assert response.status_code == 400

    def test_captain_removes_member_but_not_self(self, client: TestClient, setup):
        member_id = self._join(client, setup)
        roster = client.get(f"/team-members/team/{setup['team_id']}").json()
        leader_id = next(m["id"] for m in roster if m["role"] == "Leader")

        response = client.delete(f"/team-members/{leader_id}", headers=setup["captain_headers"])
        assert response.status_code == 400
        assert response.json() == {"message": "Cannot remove team captain"}

        response = client.delete(f"/team-members/{member_id}", headers=setup["captain_headers"])
        assert response.status_code == 200
        assert client.delete(f"/team-members/{member_id}", headers=setup["captain_headers"]).status_code == 404
