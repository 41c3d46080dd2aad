from conftest import auth_headers


def test_analytics_lazily_created_with_zeroed_counters(client, alice):
    user, token = alice

    response = client.get(f"/api/analytics/{user['user_id']}", headers=auth_headers(token))

    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == user["user_id"]
    assert body["visit_count"] == 0
    assert body["popular_projects"] == {}
    assert body["interaction_data"] == {"views": 0, "comments": 0, "contacts": 0}

    again = client.get(f"/api/analytics/{user['user_id']}", headers=auth_headers(token)).json()
    assert again["analytics_id"] == body["analytics_id"]


def test_analytics_are_private(client, alice, bob):
    user, _ = alice
    _, bob_token = bob

    response = client.get(f"/api/analytics/{user['user_id']}", headers=auth_headers(bob_token))

    assert response.status_code == 403


def test_contact_message_increments_contacts(client, alice):
    user, token = alice

    response = client.post(
        f"/api/contact/{user['user_id']}",
        json={"visitor_email": "fan@example.com", "visitor_message": "Hire you?"},
    )

    assert response.status_code == 200
    assert response.json()["message"]
    analytics = client.get(f"/api/analytics/{user['user_id']}", headers=auth_headers(token)).json()
    assert analytics["interaction_data"]["contacts"] == 1

    messages = client.get(f"/api/users/{user['user_id']}/messages", headers=auth_headers(token)).json()
    assert len(messages) == 1
    assert messages[0]["visitor_email"] == "fan@example.com"
    assert messages[0]["visitor_message"] == "Hire you?"


def test_contact_unknown_user(client):
    response = client.post("/api/contact/missing", json={"visitor_message": "Hello"})

    assert response.status_code == 404
    assert response.json()["error_code"] == "USER_NOT_FOUND"


def test_contact_validates_email(client, alice):
    user, _ = alice

    response = client.post(
        f"/api/contact/{user['user_id']}",
        json={"visitor_email": "nope", "visitor_message": "Hello"},
    )

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "visitor_email"


def test_messages_are_private(client, alice, bob):
    user, _ = alice
    _, bob_token = bob

    response = client.get(f"/api/users/{user['user_id']}/messages", headers=auth_headers(bob_token))

    assert response.status_code == 403


def test_visits_count_and_track_project_views(client, alice):
    user, token = alice
    project = client.post(
        f"/api/users/{user['user_id']}/projects",
        json={"title": "Site"},
        headers=auth_headers(token),
    ).json()

    assert client.post(f"/api/analytics/{user['user_id']}/visits").status_code == 204
    assert client.post(
        f"/api/analytics/{user['user_id']}/visits",
        json={"project_id": project["project_id"]},
    ).status_code == 204

    analytics = client.get(f"/api/analytics/{user['user_id']}", headers=auth_headers(token)).json()
    assert analytics["visit_count"] == 2
    assert analytics["popular_projects"] == {project["project_id"]: 1}
    assert analytics["interaction_data"]["views"] == 1


def test_visit_for_foreign_project_is_rejected(client, alice, bob):
    user, _ = alice
    bob_user, bob_token = bob
    project = client.post(
        f"/api/users/{bob_user['user_id']}/projects",
        json={"title": "Bob's"},
        headers=auth_headers(bob_token),
    ).json()

    response = client.post(f"/api/analytics/{user['user_id']}/visits", json={"project_id": project["project_id"]})

    assert response.status_code == 404
    assert response.json()["error_code"] == "PROJECT_NOT_FOUND"


def test_visit_unknown_user(client):
    response = client.post("/api/analytics/missing/visits")

    assert response.status_code == 404
