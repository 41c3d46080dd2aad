from conftest import auth_headers
from folio.database import Template


def test_unknown_user_profile_is_not_found(client):
    response = client.get("/api/users/does-not-exist")

    assert response.status_code == 404
    assert response.json()["error_code"] == "USER_NOT_FOUND"


def test_partial_update_touches_only_supplied_fields(client, alice):
    user, token = alice
    user_id = user["user_id"]
    first = client.patch(
        f"/api/users/{user_id}",
        json={"bio": "Designer", "phone_number": "+123", "social_media_links": {"github": "https://github.com/a"}},
        headers=auth_headers(token),
    )
    assert first.status_code == 200

    response = client.patch(f"/api/users/{user_id}", json={"bio": "Engineer"}, headers=auth_headers(token))

    assert response.status_code == 200
    profile = response.json()
    assert profile["bio"] == "Engineer"
    assert profile["phone_number"] == "+123"
    assert profile["social_media_links"] == {"github": "https://github.com/a"}
    assert client.get(f"/api/users/{user_id}").json() == profile


def test_explicit_null_clears_field(client, alice):
    user, token = alice
    user_id = user["user_id"]
    client.patch(f"/api/users/{user_id}", json={"bio": "Designer"}, headers=auth_headers(token))

    response = client.patch(f"/api/users/{user_id}", json={"bio": None}, headers=auth_headers(token))

    assert response.status_code == 200
    assert response.json()["bio"] is None


def test_empty_patch_is_rejected(client, alice):
    user, token = alice

    response = client.patch(f"/api/users/{user['user_id']}", json={}, headers=auth_headers(token))

    assert response.status_code == 400
    assert response.json()["error_code"] == "NO_UPDATE_FIELDS"


def test_unknown_keys_are_ignored(client, alice):
    user, token = alice

    response = client.patch(
        f"/api/users/{user['user_id']}",
        json={"bio": "x", "user_id": "someone-else", "password_hash": "pwned"},
        headers=auth_headers(token),
    )

    assert response.status_code == 200
    assert response.json()["user_id"] == user["user_id"]


def test_invalid_contact_email_is_rejected(client, alice):
    user, token = alice

    response = client.patch(
        f"/api/users/{user['user_id']}",
        json={"contact_email": "nope"},
        headers=auth_headers(token),
    )

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "contact_email"


def test_cannot_update_another_users_profile(client, alice, bob):
    user, _ = alice
    _, bob_token = bob

    response = client.patch(f"/api/users/{user['user_id']}", json={"bio": "pwned"}, headers=auth_headers(bob_token))

    assert response.status_code == 403
    assert response.json()["error_code"] == "FORBIDDEN"
    assert client.get(f"/api/users/{user['user_id']}").json()["bio"] is None


def test_ownership_is_checked_before_body_validation(client, alice, bob):
    user, _ = alice
    _, bob_token = bob

    response = client.patch(
        f"/api/users/{user['user_id']}",
        json={"contact_email": "not-an-email"},
        headers=auth_headers(bob_token),
    )

    assert response.status_code == 403


def test_settings_default_to_nulls(client, alice):
    user, _ = alice

    response = client.get(f"/api/users/{user['user_id']}/settings")

    assert response.status_code == 200
    assert response.json() == {
        "user_id": user["user_id"],
        "color_scheme": None,
        "chosen_template": None,
        "font_selection": None,
    }


def test_settings_for_unknown_user(client):
    response = client.get("/api/users/missing/settings")

    assert response.status_code == 404
    assert response.json()["error_code"] == "USER_NOT_FOUND"


def test_settings_upsert_then_partial_update(client, alice):
    user, token = alice
    url = f"/api/users/{user['user_id']}/settings"

    created = client.patch(
        url,
        json={"color_scheme": {"primary": "#000000"}, "font_selection": "Inter"},
        headers=auth_headers(token),
    )
    assert created.status_code == 200

    response = client.patch(url, json={"font_selection": "Roboto"}, headers=auth_headers(token))

    assert response.status_code == 200
    assert response.json()["color_scheme"] == {"primary": "#000000"}
    assert response.json()["font_selection"] == "Roboto"


def test_settings_require_owner(client, alice, bob):
    user, _ = alice
    _, bob_token = bob

    response = client.patch(
        f"/api/users/{user['user_id']}/settings",
        json={"font_selection": "Comic Sans"},
        headers=auth_headers(bob_token),
    )

    assert response.status_code == 403


def test_unknown_template_is_rejected(client, alice):
    user, token = alice

    response = client.patch(
        f"/api/users/{user['user_id']}/settings",
        json={"chosen_template": "no-such-template"},
        headers=auth_headers(token),
    )

    assert response.status_code == 400
    assert response.json()["details"] == [{"field": "chosen_template", "message": "unknown template"}]


async def seed_template(app, template_id, name, layout):
    async with app.state.session_factory() as db:
        db.add(Template(template_id=template_id, name=name, layout=layout))
        await db.commit()


def test_known_template_is_accepted(app, client, alice):
    user, token = alice
    client.portal.call(seed_template, app, "minimal", "Minimal", "single-column")

    response = client.patch(
        f"/api/users/{user['user_id']}/settings",
        json={"chosen_template": "minimal"},
        headers=auth_headers(token),
    )

    assert response.status_code == 200
    assert response.json()["chosen_template"] == "minimal"
    assert client.get("/api/templates").json() == [
        {"template_id": "minimal", "name": "Minimal", "layout": "single-column"}
    ]
