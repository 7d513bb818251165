
from datetime import timedelta

from opportunities.core.config import settings
from opportunities.core.security import create_access_token, decode_token


def _register(client, email="sam@example.com", **extra):
    payload = {"email": email, "password": "s3cret-pass", "nickname": "sam", **extra}
    return client.post("/api/auth/register", json=payload)


def test_register_and_login(client):
    registered = _register(client)
    assert registered.status_code == 201
    body = registered.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["nickname"] == "sam"
    assert body["user"]["role"] == "user"

    assert _register(client).status_code == 400

    login = client.post("/api/auth/login", data={"username": "sam@example.com", "password": "s3cret-pass"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "sam@example.com"

    wrong = client.post("/api/auth/login", data={"username": "sam@example.com", "password": "nope"})
    assert wrong.status_code == 401


def test_admin_registration_needs_secret(client):
    payload = {"email": "boss@example.com", "password": "s3cret-pass", "adminSecret": "guess"}
    assert client.post("/api/auth/admin/register", json=payload).status_code == 403

    payload["adminSecret"] = settings.ADMIN_SECRET_KEY
    response = client.post("/api/auth/admin/register", json=payload)
    assert response.status_code == 201
    assert response.json()["user"]["role"] == "admin"


def test_tokens(client, user):
    assert decode_token(create_access_token(user.id)) == user.id
    assert decode_token("not-a-token") is None

    expired = create_access_token(user.id, expires_delta=timedelta(minutes=-1))
    response = client.get("/api/auth/user", headers={"Authorization": f"Bearer {expired}"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_profile_update_syncs_contributor_fields(client, db, make_listing, user, other_user, user_headers):
    owned = [
        make_listing("tutoring", user_id=user.id, contributor_nickname="ada"),
        make_listing("camp", user_id=user.id, contributor_nickname="ada"),
        make_listing("event", user_id=user.id, contributor_nickname="ada"),
    ]
    foreign = make_listing("job", user_id=other_user.id, contributor_nickname="grace")

    response = client.patch(
        "/api/auth/user",
        json={"nickname": "countess", "lastName": "King", "schoolName": "Analytical High"},
        headers=user_headers,
    )
    assert response.status_code == 200
    assert response.json()["nickname"] == "countess"
    assert response.json()["schoolName"] == "Analytical High"

    for listing in owned:
        db.refresh(listing)
        assert listing.contributor_nickname == "countess"
        assert listing.contributor_last_name == "King"
    db.refresh(foreign)
    assert foreign.contributor_nickname == "grace"


def test_profile_update_without_name_changes_leaves_listings(client, db, make_listing, user, user_headers):
    listing = make_listing("service", user_id=user.id, contributor_nickname="ada")
    client.patch("/api/auth/user", json={"grade": "11"}, headers=user_headers)
    db.refresh(listing)
    assert listing.contributor_nickname == "ada"
