from __future__ import annotations


def test_register_login_and_profile_flow(client) -> None:
    register_payload = {
        "email": "tester@example.com",
        "password": "SecretPass123",
        "full_name": "Test User",
        "education_level": "BSc",
        "experience_level": "Fresher",
        "career_track": "Web Development",
    }
    register_response = client.post("/auth/register", json=register_payload)
    assert register_response.status_code == 201
    created_user = register_response.json()
    assert created_user["email"] == register_payload["email"]
    assert "password" not in created_user
    assert "password_hash" not in created_user

    login_payload = {"email": register_payload["email"], "password": register_payload["password"]}
    login_response = client.post("/auth/login", json=login_payload)
    assert login_response.status_code == 200
    token_body = login_response.json()
    assert token_body["token_type"] == "bearer"

    headers = {"Authorization": f"Bearer {token_body['access_token']}"}
    me = client.get("/users/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["full_name"] == "Test User"
    assert me.json()["is_admin"] is False

    update_payload = {"skills": "Python, SQL", "target_roles": "Data Analyst", "cv_text": "Worked on SQL reports."}
    update_response = client.put("/users/me/profile", json=update_payload, headers=headers)
    assert update_response.status_code == 200
    profile = update_response.json()
    assert profile["skills"] == "Python, SQL"
    assert profile["target_roles"] == "Data Analyst"
    assert profile["career_track"] == "Web Development"

    read_back = client.get("/users/me/profile", headers=headers)
    assert read_back.status_code == 200
    assert read_back.json()["cv_text"] == "Worked on SQL reports."


def test_register_rejects_duplicates_and_short_passwords(client) -> None:
    payload = {"email": "dup@example.com", "password": "SecretPass123", "full_name": "Dup"}
    assert client.post("/auth/register", json=payload).status_code == 201
    again = client.post("/auth/register", json=payload)
    assert again.status_code == 400

    short = client.post("/auth/register", json={"email": "short@example.com", "password": "123", "full_name": "S"})
    assert short.status_code == 422

    nameless = client.post("/auth/register", json={"email": "anon@example.com", "password": "SecretPass123"})
    assert nameless.status_code == 422


def test_login_with_wrong_password(client) -> None:
    client.post("/auth/register", json={"email": "a@example.com", "password": "SecretPass123", "full_name": "A"})
    r = client.post("/auth/login", json={"email": "a@example.com", "password": "wrong-password"})
    assert r.status_code == 401


def test_protected_routes_require_token(client) -> None:
    assert client.get("/dashboard").status_code == 401
    assert client.get("/jobs").status_code == 401
    bad = client.get("/users/me", headers={"Authorization": "Bearer not-a-token"})
    assert bad.status_code == 401


def test_admin_flag_reflects_allowlist(client, auth_headers) -> None:
    headers = auth_headers("admin@example.com")
    me = client.get("/users/me", headers=headers)
    assert me.json()["is_admin"] is True
