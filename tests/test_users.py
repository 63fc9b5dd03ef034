import uuid

from conftest import API, login


def test_login_returns_token(client):
    response = client.post(
        f"{API}/users/login", json={"email": "maker@dfsp1.com", "password": "password"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login Successful"
    assert body["token"]


def test_login_with_wrong_password(client):
    response = client.post(
        f"{API}/users/login", json={"email": "maker@dfsp1.com", "password": "wrong-password"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}


def test_login_with_unknown_email(client):
    response = client.post(
        f"{API}/users/login", json={"email": "nobody@dfsp1.com", "password": "password"})

    assert response.status_code == 401


def test_login_validation(client):
    response = client.post(f"{API}/users/login", json={"email": "not-an-email", "password": "short"})

    assert response.status_code == 422
    fields = {issue["field"] for issue in response.json()["error"]}
    assert {"body.email", "body.password"} <= fields


def test_profile(client, maker_headers):
    response = client.get(f"{API}/users/profile", headers=maker_headers)

    assert response.status_code == 200
    profile = response.json()["data"]
    assert profile["email"] == "maker@dfsp1.com"
    assert profile["role"] == "Maker"
    assert "password" not in profile


def test_logout_invalidates_token(client):
    headers = {"Authorization": f"Bearer {login(client, 'checker@dfsp1.com')}"}

    assert client.post(f"{API}/users/logout", headers=headers).status_code == 200
    assert client.get(f"{API}/users/profile", headers=headers).status_code == 401


def test_list_users_includes_default_users(client, maker_headers):
    response = client.get(f"{API}/users", headers=maker_headers)

    emails = {u["email"] for u in response.json()["data"]}
    assert {"admin@dfsp1.com", "maker@dfsp1.com", "checker@dfsp1.com"} <= emails


def test_admin_can_add_user(client, admin_headers):
    email = f"maker-{uuid.uuid4().hex[:8]}@dfsp1.com"
    payload = {"name": "New Maker", "email": email, "password": "password123", "role": "Maker"}

    response = client.post(f"{API}/users/add", json=payload, headers=admin_headers)

    assert response.status_code == 201, response.text
    assert response.json()["data"]["email"] == email
    assert login(client, email, "password123")

    duplicate = client.post(f"{API}/users/add", json=payload, headers=admin_headers)
    assert duplicate.status_code == 400


def test_non_admin_cannot_add_user(client, maker_headers):
    payload = {"name": "Sneaky", "email": "sneaky@dfsp1.com", "password": "password123"}

    response = client.post(f"{API}/users/add", json=payload, headers=maker_headers)

    assert response.status_code == 403
