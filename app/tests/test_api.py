def test_read_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == "Server is running"


def test_signup_returns_identity_without_password(client):
    response = client.post("/signup", json={"fullName": "Ann", "email": "a@x.com", "password": "secret1"})

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["message"] == "User registered successfully!"
    assert data["user"]["fullName"] == "Ann"
    assert data["user"]["email"] == "a@x.com"
    assert isinstance(data["user"]["id"], int)
    assert "secret1" not in response.text
    assert "password" not in data["user"]


def test_signup_accepts_missing_fields(client):
    response = client.post("/signup", json={})

    assert response.status_code == 201, response.text
    assert response.json()["user"]["email"] is None
    assert response.json()["user"]["fullName"] is None


def test_signup_allows_duplicate_email(client, registered_user):
    response = client.post("/signup", json={"fullName": "Ann 2", "email": "a@x.com", "password": "other"})

    assert response.status_code == 201
    assert response.json()["user"]["id"] != registered_user["id"]


def test_login_with_correct_credentials(client, registered_user):
    response = client.post("/login", json={"email": "a@x.com", "password": "secret1"})

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["userId"] == registered_user["id"]
    assert data["token"]


def test_login_unknown_email(client, registered_user):
    response = client.post("/login", json={"email": "nobody@x.com", "password": "secret1"})

    assert response.status_code == 400
    assert response.json() == {"detail": "User not found!"}


def test_login_wrong_password(client, registered_user):
    response = client.post("/login", json={"email": "a@x.com", "password": "wrong"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Incorrect password!"}


def test_me_returns_token_owner(client, registered_user):
    token = client.post("/login", json={"email": "a@x.com", "password": "secret1"}).json()["token"]

    response = client.get("/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200, response.text
    assert response.json() == {"id": registered_user["id"], "fullName": "Ann", "email": "a@x.com"}


def test_me_with_invalid_token(client):
    response = client.get("/me", headers={"Authorization": "Bearer invalidToken"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Could not validate credentials"


def test_signup_and_login_with_nul_in_password(client):
    response = client.post("/signup", json={"fullName": "Bo", "email": "b@x.com", "password": "a\u0000b"})

    assert response.status_code == 201, response.text
    login = client.post("/login", json={"email": "b@x.com", "password": "a\u0000b"})
    assert login.status_code == 200
    assert login.json()["userId"] == response.json()["user"]["id"]


def test_signup_with_lone_surrogate_password(client):
    body = '{"email": "c@x.com", "password": "\\ud800"}'

    response = client.post("/signup", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 201, response.text
    login = client.post("/login", content=body, headers={"Content-Type": "application/json"})
    assert login.status_code == 200


def test_login_returns_earliest_user_for_duplicate_email(client, registered_user):
    client.post("/signup", json={"fullName": "Ann 2", "email": "a@x.com", "password": "secret1"})

    response = client.post("/login", json={"email": "a@x.com", "password": "secret1"})

    assert response.json()["userId"] == registered_user["id"]
