"""Integration tests for registration, login and account lookups via TestClient."""

from protean import current_domain

from caterly.identity.registration import RegisterAccount


class TestRegisterEndpoint:
    def test_register_user(self, client):
        response = client.post(
            "/auth/register",
            json={"username": "ada", "phone": "+1-555-0100", "password": "s3cret-pass"},
        )
        assert response.status_code == 201
        assert "account_id" in response.json()

    def test_caterer_without_business_is_400(self, client):
        response = client.post(
            "/auth/register",
            json={"username": "rosa", "phone": "+1-555-0200", "password": "s3cret-pass", "role": "caterer"},
        )
        assert response.status_code == 400

    def test_duplicate_phone_is_400(self, client, signup):
        signup(phone="+1-555-0100")
        response = client.post(
            "/auth/register",
            json={"username": "again", "phone": "+1-555-0100", "password": "s3cret-pass"},
        )
        assert response.status_code == 400

    def test_unknown_role_is_422(self, client):
        response = client.post(
            "/auth/register",
            json={"username": "x", "phone": "+1-555-0300", "password": "s3cret-pass", "role": "admin"},
        )
        assert response.status_code == 422


class TestLoginEndpoint:
    def test_login_returns_token_and_account(self, client, signup):
        account_id, _ = signup(phone="+1-555-0100", password="s3cret-pass")
        response = client.post("/auth/login", json={"phone": "+1-555-0100", "password": "s3cret-pass"})
        assert response.status_code == 200
        data = response.json()
        assert data["token"]
        assert data["account"]["account_id"] == account_id
        assert "password_hash" not in data["account"]

    def test_bad_credentials_are_400(self, client, signup):
        signup(phone="+1-555-0100", password="s3cret-pass")
        response = client.post("/auth/login", json={"phone": "+1-555-0100", "password": "wrong"})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid phone or password"


class TestMeEndpoint:
    def test_me_returns_profile(self, client, signup):
        account_id, headers = signup(role="caterer")
        response = client.get("/auth/me", headers=headers)
        assert response.status_code == 200
        data = response.json()
        assert data["account_id"] == account_id
        assert data["role"] == "caterer"
        assert data["business_name"]

    def test_missing_token_is_401(self, client):
        assert client.get("/auth/me").status_code == 401

    def test_forged_token_is_401(self, client):
        response = client.get("/auth/me", headers={"Authorization": "Bearer abc.def"})
        assert response.status_code == 401

    def test_non_ascii_token_is_401(self, client):
        response = client.get("/auth/me", headers={"Authorization": "Bearer caf\u00e9.abc".encode()})
        assert response.status_code == 401


class TestAccountLookups:
    def test_list_caterers_only(self, client, signup):
        caterer_id, _ = signup(role="caterer")
        signup(role="user")
        response = client.get("/caterers")
        assert [c["account_id"] for c in response.json()] == [caterer_id]

    def test_get_caterer(self, client, signup):
        caterer_id, _ = signup(role="caterer")
        assert client.get(f"/caterers/{caterer_id}").status_code == 200

    def test_user_is_not_a_caterer(self, client, signup):
        user_id, _ = signup(role="user")
        assert client.get(f"/caterers/{user_id}").status_code == 404

    def test_get_user(self, client, signup):
        user_id, _ = signup(role="user")
        response = client.get(f"/users/{user_id}")
        assert response.status_code == 200
        assert "password_hash" not in response.json()

    def test_unknown_user_is_404(self, client):
        assert client.get("/users/does-not-exist").status_code == 404

    def test_every_caterer_is_listed(self, client):
        for n in range(105):
            command = RegisterAccount(
                username=f"kitchen-{n}",
                phone=f"+1-555-7{n:03d}",
                password_hash="pbkdf2_sha256$1$00$00",
                role="caterer",
                business_name=f"Kitchen {n}",
                business_address=f"{n} Canal Road",
            )
            current_domain.process(command, asynchronous=False)

        assert len(client.get("/caterers").json()) == 105


class TestFavoritesEndpoints:
    def test_add_list_remove(self, client, signup):
        _, caterer_headers = signup(role="caterer")
        _, user_headers = signup(role="user")
        recipe_id = client.post(
            "/recipes",
            json={"name": "Suya", "description": "Spiced beef skewers", "price": 8},
            headers=caterer_headers,
        ).json()["recipe_id"]

        assert client.post(f"/favorites/{recipe_id}", headers=user_headers).status_code == 201
        assert client.post(f"/favorites/{recipe_id}", headers=user_headers).status_code == 400

        favorites = client.get("/favorites", headers=user_headers).json()
        assert [f["recipe_id"] for f in favorites] == [recipe_id]

        assert client.delete(f"/favorites/{recipe_id}", headers=user_headers).status_code == 200
        assert client.get("/favorites", headers=user_headers).json() == []

    def test_favorites_require_login(self, client):
        assert client.get("/favorites").status_code == 401
