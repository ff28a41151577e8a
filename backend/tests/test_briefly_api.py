"""
HTTP surface: register -> generate -> credits -> brief history.

Uses the in-process TestClient; BRIEFLY_STORAGE=memory (set in conftest).
"""

FORM = {
    "clientName": "Acme Bakery",
    "clientEmail": "owner@acmebakery.ng",
    "projectType": "Website Design",
    "budget": 250000,
    "timeline": "6 weeks",
    "goals": "Take orders online",
    "brandPersonality": "modern",
}


def _headers(token):
    return {"Authorization": f"Bearer {token}"}


class TestPublicEndpoints:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health(self, client):
        body = client.get("/api/health").json()
        assert body["storage"] == "memory"
        assert body["users"] == 0
        assert body["briefs"] == 0

    def test_categories(self, client):
        body = client.get("/api/briefs/categories").json()
        assert body["success"] is True
        assert [c["name"] for c in body["categories"]] == ["Logo Design", "Website Design", "Brand Identity"]


class TestAuthEndpoints:

    def test_register_grants_credits(self, client, register_user):
        token, body = register_user("ada@example.com")
        assert body["success"] is True
        assert body["credits"] == 5
        assert body["user"]["email"] == "ada@example.com"

    def test_register_with_referral(self, client, register_user):
        _, body = register_user("ben@example.com", referral_code="FRIEND")
        assert body["credits"] == 10

    def test_register_validation_error(self, client):
        response = client.post("/api/auth/register", json={"name": "Ada", "email": "ada", "password": "secret123"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Valid email is required"

    def test_login(self, client, register_user):
        register_user("ada@example.com", password="secret123")
        response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})
        assert response.status_code == 200
        assert response.json()["credits"] == 5

    def test_login_bad_password(self, client, register_user):
        register_user("ada@example.com", password="secret123")
        response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "nope-nope"})
        assert response.status_code == 401


class TestGenerateEndpoint:

    def test_generate_debits_one_credit(self, client, register_user):
        token, _ = register_user("ada@example.com")

        response = client.post("/api/briefs/generate", json={"formData": FORM}, headers=_headers(token))

        assert response.status_code == 200, response.text
        body = response.json()
        assert body["success"] is True
        assert body["creditsRemaining"] == 4
        brief = body["data"]
        assert brief["title"] == "Website Design Brief for Acme Bakery"
        assert brief["category"] == "Website Design"
        assert [line["amount"] for line in brief["sections"]["budget"]["breakdown"]] == [150000, 50000, 37500, 12500]
        assert brief["sections"]["timeline"]["total_duration"] == "6 weeks"

        credits = client.get("/api/user/credits", headers=_headers(token)).json()
        assert credits == {"success": True, "credits": 4}

    def test_generate_accepts_top_level_fields(self, client, register_user):
        token, _ = register_user("ada@example.com")
        response = client.post("/api/briefs/generate", json=FORM, headers=_headers(token))
        assert response.status_code == 200
        assert response.json()["creditsRemaining"] == 4

    def test_generate_requires_auth(self, client):
        response = client.post("/api/briefs/generate", json={"formData": FORM})
        assert response.status_code == 401

    def test_generate_rejects_invalid_token(self, client):
        response = client.post(
            "/api/briefs/generate", json={"formData": FORM}, headers=_headers("garbage")
        )
        assert response.status_code == 401

    def test_invalid_intake_keeps_credits(self, client, register_user):
        token, _ = register_user("ada@example.com")
        response = client.post(
            "/api/briefs/generate",
            json={"formData": {"projectType": "Logo Design"}},
            headers=_headers(token),
        )
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "INVALID_INTAKE"
        assert client.get("/api/user/credits", headers=_headers(token)).json()["credits"] == 5

    def test_out_of_credits_is_402(self, client, register_user):
        token, _ = register_user("ada@example.com")
        for remaining in range(4, -1, -1):
            response = client.post("/api/briefs/generate", json={"formData": FORM}, headers=_headers(token))
            assert response.json()["creditsRemaining"] == remaining

        response = client.post("/api/briefs/generate", json={"formData": FORM}, headers=_headers(token))
        assert response.status_code == 402
        body = response.json()
        assert body == {
            "success": False,
            "message": "Insufficient credits. You need at least 1 credit to generate a brief.",
            "error_code": "INSUFFICIENT_CREDIT",
        }


class TestUserEndpoints:

    def test_brief_history_and_detail(self, client, register_user):
        token, _ = register_user("ada@example.com")
        generated = client.post(
            "/api/briefs/generate", json={"formData": FORM}, headers=_headers(token)
        ).json()["data"]

        listing = client.get("/api/user/briefs", headers=_headers(token)).json()
        assert listing["success"] is True
        assert [b["brief_id"] for b in listing["briefs"]] == [generated["brief_id"]]

        detail = client.get(f"/api/user/briefs/{generated['brief_id']}", headers=_headers(token))
        assert detail.status_code == 200
        assert detail.json()["data"]["summary"] == generated["summary"]

    def test_brief_of_other_user_is_404(self, client, register_user):
        owner_token, _ = register_user("ada@example.com")
        other_token, _ = register_user("ben@example.com")
        brief_id = client.post(
            "/api/briefs/generate", json={"formData": FORM}, headers=_headers(owner_token)
        ).json()["data"]["brief_id"]

        response = client.get(f"/api/user/briefs/{brief_id}", headers=_headers(other_token))
        assert response.status_code == 404

    def test_credit_history(self, client, register_user):
        token, _ = register_user("ada@example.com", referral_code="FRIEND")
        client.post("/api/briefs/generate", json={"formData": FORM}, headers=_headers(token))

        body = client.get("/api/user/credits/history", headers=_headers(token)).json()
        assert [t["transaction_type"] for t in body["transactions"]] == [
            "GENERATION",
            "REFERRAL_BONUS",
            "REGISTRATION_GRANT",
        ]
        assert body["transactions"][0]["balance_after"] == 9

    def test_credits_require_auth(self, client):
        assert client.get("/api/user/credits").status_code == 401
