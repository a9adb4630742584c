"""Tests for cashflows and account settings endpoints."""

from decimal import Decimal


# ---------------------------------------------------------------------------
# 1. Cashflows
# ---------------------------------------------------------------------------

class TestCashflows:
    def test_create_normalizes_type_and_note(self, client, auth_headers):
        resp = client.post(
            "/api/cashflows",
            json={"type": " deposit ", "amount_money": "1000.00", "note": "   "},
            headers=auth_headers,
        )
        assert resp.status_code == 201, resp.text
        body = resp.json()
        assert body["type"] == "DEPOSIT"
        assert Decimal(body["amount_money"]) == Decimal("1000.00")
        assert body["note"] is None
        assert body["occurred_at"] is not None

    def test_rejects_bad_type_and_amount(self, client, auth_headers):
        bad_type = {"type": "BONUS", "amount_money": "10"}
        bad_amount = {"type": "WITHDRAWAL", "amount_money": "0"}
        assert client.post("/api/cashflows", json=bad_type, headers=auth_headers).status_code == 422
        assert client.post("/api/cashflows", json=bad_amount, headers=auth_headers).status_code == 422

    def test_list_newest_first(self, client, auth_headers):
        for day in ("2024-01-01", "2024-03-01", "2024-02-01"):
            client.post(
                "/api/cashflows",
                json={"type": "DEPOSIT", "amount_money": "10", "occurred_at": f"{day}T00:00:00Z"},
                headers=auth_headers,
            )
        rows = client.get("/api/cashflows", headers=auth_headers).json()
        assert [r["occurred_at"][:10] for r in rows] == ["2024-03-01", "2024-02-01", "2024-01-01"]

    def test_update_requires_occurred_at(self, client, auth_headers):
        created = client.post(
            "/api/cashflows",
            json={"type": "DEPOSIT", "amount_money": "50"},
            headers=auth_headers,
        ).json()
        url = f"/api/cashflows/{created['id']}"

        resp = client.put(url, json={"type": "WITHDRAWAL", "amount_money": "25"}, headers=auth_headers)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Occurred time is required"

        resp = client.put(
            url,
            json={"type": "withdrawal", "amount_money": "25", "occurred_at": "2024-05-01T12:00:00Z", "note": " fees "},
            headers=auth_headers,
        )
        assert resp.status_code == 200
        assert resp.json()["type"] == "WITHDRAWAL"
        assert resp.json()["note"] == "fees"

    def test_delete_and_ownership(self, client, auth_headers, login):
        created = client.post(
            "/api/cashflows",
            json={"type": "DEPOSIT", "amount_money": "50"},
            headers=auth_headers,
        ).json()
        other = login("other@example.com")
        assert client.delete(f"/api/cashflows/{created['id']}", headers=other).status_code == 404
        assert client.delete(f"/api/cashflows/{created['id']}", headers=auth_headers).status_code == 204
        assert client.get("/api/cashflows", headers=auth_headers).json() == []


# ---------------------------------------------------------------------------
# 2. Account settings
# ---------------------------------------------------------------------------

class TestAccountSettings:
    def test_missing_before_first_save(self, client, auth_headers):
        resp = client.get("/api/account-settings", headers=auth_headers)
        assert resp.status_code == 404

    def test_upsert_creates_then_updates(self, client, auth_headers):
        first = client.put(
            "/api/account-settings",
            json={"starting_balance": "10000", "risk_percent": "1.5", "currency": " usd "},
            headers=auth_headers,
        )
        assert first.status_code == 200, first.text
        assert first.json()["currency"] == "USD"

        second = client.put(
            "/api/account-settings",
            json={"starting_balance": "12000", "risk_percent": "2", "currency": ""},
            headers=auth_headers,
        )
        assert second.json()["id"] == first.json()["id"]
        assert Decimal(second.json()["starting_balance"]) == Decimal("12000")
        assert second.json()["currency"] is None

        fetched = client.get("/api/account-settings", headers=auth_headers).json()
        assert Decimal(fetched["risk_percent"]) == Decimal("2")

    def test_rejects_out_of_range_values(self, client, auth_headers):
        for payload in (
            {"starting_balance": "0", "risk_percent": "1"},
            {"starting_balance": "100", "risk_percent": "0"},
            {"starting_balance": "100", "risk_percent": "100.01"},
        ):
            resp = client.put("/api/account-settings", json=payload, headers=auth_headers)
            assert resp.status_code == 422
