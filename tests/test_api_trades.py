"""Tests for the trade journal endpoints."""

from decimal import Decimal

TRADE = {
    "symbol": "eurusd",
    "direction": "long",
    "entry_price": "1.1000",
    "stop_loss_price": "1.0950",
    "take_profit_price": "1.1150",
    "commission_money": "3.50",
}


def _create(client, headers, **overrides):
    resp = client.post("/api/trades", json={**TRADE, **overrides}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


# ---------------------------------------------------------------------------
# 1. Create / read
# ---------------------------------------------------------------------------

def test_create_trade_computes_metrics(client, auth_headers):
    body = _create(client, auth_headers)
    assert body["symbol"] == "EURUSD"
    assert body["direction"] == "LONG"
    assert body["sl_pips"] == "50.0"
    assert body["tp_pips"] == "150.0"
    assert body["rr_ratio"] == "3.00"
    assert body["pip_size_used"] == "0.0001"
    assert body["exit_price"] is None
    assert body["closed_at"] is None
    assert body["created_at"] is not None


def test_create_open_trade_drops_exit_price(client, auth_headers):
    body = _create(client, auth_headers, exit_price="1.2000")
    assert body["exit_price"] is None


def test_create_rejects_bad_ordering_with_kind(client, auth_headers):
    resp = client.post(
        "/api/trades",
        json={**TRADE, "stop_loss_price": "1.1050"},
        headers=auth_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["detail"]["kind"] == "inconsistent_ordering"


def test_create_closed_trade_without_exit_price(client, auth_headers):
    resp = client.post(
        "/api/trades",
        json={**TRADE, "closed_at": "2024-03-01T15:00:00Z"},
        headers=auth_headers,
    )
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["kind"] == "inconsistent_lifecycle_state"
    assert "Exit price is required" in detail["message"]


def test_create_missing_symbol(client, auth_headers):
    resp = client.post("/api/trades", json={**TRADE, "symbol": "  "}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"]["kind"] == "missing_required_field"


def test_list_and_get_are_scoped_to_owner(client, auth_headers, login):
    trade = _create(client, auth_headers)
    other = login("someone-else@example.com")

    assert client.get("/api/trades", headers=other).json() == []
    assert client.get(f"/api/trades/{trade['id']}", headers=other).status_code == 404

    mine = client.get("/api/trades", headers=auth_headers).json()
    assert [t["id"] for t in mine] == [trade["id"]]


def test_requires_authentication(client):
    resp = client.get("/api/trades")
    assert resp.status_code in (401, 403)


# ---------------------------------------------------------------------------
# 2. Update
# ---------------------------------------------------------------------------

def test_update_closes_trade_and_keeps_created_at(client, auth_headers):
    created = _create(client, auth_headers)
    resp = client.put(
        f"/api/trades/{created['id']}",
        json={
            **TRADE,
            "exit_price": "1.1150",
            "closed_at": "2024-03-01T15:00:00Z",
            "close_reason_override": "tp",
            "manual_reason": "ignored",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert Decimal(body["exit_price"]) == Decimal("1.1150")
    assert body["closed_at"] is not None
    assert body["close_reason_override"] == "TP"
    assert body["manual_reason"] is None
    assert body["created_at"] == created["created_at"]


def test_update_recomputes_metrics(client, auth_headers):
    created = _create(client, auth_headers)
    resp = client.put(
        f"/api/trades/{created['id']}",
        json={**TRADE, "take_profit_price": None},
        headers=auth_headers,
    )
    body = resp.json()
    assert body["sl_pips"] == "50.0"
    assert body["tp_pips"] is None
    assert body["rr_ratio"] is None


def test_update_manual_other_requires_description(client, auth_headers):
    created = _create(client, auth_headers)
    payload = {
        **TRADE,
        "exit_price": "1.1020",
        "closed_at": "2024-03-01T15:00:00Z",
        "close_reason_override": "MANUAL",
        "manual_reason": "OTHER",
    }
    resp = client.put(f"/api/trades/{created['id']}", json=payload, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"]["kind"] == "missing_required_field"

    payload["manual_description"] = "slipped past broker"
    resp = client.put(f"/api/trades/{created['id']}", json=payload, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["manual_description"] == "slipped past broker"


def test_update_unknown_trade(client, auth_headers):
    resp = client.put("/api/trades/999", json=TRADE, headers=auth_headers)
    assert resp.status_code == 404


# ---------------------------------------------------------------------------
# 3. Review and delete
# ---------------------------------------------------------------------------

def test_review_update(client, auth_headers):
    created = _create(client, auth_headers)
    resp = client.patch(
        f"/api/trades/{created['id']}/review",
        json={"followed_plan": "yes", "mistakes_text": "  ", "improvement_text": "wait for close", "confidence": 7},
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["followed_plan"] == "YES"
    assert body["mistakes_text"] is None
    assert body["improvement_text"] == "wait for close"
    assert body["confidence"] == 7
    assert body["review_updated_at"] is not None
    assert body["rr_ratio"] == "3.00"


def test_review_rejects_invalid_values(client, auth_headers):
    created = _create(client, auth_headers)
    url = f"/api/trades/{created['id']}/review"
    assert client.patch(url, json={"followed_plan": "SOMETIMES", "confidence": 5}, headers=auth_headers).status_code == 422
    assert client.patch(url, json={"followed_plan": "NO", "confidence": 0}, headers=auth_headers).status_code == 422


def test_delete_trade(client, auth_headers):
    created = _create(client, auth_headers)
    resp = client.delete(f"/api/trades/{created['id']}", headers=auth_headers)
    assert resp.status_code == 204
    assert client.get(f"/api/trades/{created['id']}", headers=auth_headers).status_code == 404
