"""
Tests for the wallet API endpoints.

Validates response shapes, withdrawal rule mapping to 400,
and the dry-run validation endpoint.
"""

import pytest
from fastapi.testclient import TestClient

ADDRESS = "bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh"


class TestWalletReads:
    """Tests for the read-only wallet endpoints."""

    @pytest.mark.parametrize(
        "path",
        [
            "/api/wallet/bitcoin",
            "/api/wallet/bitcoin/deposits",
            "/api/wallet/balance",
            "/api/wallet/withdrawals",
        ],
    )
    def test_requires_token(self, client: TestClient, path: str) -> None:
        assert client.get(path).status_code == 401

    def test_bitcoin_wallet(self, client: TestClient, auth_headers: dict) -> None:
        body = client.get("/api/wallet/bitcoin", headers=auth_headers).json()
        assert body == {
            "address": ADDRESS,
            "balance": 0.05423789,
            "pendingDeposits": 0.001,
        }

    def test_deposits(self, client: TestClient, auth_headers: dict) -> None:
        deposits = client.get("/api/wallet/bitcoin/deposits", headers=auth_headers).json()
        assert [d["id"] for d in deposits] == ["dep1", "dep2"]
        assert deposits[0]["status"] == "pending"
        assert deposits[0]["txHash"] is None
        assert deposits[1]["confirmations"] == 6
        assert deposits[1]["requiredConfirmations"] == 3

    def test_balance(self, client: TestClient, auth_headers: dict) -> None:
        body = client.get("/api/wallet/balance", headers=auth_headers).json()
        assert body == {"btc": 0.05423789, "usd": 15420.5}

    def test_withdrawals(self, client: TestClient, auth_headers: dict) -> None:
        withdrawals = client.get("/api/wallet/withdrawals", headers=auth_headers).json()
        assert [(w["id"], w["currency"], w["status"]) for w in withdrawals] == [
            ("with1", "btc", "processing"),
            ("with2", "usd", "completed"),
        ]


class TestWithdrawEndpoint:
    """Tests for POST /api/wallet/withdraw."""

    def test_requires_token(self, client: TestClient) -> None:
        response = client.post(
            "/api/wallet/withdraw",
            json={"amount": 0.01, "currency": "btc", "address": ADDRESS},
        )
        assert response.status_code == 401

    def test_btc_withdrawal_accepted(self, client: TestClient, auth_headers: dict) -> None:
        response = client.post(
            "/api/wallet/withdraw",
            json={"amount": 0.01, "currency": "btc", "address": ADDRESS},
            headers=auth_headers,
        )
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Withdrawal request submitted successfully"
        withdrawal = body["withdrawal"]
        assert withdrawal["id"].startswith("with")
        assert withdrawal["amount"] == 0.01
        assert withdrawal["currency"] == "btc"
        assert withdrawal["address"] == ADDRESS
        assert withdrawal["fee"] == 0.0005
        assert withdrawal["status"] == "pending"
        assert "createdAt" in withdrawal

    def test_usd_withdrawal_with_string_amount(
        self, client: TestClient, auth_headers: dict
    ) -> None:
        response = client.post(
            "/api/wallet/withdraw",
            json={"amount": "250", "currency": "USD", "address": "Bank Account ****1234"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        withdrawal = response.json()["withdrawal"]
        assert withdrawal["amount"] == 250
        assert withdrawal["currency"] == "usd"
        assert withdrawal["fee"] == 5

    @pytest.mark.parametrize(
        "payload, field, message",
        [
            (
                {"amount": "abc", "currency": "btc", "address": ADDRESS},
                "amount",
                "Invalid amount",
            ),
            (
                {"amount": -5, "currency": "btc", "address": ADDRESS},
                "amount",
                "Invalid amount",
            ),
            (
                {"amount": 0.0008, "currency": "btc", "address": ADDRESS},
                "amount",
                "Minimum withdrawal: 0.001 BTC",
            ),
            (
                {"amount": 5, "currency": "usd", "address": "Bank"},
                "amount",
                "Amount must be greater than network fee of $5",
            ),
            (
                {"amount": 1, "currency": "btc", "address": ADDRESS},
                "amount",
                "Insufficient balance. Available: 0.05423789 BTC",
            ),
            (
                {"amount": 0.01, "currency": "btc", "address": ""},
                "address",
                "Address is required",
            ),
            (
                {"amount": 0.01, "currency": "btc", "address": "0xdeadbeef"},
                "address",
                "Invalid Bitcoin address format. Please enter a valid Bitcoin address.",
            ),
            (
                {"amount": 0.01, "currency": "eth", "address": ADDRESS},
                "currency",
                "Unsupported currency",
            ),
        ],
    )
    def test_rule_violations_return_400(
        self,
        client: TestClient,
        auth_headers: dict,
        payload: dict,
        field: str,
        message: str,
    ) -> None:
        response = client.post("/api/wallet/withdraw", json=payload, headers=auth_headers)
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == message
        assert body["errors"] == {field: message}

    def test_insufficient_usd_balance_message(
        self, client: TestClient, auth_headers: dict
    ) -> None:
        response = client.post(
            "/api/wallet/withdraw",
            json={"amount": 20000, "currency": "usd", "address": "Bank"},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Insufficient balance. Available: 15420.5 USD"

    @pytest.mark.parametrize(
        "payload, field, message",
        [
            (
                {"amount": True, "currency": "usd", "address": "Bank"},
                "amount",
                "Invalid amount",
            ),
            (
                {"amount": {}, "currency": "usd", "address": "Bank"},
                "amount",
                "Invalid amount",
            ),
            (
                {"amount": [], "currency": "usd", "address": "Bank"},
                "amount",
                "Invalid amount",
            ),
            (
                {"amount": 20, "currency": "usd", "address": 12345},
                "address",
                "Address is required",
            ),
            (
                {"amount": 20, "currency": 1, "address": "Bank"},
                "currency",
                "Unsupported currency",
            ),
        ],
    )
    def test_non_scalar_json_types_rejected(
        self,
        client: TestClient,
        auth_headers: dict,
        payload: dict,
        field: str,
        message: str,
    ) -> None:
        response = client.post("/api/wallet/withdraw", json=payload, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"message": message, "errors": {field: message}}

    def test_empty_body_reports_every_field(
        self, client: TestClient, auth_headers: dict
    ) -> None:
        response = client.post("/api/wallet/withdraw", json={}, headers=auth_headers)
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid amount"
        assert set(body["errors"]) == {"amount", "address", "currency"}


class TestValidateWithdrawalEndpoint:
    """Tests for POST /api/wallet/withdraw/validate."""

    def test_valid_request(self, client: TestClient, auth_headers: dict) -> None:
        response = client.post(
            "/api/wallet/withdraw/validate",
            json={"amount": 0.01, "currency": "btc", "address": ADDRESS},
            headers=auth_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is True
        assert body["errors"] == {}
        assert body["fee"] == 0.0005
        assert body["netAmount"] == pytest.approx(0.0095)
        assert body["estimatedArrival"] == "30-60 minutes"

    def test_invalid_request_is_200_with_errors(
        self, client: TestClient, auth_headers: dict
    ) -> None:
        response = client.post(
            "/api/wallet/withdraw/validate",
            json={"amount": 1, "currency": "btc", "address": "nope"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is False
        assert set(body["errors"]) == {"amount", "address"}
        assert body["fee"] == 0.0005

    def test_boolean_amount_is_invalid(self, client: TestClient, auth_headers: dict) -> None:
        body = client.post(
            "/api/wallet/withdraw/validate",
            json={"amount": True, "currency": "usd", "address": "Bank"},
            headers=auth_headers,
        ).json()
        assert body["valid"] is False
        assert body["errors"] == {"amount": "Invalid amount"}
        assert body["netAmount"] is None

    def test_unsupported_currency_has_no_fee(
        self, client: TestClient, auth_headers: dict
    ) -> None:
        body = client.post(
            "/api/wallet/withdraw/validate",
            json={"amount": 0.01, "currency": "doge", "address": ADDRESS},
            headers=auth_headers,
        ).json()
        assert body["valid"] is False
        assert body["fee"] is None
        assert body["estimatedArrival"] is None
