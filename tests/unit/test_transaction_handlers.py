"""
Transaction and account endpoints through the router.

Run with: pytest tests/unit/test_transaction_handlers.py -v
"""

import json
import re

import pytest

from handlers.main import dispatch


def _body(response):
    return json.loads(response["body"])


@pytest.fixture
def post_transaction(registry, make_event):
    def _post(payload):
        return dispatch(make_event("POST", "/transactions", payload), registry)

    return _post


DEPOSIT = {"toAccount": "ACC-12345", "amount": 100.5, "currency": "USD", "type": "deposit"}
WITHDRAWAL = {"fromAccount": "ACC-12345", "amount": 40, "currency": "USD", "type": "withdrawal"}
TRANSFER = {
    "fromAccount": "ACC-12345",
    "toAccount": "ACC-ABCDE",
    "amount": 10.25,
    "currency": "USD",
    "type": "transfer",
}


class TestCreate:
    def test_deposit_is_completed_with_camel_case_fields(self, post_transaction):
        response = post_transaction(DEPOSIT)
        assert response["statusCode"] == 201
        body = _body(response)
        assert body["toAccount"] == "ACC-12345"
        assert body["fromAccount"] is None
        assert body["status"] == "completed"
        assert body["timestamp"].endswith("Z")
        assert body["id"]

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({**DEPOSIT, "amount": -5}, "amount"),
            ({**DEPOSIT, "amount": 10.123}, "amount"),
            ({**DEPOSIT, "amount": "10"}, "amount"),
            ({**DEPOSIT, "currency": "XYZ"}, "currency"),
            ({**DEPOSIT, "currency": ["USD"]}, "currency"),
            ({**DEPOSIT, "currency": {"code": "USD"}}, "currency"),
            ({**DEPOSIT, "type": "loan"}, "type"),
            ({**DEPOSIT, "fromAccount": "ACC-99999"}, "fromAccount"),
            ({**DEPOSIT, "toAccount": "acc-12345"}, "toAccount"),
            ({**WITHDRAWAL, "fromAccount": None}, "fromAccount"),
            ({**TRANSFER, "toAccount": "ACC-1234"}, "toAccount"),
        ],
    )
    def test_invalid_requests(self, registry, post_transaction, payload, field):
        response = post_transaction(payload)
        assert response["statusCode"] == 400
        body = _body(response)
        assert body["message"] == "Validation failed"
        assert body["details"][0]["field"] == field
        assert registry.transaction_store.count() == 0

    def test_body_must_be_an_object(self, post_transaction):
        assert post_transaction([DEPOSIT])["statusCode"] == 400


class TestQueries:
    def test_get_by_id(self, registry, make_event, post_transaction):
        tx_id = _body(post_transaction(DEPOSIT))["id"]
        response = dispatch(make_event("GET", f"/transactions/{tx_id}"), registry)
        assert _body(response)["id"] == tx_id

    def test_get_missing(self, registry, make_event):
        response = dispatch(make_event("GET", "/transactions/missing"), registry)
        assert response["statusCode"] == 404
        assert _body(response)["message"] == "Transaction not found"

    def test_list_filters(self, registry, make_event, post_transaction):
        for payload in (DEPOSIT, WITHDRAWAL, TRANSFER):
            post_transaction(payload)

        def listed(query=None):
            return _body(dispatch(make_event("GET", "/transactions", query=query), registry))

        assert len(listed()) == 3
        assert [t["type"] for t in listed({"accountId": "ACC-ABCDE"})] == ["transfer"]
        assert len(listed({"accountId": "ACC-12345", "type": "Withdrawal"})) == 1
        assert listed({"to": "2000-01-01"}) == []

    def test_invalid_query_collects_every_problem(self, registry, make_event):
        query = {"from": "yesterday", "type": "loan"}
        response = dispatch(make_event("GET", "/transactions", query=query), registry)
        assert response["statusCode"] == 400
        body = _body(response)
        assert body["message"] == "Invalid query parameters"
        assert len(body["details"]) == 2


class TestExport:
    def test_csv_download(self, registry, make_event, post_transaction):
        post_transaction(DEPOSIT)
        post_transaction(WITHDRAWAL)
        response = dispatch(
            make_event("GET", "/transactions/export", query={"format": "csv", "type": "deposit"}),
            registry,
        )
        assert response["statusCode"] == 200
        assert response["headers"]["Content-Type"].startswith("text/csv")
        assert re.fullmatch(
            r'attachment; filename="transactions-\d{4}-\d{2}-\d{2}\.csv"',
            response["headers"]["Content-Disposition"],
        )
        lines = response["body"].split("\n")
        assert lines[0] == "id,fromAccount,toAccount,amount,currency,type,timestamp,status"
        assert len(lines) == 2
        assert ",ACC-12345,100.5,USD,deposit," in lines[1]

    def test_format_is_required(self, registry, make_event):
        for query in (None, {"format": "xlsx"}):
            response = dispatch(make_event("GET", "/transactions/export", query=query), registry)
            assert response["statusCode"] == 400
            assert _body(response)["message"] == "Invalid format parameter"


class TestAccounts:
    def test_balance_and_summary(self, registry, make_event, post_transaction):
        for payload in (DEPOSIT, WITHDRAWAL, TRANSFER):
            post_transaction(payload)

        balance = _body(dispatch(make_event("GET", "/accounts/ACC-12345/balance"), registry))
        assert balance == {
            "accountId": "ACC-12345",
            "balance": 50.25,
            "currency": "USD",
            "transactionCount": 3,
        }

        summary = _body(dispatch(make_event("GET", "/accounts/ACC-12345/summary"), registry))
        assert summary["totalDeposits"] == {"USD": 100.5}
        assert summary["totalWithdrawals"] == {"USD": 50.25}
        assert summary["transactionCount"] == 3
        assert summary["mostRecentTransactionDate"] is not None

    def test_multi_currency_balance_conflict(self, registry, make_event, post_transaction):
        post_transaction(DEPOSIT)
        post_transaction({**DEPOSIT, "currency": "EUR"})
        response = dispatch(make_event("GET", "/accounts/ACC-12345/balance"), registry)
        assert response["statusCode"] == 409
        assert "multiple currencies" in _body(response)["message"]
