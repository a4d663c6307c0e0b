import json

from handlers import main


def _event(method, path):
    return {"requestContext": {"http": {"method": method, "path": path}}}


def test_main_routes_health():
    resp = main.lambda_handler(_event("GET", "/health"), None)
    assert resp["statusCode"] == 200
    assert json.loads(resp["body"])["status"] == "ok"


def test_literal_routes_win_over_id_routes():
    handler, params = main.resolve("POST", "/tickets/import")
    assert handler is main.ticket_import.import_tickets
    assert params == {}

    handler, params = main.resolve("GET", "/transactions/export")
    assert handler is main.transactions.export_transactions

    handler, params = main.resolve("GET", "/tickets/abc-123")
    assert handler is main.tickets.get_ticket
    assert params == {"id": "abc-123"}


def test_path_parameters_are_extracted():
    handler, params = main.resolve("GET", "/accounts/ACC-12345/summary/")
    assert handler is main.accounts.get_summary
    assert params == {"accountId": "ACC-12345"}


def test_method_must_match():
    assert main.resolve("PATCH", "/tickets/1") is None


def test_main_unknown_route(registry):
    resp = main.dispatch(_event("GET", "/unknown"), registry)
    assert resp["statusCode"] == 404
    body = json.loads(resp["body"])
    assert body["message"] == "Route not found"
    assert body["route"] == "GET /unknown"


def test_unexpected_errors_become_500(monkeypatch, registry):
    def boom(event, services):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(
        main,
        "ROUTE_TABLE",
        (main._route("GET", "/health", boom),),
    )
    resp = main.dispatch(_event("GET", "/health"), registry)
    assert resp["statusCode"] == 500
    body = json.loads(resp["body"])
    assert body["message"] == "Internal server error"
    assert "database exploded" not in resp["body"]
    assert body["correlation_id"]
