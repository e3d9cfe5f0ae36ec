import logging


def test_cors_preflight_allows_any_origin(client):
    response = client.options(
        "/coffee",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"

def test_cors_header_on_simple_request(client):
    response = client.get("/coffee", headers={"Origin": "http://localhost:5173"})

    assert response.headers["access-control-allow-origin"] == "*"

def test_every_response_carries_a_request_id(client):
    first = client.get("/").headers["x-request-id"]
    second = client.get("/coffee").headers["x-request-id"]

    assert len(first) == 8
    assert len(second) == 8
    assert first != second

def test_requests_are_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="coffee_api.common.log")

    response = client.get("/coffee")

    request_id = response.headers["x-request-id"]
    messages = [record.getMessage() for record in caplog.records]
    assert any(
        message.startswith("[API] GET /coffee - status=200") and f"req_id={request_id}" in message
        for message in messages
    )
