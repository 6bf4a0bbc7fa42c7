"""
Serverless adapter tests (event API Gateway / Netlify)
"""

import asyncio
import json
from types import SimpleNamespace

import pytest

from backoffice.serverless import handler


def api_gateway_event(path, method="GET", headers=None, query=None, body=None):
    return {
        "resource": "/{proxy+}",
        "path": path,
        "httpMethod": method,
        "headers": headers or {"Host": "api.example.com", "X-Forwarded-Proto": "https", "X-Forwarded-Port": "443"},
        "multiValueHeaders": {},
        "queryStringParameters": query,
        "multiValueQueryStringParameters": {k: [v] for k, v in (query or {}).items()} or None,
        "pathParameters": {"proxy": path.lstrip("/")},
        "stageVariables": None,
        "requestContext": {
            "resourcePath": "/{proxy+}",
            "httpMethod": method,
            "path": path,
            "stage": "prod",
            "requestId": "gw-req",
            "identity": {"sourceIp": "10.0.0.1"},
        },
        "body": body,
        "isBase64Encoded": False,
    }


def response_headers(result):
    headers = {k.lower(): v for k, v in (result.get("headers") or {}).items()}
    for k, values in (result.get("multiValueHeaders") or {}).items():
        headers.setdefault(k.lower(), values[0])
    return headers


@pytest.fixture
def event_loop_for_handler():
    # Le handler Lambda est synchrone : il pilote sa propre boucle
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    asyncio.set_event_loop(None)
    loop.close()


def test_handler_serves_health(event_loop_for_handler):
    context = SimpleNamespace(aws_request_id="lambda-req-1")
    result = handler(api_gateway_event("/health"), context)

    assert result["statusCode"] == 200
    assert json.loads(result["body"])["status"] == "ok"

    headers = response_headers(result)
    assert headers["x-request-id"] == "lambda-req-1"
    assert headers["access-control-allow-origin"] == "*"


def test_handler_keeps_incoming_request_id(event_loop_for_handler):
    event = api_gateway_event(
        "/health",
        headers={"Host": "api.example.com", "X-Request-Id": "from-client"},
    )
    result = handler(event, SimpleNamespace(aws_request_id="lambda-req-2"))
    assert response_headers(result)["x-request-id"] == "from-client"


def test_handler_method_not_allowed(event_loop_for_handler):
    result = handler(api_gateway_event("/vehicles", method="PATCH", body="{}"), SimpleNamespace(aws_request_id="r"))
    assert result["statusCode"] == 405
    assert json.loads(result["body"]) == {"error": "Method not allowed"}
