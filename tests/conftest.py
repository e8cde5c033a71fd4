import json

import pytest
import requests


def make_response(status_code=200, payload=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(payload)
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture()
def fake_get(monkeypatch):
    """Routes requests.get by URL prefix to canned responses and records every call."""
    routes = {}
    calls = []

    def _get(url, params=None, timeout=None):
        calls.append((url, params))
        for prefix, outcome in routes.items():
            if url.startswith(prefix):
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome
        raise AssertionError(f"unexpected request to {url}")

    monkeypatch.setattr(requests, "get", _get)
    _get.routes = routes
    _get.calls = calls
    return _get
