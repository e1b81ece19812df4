"""Console client tests — requests.get is monkeypatched, no network."""

import time

import pytest
import requests

from clients import console_client


class _FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def install(response):
        def fake_get(url, timeout):
            recorded.append((url, timeout))
            if isinstance(response, Exception):
                raise response
            return response
        monkeypatch.setattr(console_client.requests, "get", fake_get)
        return recorded

    return install


def test_convert_prints_result(calls, capsys):
    recorded = calls(_FakeResponse(200, {"unix": 1482624000, "utc": "Sun, 25 Dec 2016 00:00:00 +0000"}))
    assert console_client.main(["2016-12-25"]) == 0
    assert recorded == [("http://127.0.0.1:3000/api/2016-12-25", 5)]
    out = capsys.readouterr().out
    assert "1482624000" in out
    assert "Sun, 25 Dec 2016 00:00:00 +0000" in out


def test_convert_quotes_value(calls):
    recorded = calls(_FakeResponse(422, {"error": "Invalid Date"}))
    console_client.convert("a b/c", base_url="http://srv")
    assert recorded[0][0] == "http://srv/api/a%20b%2Fc"


def test_convert_invalid_date(calls, capsys):
    calls(_FakeResponse(422, {"error": "Invalid Date"}))
    assert console_client.main(["nope"]) == 1
    assert "Invalid Date" in capsys.readouterr().out


def test_compare_clocks(calls, capsys):
    now = int(time.time())
    calls(_FakeResponse(200, {"unix": now, "utc": "whatever +0000"}))
    assert console_client.main([]) == 0
    out = capsys.readouterr().out
    assert "Servidor: whatever +0000" in out
    assert "ADELANTADA" in out or "ATRASADA" in out or "coinciden" in out


def test_timeout_is_reported(calls, capsys):
    calls(requests.exceptions.Timeout())
    assert console_client.main([]) == 1
    assert "5000 ms" in capsys.readouterr().out


def test_http_error_is_reported(calls, capsys):
    calls(_FakeResponse(500, {}))
    assert console_client.main(["2016-12-25"]) == 1
    assert "500 Error" in capsys.readouterr().out


class _NotJsonResponse(_FakeResponse):
    def json(self):
        raise ValueError("Expecting value: line 1 column 1 (char 0)")


def test_non_json_body_is_reported(calls, capsys):
    calls(_NotJsonResponse(200, None))
    assert console_client.main(["2016-12-25"]) == 1
    assert "Expecting value" in capsys.readouterr().out


def test_missing_field_is_reported(calls, capsys):
    calls(_FakeResponse(200, {"unix": 0}))
    assert console_client.main([]) == 1
    assert "Error: 'utc'" in capsys.readouterr().out
