"""
Testing the random sources
- Tool: pytest's "monkeypatch" replaces requests.get so no real network call is made.
"""

import pytest
import requests

import bullscows.random_client as random_client
from bullscows.random_client import RandomOrgSource, default_source, secure_randbelow

class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code != 200:
            raise requests.HTTPError(f"{self.status_code} error")

def test_random_org_value_used(monkeypatch):
    seen = {}

    def fake_get(url, params, timeout):
        seen.update(params)
        return FakeResponse("7\n")

    monkeypatch.setattr(random_client.requests, "get", fake_get)
    assert RandomOrgSource()(10) == 7
    assert seen["min"] == 0
    assert seen["max"] == 9
    assert seen["num"] == 1

@pytest.mark.parametrize("body,status", [("12\n", 200), ("abc\n", 200), ("1\n2\n", 200), ("", 200), ("3\n", 503)])
def test_random_org_bad_response_falls_back(monkeypatch, body, status):
    monkeypatch.setattr(random_client.requests, "get", lambda url, params, timeout: FakeResponse(body, status))
    monkeypatch.setattr(random_client, "randbelow", lambda n: 4)
    assert RandomOrgSource()(10) == 4

def test_random_org_network_error_falls_back(monkeypatch):
    def boom(url, params, timeout):
        raise requests.ConnectionError("no internet")

    monkeypatch.setattr(random_client.requests, "get", boom)
    monkeypatch.setattr(random_client, "randbelow", lambda n: 2)
    assert RandomOrgSource()(3) == 2

def test_random_org_rejects_non_positive_bound():
    with pytest.raises(ValueError):
        RandomOrgSource()(0)

def test_secure_randbelow_in_range():
    for _ in range(100):
        assert 0 <= secure_randbelow(10) < 10

def test_default_source_follows_setting(monkeypatch):
    monkeypatch.setattr(random_client.config, "RANDOM_SOURCE", "random_org")
    assert isinstance(default_source(), RandomOrgSource)

    monkeypatch.setattr(random_client.config, "RANDOM_SOURCE", "secure")
    assert default_source() is secure_randbelow

    monkeypatch.setattr(random_client.config, "RANDOM_SOURCE", "dice")
    assert default_source() is secure_randbelow
