"""
Testing the secret word source
- Tool: pytest's "monkeypatch" fixture replaces requests.get so no network is used.
"""

import requests

import jotto.words as words


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_fetch_secret_word_from_server(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse("Party\n")

    monkeypatch.setattr(words.requests, "get", fake_get)

    assert words.fetch_secret_word() == "party"
    assert len(calls) == 1
    assert calls[0][0] == words.config.WORD_SERVER_URL


def test_fetch_secret_word_falls_back_on_http_error(monkeypatch):
    monkeypatch.setattr(words.requests, "get", lambda url, timeout: FakeResponse("", 500))
    assert words.fetch_secret_word() in words.FALLBACK_WORDS


def test_fetch_secret_word_falls_back_on_connection_error(monkeypatch):
    def fake_get(url, timeout):
        raise requests.ConnectionError("no server")

    monkeypatch.setattr(words.requests, "get", fake_get)
    assert words.fetch_secret_word() in words.FALLBACK_WORDS


def test_fetch_secret_word_falls_back_on_bad_body(monkeypatch):
    monkeypatch.setattr(words.requests, "get", lambda url, timeout: FakeResponse("not a word"))
    assert words.fetch_secret_word() in words.FALLBACK_WORDS
