from __future__ import annotations

from http.client import BadStatusLine

import pytest

from snake.facts import FALLBACK_FACT, FactLoader, fetch_fact


def test_no_url_uses_fallback() -> None:
    def http(prompt, url, timeout):
        raise AssertionError("should not be called")

    assert fetch_fact("prompt", None, http=http) == FALLBACK_FACT
    assert fetch_fact("prompt", "", http=http) == FALLBACK_FACT


def test_successful_fetch() -> None:
    calls = []

    def http(prompt, url, timeout):
        calls.append((prompt, url, timeout))
        return "Some snakes can glide."

    assert fetch_fact("tell me", "http://facts.local", 2.0, http=http) == "Some snakes can glide."
    assert calls == [("tell me", "http://facts.local", 2.0)]


def test_failures_use_fallback() -> None:
    def timeout(prompt, url, t):
        raise TimeoutError("timed out")

    def bad_json(prompt, url, t):
        raise ValueError("Expecting value")

    def missing_key(prompt, url, t):
        raise KeyError("text")

    def bad_status(prompt, url, t):
        raise BadStatusLine("garbage")

    for http in (timeout, bad_json, missing_key, bad_status):
        assert fetch_fact("p", "http://facts.local", http=http) == FALLBACK_FACT


def test_loader_delivers_once() -> None:
    loader = FactLoader("p", None, fetch=lambda prompt, url, timeout: "Pythons are not venomous.")
    loader.start()

    assert loader.wait(5)
    assert loader.poll() == "Pythons are not venomous."
    assert loader.poll() is None


def test_loader_falls_back_on_unexpected_error() -> None:
    def boom(prompt, url, timeout):
        raise RuntimeError("boom")

    loader = FactLoader("p", "http://facts.local", fetch=boom)
    with pytest.raises(RuntimeError):
        loader._run()

    assert loader.poll() == FALLBACK_FACT
