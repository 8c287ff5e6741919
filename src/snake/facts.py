# facts.py
from __future__ import annotations

import json
import threading
from http.client import HTTPException
from typing import Callable, Optional
from urllib.request import Request, urlopen

FALLBACK_FACT = "Snakes smell with their tongues, flicking them to pick up scent particles from the air."


def _http_fact(prompt: str, url: str, timeout: float) -> str:
    body = json.dumps({"prompt": prompt}).encode("utf-8")
    req = Request(url, data=body, headers={
        "Content-Type": "application/json",
        "User-Agent": "grid-snake",
    })
    with urlopen(req, timeout=timeout) as r:
        data = json.loads(r.read().decode("utf-8"))
    text = str(data["text"]).strip()
    if not text:
        raise ValueError("empty fact")
    return text


def fetch_fact(prompt: str, url: str | None, timeout: float = 5.0,
               http: Callable[[str, str, float], str] = _http_fact) -> str:
    """Ask the fact service for a short text; any failure gives FALLBACK_FACT."""
    if not url:
        return FALLBACK_FACT
    try:
        return http(prompt, url, timeout)
    except (OSError, HTTPException, ValueError, KeyError, TypeError) as e:
        print(f"[FACT] Fetch failed, using fallback: {e}")
        return FALLBACK_FACT


class FactLoader:
    """
    Runs `fetch_fact` on a daemon thread so the home screen keeps drawing.
    The main loop calls `poll()` each frame; it returns the text exactly once.
    """

    def __init__(self, prompt: str, url: str | None, timeout: float = 5.0,
                 fetch: Callable[..., str] = fetch_fact):
        self.prompt = prompt
        self.url = url
        self.timeout = timeout
        self._fetch = fetch
        self._result: Optional[str] = None
        self._delivered = False
        self._done = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        self._thread = threading.Thread(target=self._run, name="fact-loader", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        try:
            self._result = self._fetch(self.prompt, self.url, self.timeout)
        finally:
            if self._result is None:
                self._result = FALLBACK_FACT
            self._done.set()

    def poll(self) -> Optional[str]:
        if self._delivered or not self._done.is_set():
            return None
        self._delivered = True
        return self._result

    def wait(self, timeout: float | None = None) -> bool:
        return self._done.wait(timeout)
