"""A minimal W3C WebDriver client for sites that need a real browser."""

from __future__ import annotations

from typing import Any

import requests


class WebDriverError(RuntimeError):
    """Raised when the web driver cannot be reached or reports an error."""


class WebDriverSession:
    """A browser session on a web driver listening on ``localhost:port``."""

    def __init__(self, port: int):
        self.base_url = f"http://localhost:{port}"
        self.session_id: str | None = None

    def _command(self, method: str, path: str, payload: dict | None = None) -> Any:
        try:
            response = requests.request(method, f"{self.base_url}{path}", json=payload)
        except requests.RequestException as exc:
            raise WebDriverError(
                f"failed to connect to web driver at {self.base_url}"
            ) from exc
        try:
            body = response.json()
        except ValueError:
            body = {}
        value = body.get("value") if isinstance(body, dict) else None
        if not response.ok or (isinstance(value, dict) and "error" in value):
            if isinstance(value, dict):
                message = value.get("message") or value.get("error") or response.reason
            else:
                message = response.reason
            raise WebDriverError(f"web driver error: {message}")
        return value

    def _session_path(self, suffix: str) -> str:
        if self.session_id is None:
            raise WebDriverError("no open web driver session")
        return f"/session/{self.session_id}{suffix}"

    def __enter__(self) -> WebDriverSession:
        value = self._command("POST", "/session", {"capabilities": {"alwaysMatch": {}}})
        session_id = value.get("sessionId") if isinstance(value, dict) else None
        if not session_id:
            raise WebDriverError("web driver returned no session id")
        self.session_id = session_id
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.session_id is None:
            return
        try:
            self._command("DELETE", self._session_path(""))
        except WebDriverError:
            pass  # closing the last window may already have ended the session
        finally:
            self.session_id = None

    def goto(self, url: str) -> None:
        """Navigate the browser to ``url``."""
        self._command("POST", self._session_path("/url"), {"url": url})

    def execute(self, script: str, args: list | None = None) -> Any:
        """Run ``script`` in the page and return its result."""
        return self._command(
            "POST",
            self._session_path("/execute/sync"),
            {"script": script, "args": list(args or [])},
        )

    def source(self) -> str:
        """Return the current page source."""
        return self._command("GET", self._session_path("/source"))

    def close_window(self) -> None:
        """Close the current browser window."""
        self._command("DELETE", self._session_path("/window"))


def fetch_page_source(port: int, url: str, script: str | None = None) -> str:
    """Load ``url`` in a browser, optionally run ``script``, and return the page source."""
    with WebDriverSession(port) as session:
        try:
            session.goto(url)
        except WebDriverError as exc:
            raise WebDriverError(f"could not go to the site URL: {exc}") from exc
        if script:
            try:
                session.execute(script, [])
            except WebDriverError as exc:
                raise WebDriverError(f"could not run the page script: {exc}") from exc
        try:
            body = session.source()
        except WebDriverError as exc:
            raise WebDriverError(f"could not read the site source: {exc}") from exc
        session.close_window()
    return body