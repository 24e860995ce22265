"""
Cookie bookkeeping for a single probe run.

The ``SessionStore`` is the only place cookies live.  It is filled
exclusively from ``Set-Cookie`` response headers and handed to every
request as a per-request jar by ``network.client.send``; the underlying
``requests.Session`` jar is configured to reject everything (see
``network.client.build_session``).
"""

import requests


def _set_cookie_headers(resp: requests.Response) -> list[str]:
    """
    Return every ``Set-Cookie`` header of *resp* as a separate string.

    ``resp.headers`` folds repeated headers into one comma-joined value,
    which cannot be split safely (``expires=`` dates contain commas), so the
    raw urllib3 header dict is consulted first.
    """
    raw_headers = getattr(getattr(resp, "raw", None), "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "getlist"):
        return list(raw_headers.getlist("Set-Cookie"))
    value = resp.headers.get("Set-Cookie")
    return [value] if value else []


class SessionStore:
    """Cookie name → value map with last-write-wins semantics."""

    def __init__(self) -> None:
        self._cookies: dict[str, str] = {}

    def record(self, resp: requests.Response) -> None:
        """
        Absorb cookies from *resp* and from every redirect hop before it.

        Only the leading ``name=value`` pair of each header is kept; path,
        expiry and other attributes are ignored.  Values are opaque.
        """
        for hop in [*getattr(resp, "history", []), resp]:
            for header in _set_cookie_headers(hop):
                pair = header.split(";", 1)[0]
                name, _, value = pair.partition("=")
                name = name.strip()
                if name:
                    self._cookies[name] = value

    def serialize(self) -> str:
        return "; ".join(f"{name}={value}" for name, value in self._cookies.items())

    def as_dict(self) -> dict[str, str]:
        return dict(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)

    def __bool__(self) -> bool:
        return bool(self._cookies)

    def __repr__(self) -> str:
        return f"SessionStore({list(self._cookies)})"
