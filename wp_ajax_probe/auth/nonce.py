"""
Nonce extraction from the authenticated wp-admin dashboard.

Each strategy is a pure ``(html) -> nonce | None`` function.  They are tried
in ``NONCE_STRATEGIES`` order and the first hit wins, so a new source of
nonces is added by appending a function, not by editing the existing ones.
"""

import re
from collections.abc import Callable, Iterable

import requests
from bs4 import BeautifulSoup

from ..config import ADMIN_PATH, FULL_NONCE_FIELD, NONCE_FIELD
from ..logging_setup import log
from ..network.client import send
from ..session import SessionStore

NonceStrategy = Callable[[str], str | None]

_BS4_PARSER = "lxml"

# Key match is case-insensitive, the value must be lowercase hex:
#   wpApiSettings = {"root": "...", "nonce": "a1b2c3d4e5"};
_SCRIPT_NONCE_RE = re.compile(r"""(?i:nonce)["']?\s*:\s*["']([a-f0-9]+)["']""")


def input_value(name: str) -> NonceStrategy:
    """Strategy: the ``value`` of the first ``<input name=...>`` in the page."""

    def _strategy(html: str) -> str | None:
        soup = BeautifulSoup(html, _BS4_PARSER)
        field = soup.find("input", attrs={"name": name})
        if field is None:
            return None
        return field.get("value") or None

    _strategy.__name__ = f"input_value[{name}]"
    return _strategy


def inline_script_nonce(html: str) -> str | None:
    """Strategy: a ``nonce: "<hex>"`` literal inside an inline <script>."""
    soup = BeautifulSoup(html, _BS4_PARSER)
    for script in soup.find_all("script"):
        content = script.get_text()
        if "nonce" not in content.lower():
            continue
        m = _SCRIPT_NONCE_RE.search(content)
        if m:
            return m.group(1)
    return None


NONCE_STRATEGIES: tuple[NonceStrategy, ...] = (
    input_value(FULL_NONCE_FIELD),
    input_value(NONCE_FIELD),
    inline_script_nonce,
)


def find_nonce(html: str, strategies: Iterable[NonceStrategy] = NONCE_STRATEGIES) -> str | None:
    for strategy in strategies:
        nonce = strategy(html)
        if nonce:
            log.debug("Nonce found by %s", strategy.__name__)
            return nonce
    return None


def extract_nonce(
    session: requests.Session,
    store: SessionStore,
    base_url: str,
    *,
    timeout_ms: int,
) -> str | None:
    """
    Fetch /wp-admin/ with the current cookies and look for a nonce.

    Never raises: plenty of AJAX actions need no nonce, so a failed fetch or
    an unparseable page simply yields None.  Nothing is cached; every call
    refetches the page.
    """
    try:
        resp = send(session, "GET", base_url + ADMIN_PATH,
                    timeout_ms=timeout_ms, store=store)
        store.record(resp)
        nonce = find_nonce(resp.text)
    except Exception as exc:
        log.debug("Nonce extraction failed, continuing without one: %s", exc)
        return None
    if nonce is None:
        log.debug("No nonce found on %s", base_url + ADMIN_PATH)
    return nonce
