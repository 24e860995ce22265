"""Building and dispatching the admin-ajax.php request."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import urlencode

import requests

from .config import AJAX_HEADERS, AJAX_PATH, NONCE_FIELD
from .network.client import send
from .session import SessionStore


def ajax_endpoint(base_url: str, nopriv: bool = False) -> str:
    # Logged-in and logged-out handlers (wp_ajax_* / wp_ajax_nopriv_*) share
    # one URL; *nopriv* only changes what the caller sends along.
    return base_url + AJAX_PATH


def _form_value(value: Any) -> str:
    """Render a JSON-compatible value the way a browser form would send it."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, separators=(",", ":"))


@dataclass(frozen=True)
class AjaxPayload:
    """One admin-ajax.php call: the action, caller fields and optional nonce."""

    action: str
    fields: Mapping[str, Any] = field(default_factory=dict)
    nonce: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def to_form(self) -> dict[str, str]:
        # Caller fields are merged after ``action`` and may override it.
        merged = {"action": self.action, **self.fields}
        if self.nonce:
            merged[NONCE_FIELD] = self.nonce
        return {str(key): _form_value(value) for key, value in merged.items()}


def encode_payload(payload: AjaxPayload) -> str:
    return urlencode(payload.to_form())


def dispatch(
    session: requests.Session,
    store: SessionStore,
    endpoint: str,
    payload: AjaxPayload,
    *,
    method: str = "POST",
    timeout_ms: int,
) -> requests.Response:
    """
    Send *payload* to *endpoint* and return the response whatever its status.

    POST carries the payload as a form body, every other method as query
    parameters.  Only transport failures raise (see ``network.client.send``).
    """
    method = method.upper()
    headers = dict(AJAX_HEADERS)

    if method == "POST":
        resp = send(session, method, endpoint, timeout_ms=timeout_ms,
                    headers=headers, store=store, data=encode_payload(payload))
    else:
        resp = send(session, method, endpoint, timeout_ms=timeout_ms,
                    headers=headers, store=store, params=payload.to_form())
    store.record(resp)
    return resp
