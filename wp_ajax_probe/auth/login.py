"""Form login against wp-login.php."""

import requests

from ..config import (
    ADMIN_PATH,
    FORM_CONTENT_TYPE,
    LOGIN_ERROR_MARKER,
    LOGIN_PATH,
    LOGIN_SUBMIT_FIELD,
    LOGIN_SUBMIT_VALUE,
)
from ..errors import AuthFailed, ProbeError
from ..logging_setup import log
from ..network.client import send
from ..session import SessionStore
from .credentials import Credentials


def login_form(base_url: str, credentials: Credentials) -> dict[str, str]:
    """Return the form body wp-login.php expects, in submission order."""
    return {
        "log": credentials.username,
        "pwd": credentials.password,
        LOGIN_SUBMIT_FIELD: LOGIN_SUBMIT_VALUE,
        "redirect_to": base_url + ADMIN_PATH,
        "testcookie": "1",
    }


def is_login_successful(resp: requests.Response) -> bool:
    """
    wp-login.php answers a rejected login with HTTP 200 and the form
    re-rendered around a ``login_error`` block, so the status alone is not
    enough.
    """
    return resp.status_code == 200 and LOGIN_ERROR_MARKER not in resp.text


def login(
    session: requests.Session,
    store: SessionStore,
    base_url: str,
    credentials: Credentials,
    *,
    timeout_ms: int,
) -> None:
    """
    Authenticate against the WordPress login form.

    Cookies from the response are recorded whatever the outcome.  Any
    failure, including a transport error, raises AuthFailed; there are no
    retries.
    """
    url = base_url + LOGIN_PATH
    try:
        resp = send(
            session, "POST", url,
            timeout_ms=timeout_ms,
            headers={"Content-Type": FORM_CONTENT_TYPE},
            store=store,
            data=login_form(base_url, credentials),
        )
    except ProbeError as exc:
        raise AuthFailed(f"Authentication failed: {exc}") from exc

    store.record(resp)

    if not is_login_successful(resp):
        reason = (
            f"HTTP {resp.status_code}" if resp.status_code != 200
            else "login form returned an error"
        )
        raise AuthFailed(f"Authentication failed: {reason}")

    log.info("Login successful as %r (HTTP %s). Cookies: %s",
             credentials.username, resp.status_code, list(store.as_dict()))
