"""
HTTP transport for the probe.

Every HTTP status is a valid outcome: nothing here calls
``raise_for_status()``.  Only transport-level failures raise, and they are
translated into the probe's own error types.
"""

from http.cookiejar import DefaultCookiePolicy

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import MAX_REDIRECTS, USER_AGENT
from ..errors import ProbeConnectionError, ProbeError, RequestTimeout
from ..logging_setup import log
from ..session import SessionStore


class _RejectAllCookies(DefaultCookiePolicy):
    """Keep the requests jar empty; cookies belong to ``SessionStore``."""

    def set_ok(self, cookie, request):
        return False

    def return_ok(self, cookie, request):
        return False


def build_session(verify_ssl: bool = True) -> requests.Session:
    """
    Return a requests.Session with bounded redirects and no retries.

    Args:
        verify_ssl: Whether to verify SSL certificates

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    # Redirects are bounded by session.max_redirects, not by urllib3.
    adapter = HTTPAdapter(max_retries=Retry(total=0, redirect=False, raise_on_status=False))
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.max_redirects = MAX_REDIRECTS
    session.verify = verify_ssl
    session.cookies.set_policy(_RejectAllCookies())
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def send(
    session: requests.Session,
    method: str,
    url: str,
    *,
    timeout_ms: int,
    headers: dict[str, str] | None = None,
    store: SessionStore | None = None,
    data=None,
    params=None,
) -> requests.Response:
    """
    Issue one request, following redirects, and return the response as-is.

    Cookies from *store* travel as a per-request jar rather than a literal
    ``Cookie`` header: requests strips that header on every redirect hop but
    re-applies the request jar, so the session survives 30x responses.

    Raises:
        RequestTimeout: the request exceeded *timeout_ms*
        ProbeConnectionError: DNS / connection failure or too many redirects
        ProbeError: any other transport failure
    """
    cookies = store.as_dict() if store else None
    log.debug("%s %s (timeout %dms, cookies: %s)", method, url, timeout_ms,
              store.serialize() if store else "-")
    try:
        resp = session.request(
            method,
            url,
            headers=headers,
            cookies=cookies,
            data=data,
            params=params,
            timeout=timeout_ms / 1000,
            allow_redirects=True,
        )
    except requests.Timeout as exc:
        raise RequestTimeout(f"Request to {url} timed out after {timeout_ms}ms") from exc
    except requests.TooManyRedirects as exc:
        raise ProbeConnectionError(
            f"Exceeded {MAX_REDIRECTS} redirects while requesting {url}"
        ) from exc
    except requests.ConnectionError as exc:
        raise ProbeConnectionError(f"Could not connect to {url}: {exc}") from exc
    except requests.RequestException as exc:
        raise ProbeError(f"Request to {url} failed: {exc}") from exc
    log.debug("→ HTTP %s from %s", resp.status_code, resp.url)
    return resp
