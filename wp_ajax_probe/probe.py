"""
Whole-run orchestration.

A run moves strictly forward::

    START → AUTHENTICATING → AUTHENTICATED | ANONYMOUS
          → EXTRACTING_TOKEN → TOKEN_RESOLVED → DISPATCHING → DONE | FAILED

Authentication only happens when credentials are available, token
extraction only after a successful login.  FAILED is reachable from
AUTHENTICATING and DISPATCHING only; token extraction never fails a run.
"""

import enum
import json
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import requests

from .auth.credentials import Credentials, load_credentials
from .auth.login import login
from .auth.nonce import extract_nonce
from .config import DEFAULT_DATA, DEFAULT_FORMAT, DEFAULT_METHOD, DEFAULT_TIMEOUT_MS
from .errors import InvalidPayload, ProbeError
from .logging_setup import log
from .network.client import build_session
from .request import AjaxPayload, ajax_endpoint, dispatch
from .session import SessionStore


class RunState(enum.Enum):
    START = "start"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"
    EXTRACTING_TOKEN = "extracting_token"
    TOKEN_RESOLVED = "token_resolved"
    DISPATCHING = "dispatching"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ProbeOptions:
    url: str
    action: str
    data: str = DEFAULT_DATA
    auth_file: str | None = None
    method: str = DEFAULT_METHOD
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    fmt: str = DEFAULT_FORMAT
    nopriv: bool = False
    verbose: bool = False
    verify_ssl: bool = True


@dataclass(frozen=True)
class ProbeResult:
    success: bool
    action: str
    url: str
    status_code: int
    response_time_ms: int
    response: Any
    headers: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "action": self.action,
            "url": self.url,
            "status_code": self.status_code,
            "response_time_ms": self.response_time_ms,
            "response": self.response,
            "headers": self.headers,
        }


def parse_data(raw: str) -> dict[str, Any]:
    """Decode the --data payload; it must be a JSON object."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidPayload(f"Invalid JSON data: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidPayload(
            f"Invalid JSON data: expected an object, got {type(data).__name__}"
        )
    return data


def parse_body(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


class Probe:
    """Runs one probe and tracks which state of the run it is in."""

    def __init__(
        self,
        options: ProbeOptions,
        session: requests.Session | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.options = options
        self.base_url = options.url.rstrip("/")
        self.session = session or build_session(verify_ssl=options.verify_ssl)
        self.store = SessionStore()
        self.state = RunState.START
        self._clock = clock

    def _enter(self, state: RunState) -> None:
        log.debug("state %s → %s", self.state.name, state.name)
        self.state = state

    def _load_credentials(self) -> Credentials | None:
        if self.options.nopriv:
            if self.options.auth_file:
                log.debug("--nopriv given, ignoring auth file %s", self.options.auth_file)
            return None
        if not self.options.auth_file:
            return None
        credentials = load_credentials(self.options.auth_file)
        log.debug("Loaded auth from: %s", self.options.auth_file)
        if credentials is None:
            log.debug("Auth file has no username/password, continuing anonymously")
        return credentials

    def run(self) -> ProbeResult:
        opts = self.options
        started = self._clock()

        # Input problems surface before any network activity.
        data = parse_data(opts.data)
        credentials = self._load_credentials()

        nonce = None
        if credentials is not None:
            self._enter(RunState.AUTHENTICATING)
            try:
                login(self.session, self.store, self.base_url, credentials,
                      timeout_ms=opts.timeout_ms)
            except ProbeError:
                self._enter(RunState.FAILED)
                raise
            self._enter(RunState.AUTHENTICATED)

            self._enter(RunState.EXTRACTING_TOKEN)
            nonce = extract_nonce(self.session, self.store, self.base_url,
                                  timeout_ms=opts.timeout_ms)
            if nonce:
                log.debug("Extracted nonce: %s...", nonce[:10])
            self._enter(RunState.TOKEN_RESOLVED)
        else:
            self._enter(RunState.ANONYMOUS)

        endpoint = ajax_endpoint(self.base_url, nopriv=opts.nopriv)
        payload = AjaxPayload(action=opts.action, fields=data, nonce=nonce)

        self._enter(RunState.DISPATCHING)
        try:
            resp = dispatch(self.session, self.store, endpoint, payload,
                            method=opts.method, timeout_ms=opts.timeout_ms)
        except ProbeError:
            self._enter(RunState.FAILED)
            raise
        self._enter(RunState.DONE)

        elapsed_ms = max(0, int(round((self._clock() - started) * 1000)))
        return ProbeResult(
            success=True,
            action=opts.action,
            url=endpoint,
            status_code=resp.status_code,
            response_time_ms=elapsed_ms,
            response=parse_body(resp),
            headers=dict(resp.headers),
        )


def run_probe(
    options: ProbeOptions,
    *,
    session: requests.Session | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> ProbeResult:
    return Probe(options, session=session, clock=clock).run()
