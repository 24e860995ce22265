"""
wp_ajax_probe
=============
Command-line probe for WordPress ``admin-ajax.php`` endpoints: optionally
logs in through ``wp-login.php``, scrapes a nonce from ``/wp-admin/`` and
issues a single AJAX request, reporting status, timing and payload.

Package structure
-----------------
wp_ajax_probe/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── errors.py         – error taxonomy and remediation suggestions
├── logging_setup.py  – colorlog console logger
├── session.py        – SessionStore (cookies from Set-Cookie headers)
├── request.py        – AJAX payload building and dispatch
├── probe.py          – whole-run orchestration
├── output.py         – human / JSON rendering
├── cli.py            – argparse CLI (``python -m wp_ajax_probe``)
├── network/          – HTTP transport (requests.Session factory, send)
└── auth/             – sub-package: credentials, login, nonce extraction
    ├── credentials.py
    ├── login.py
    └── nonce.py      – ordered nonce strategies

Quick start
-----------
    from wp_ajax_probe import ProbeOptions, run_probe

    result = run_probe(ProbeOptions(
        url="https://site.local",
        action="heartbeat",
        auth_file="temp/auth.json",
    ))
    print(result.status_code, result.response)
"""

from .auth    import Credentials, load_credentials, login, extract_nonce, find_nonce
from .errors  import (
    ProbeError,
    AuthRequired,
    AuthFailed,
    ProbeConnectionError,
    RequestTimeout,
    InvalidPayload,
)
from .probe   import Probe, ProbeOptions, ProbeResult, RunState, run_probe
from .request import AjaxPayload, ajax_endpoint, dispatch, encode_payload
from .session import SessionStore

__all__ = [
    "Credentials",
    "load_credentials",
    "login",
    "extract_nonce",
    "find_nonce",
    "ProbeError",
    "AuthRequired",
    "AuthFailed",
    "ProbeConnectionError",
    "RequestTimeout",
    "InvalidPayload",
    "Probe",
    "ProbeOptions",
    "ProbeResult",
    "RunState",
    "run_probe",
    "AjaxPayload",
    "ajax_endpoint",
    "dispatch",
    "encode_payload",
    "SessionStore",
]
