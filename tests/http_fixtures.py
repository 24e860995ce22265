"""Hand-built requests.Response objects for offline tests."""

import json
from unittest.mock import MagicMock

import requests
from requests.structures import CaseInsensitiveDict
from urllib3 import HTTPHeaderDict


def make_response(status_code=200, text="", *, json_body=None,
                  headers=None, set_cookies=(), url="http://wp.test/",
                  history=()):
    """
    Build a ``requests.Response`` whose raw headers carry each Set-Cookie
    separately, the way urllib3 delivers them off the wire.
    """
    if json_body is not None:
        text = json.dumps(json_body)
        headers = {"Content-Type": "application/json", **(headers or {})}
    raw_headers = HTTPHeaderDict(headers or {})
    for cookie in set_cookies:
        raw_headers.add("Set-Cookie", cookie)

    resp = requests.Response()
    resp.status_code = status_code
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = url
    resp.history = list(history)
    resp.headers = CaseInsensitiveDict(raw_headers)
    resp.raw = MagicMock()
    resp.raw.headers = raw_headers
    return resp


def mock_session(*responses):
    """A requests.Session stand-in returning *responses* in order."""
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return session
