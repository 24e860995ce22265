"""
Tests that session cookies survive redirects, against a real local server.

The mocked-session tests elsewhere never run requests' redirect handling,
which strips literal ``Cookie`` headers between hops.
"""

import http.server
import json
import threading
import unittest

from wp_ajax_probe.auth.nonce import extract_nonce
from wp_ajax_probe.network.client import build_session
from wp_ajax_probe.request import AjaxPayload, ajax_endpoint, dispatch
from wp_ajax_probe.session import SessionStore

from http_fixtures import make_response


class _WordPressStub(http.server.BaseHTTPRequestHandler):
    """Redirects the first hop of each endpoint and records final-hop cookies."""

    seen: dict[str, list] = {}

    def log_message(self, format, *args):
        pass

    def _redirect(self, status: int, location: str, cookie: str | None = None) -> None:
        self.send_response(status)
        self.send_header("Location", location)
        if cookie:
            self.send_header("Set-Cookie", cookie)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def _reply(self, body: str, content_type: str) -> None:
        payload = body.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def do_GET(self):
        if self.path == "/wp-admin/":
            self._redirect(302, "/wp-admin/index.php")
        elif self.path == "/wp-admin/index.php":
            self.seen.setdefault("admin", []).append(self.headers.get("Cookie"))
            self._reply('<input name="_wpnonce" value="c0ffee">', "text/html")
        else:
            self.send_error(404)

    def do_POST(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length).decode("utf-8")
        if self.path == "/wp-admin/admin-ajax.php":
            self._redirect(307, "/wp-admin/admin-ajax.php?x=1")
        elif self.path == "/hop":
            self._redirect(307, "/wp-admin/admin-ajax.php?x=1", cookie="wp_hop=1; path=/")
        elif self.path == "/wp-admin/admin-ajax.php?x=1":
            self.seen.setdefault("ajax", []).append(self.headers.get("Cookie"))
            self.seen.setdefault("ajax_body", []).append(body)
            self._reply(json.dumps({"success": True}), "application/json")
        else:
            self.send_error(404)


class TestCookiesAcrossRedirects(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.server = http.server.HTTPServer(("127.0.0.1", 0), _WordPressStub)
        cls.thread = threading.Thread(target=cls.server.serve_forever, daemon=True)
        cls.thread.start()
        cls.base = f"http://127.0.0.1:{cls.server.server_address[1]}"

    @classmethod
    def tearDownClass(cls):
        cls.server.shutdown()
        cls.server.server_close()

    def setUp(self):
        _WordPressStub.seen = {}
        self.session = build_session()
        # Keep HTTP(S)_PROXY from the environment away from 127.0.0.1.
        self.session.trust_env = False
        self.store = SessionStore()
        self.store.record(make_response(set_cookies=[
            "wordpress_logged_in=abc; path=/; HttpOnly",
            "wp-settings-1=mfold%3Do; path=/",
        ]))

    def test_dispatch_keeps_cookies_after_307(self):
        resp = dispatch(self.session, self.store, ajax_endpoint(self.base),
                        AjaxPayload(action="heartbeat"), timeout_ms=5000)

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True})
        self.assertEqual(_WordPressStub.seen["ajax"],
                         ["wordpress_logged_in=abc; wp-settings-1=mfold%3Do"])
        # 307 replays the form body on the next hop.
        self.assertEqual(_WordPressStub.seen["ajax_body"], ["action=heartbeat"])

    def test_extract_nonce_keeps_cookies_after_302(self):
        nonce = extract_nonce(self.session, self.store, self.base, timeout_ms=5000)

        self.assertEqual(nonce, "c0ffee")
        self.assertEqual(_WordPressStub.seen["admin"],
                         ["wordpress_logged_in=abc; wp-settings-1=mfold%3Do"])

    def test_anonymous_dispatch_sends_no_cookie(self):
        dispatch(self.session, SessionStore(), ajax_endpoint(self.base),
                 AjaxPayload(action="heartbeat"), timeout_ms=5000)
        self.assertEqual(_WordPressStub.seen["ajax"], [None])

    def test_hop_cookie_goes_to_store_not_session_jar(self):
        dispatch(self.session, self.store, self.base + "/hop",
                 AjaxPayload(action="heartbeat"), timeout_ms=5000)
        self.assertEqual(self.store.as_dict()["wp_hop"], "1")
        self.assertEqual(len(self.session.cookies), 0)


if __name__ == "__main__":
    unittest.main()
