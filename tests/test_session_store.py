"""
Tests for SessionStore – cookie recording and serialization.
"""

import unittest

from http_fixtures import make_response

from wp_ajax_probe.session import SessionStore


class TestRecord(unittest.TestCase):
    def test_attributes_are_ignored(self):
        store = SessionStore()
        store.record(make_response(set_cookies=[
            "wordpress_test_cookie=WP%20Cookie%20check; path=/; secure",
        ]))
        self.assertEqual(store.as_dict(), {"wordpress_test_cookie": "WP%20Cookie%20check"})

    def test_multiple_cookies_in_one_response(self):
        store = SessionStore()
        store.record(make_response(set_cookies=[
            "a=1; path=/",
            "b=2; expires=Thu, 01 Jan 2037 00:00:00 GMT; HttpOnly",
        ]))
        self.assertEqual(store.serialize(), "a=1; b=2")

    def test_last_write_wins_across_responses(self):
        store = SessionStore()
        store.record(make_response(set_cookies=["sid=old", "lang=en"]))
        store.record(make_response(set_cookies=["sid=new"]))
        store.record(make_response(set_cookies=["sid=newest; path=/wp-admin"]))
        self.assertEqual(len(store), 2)
        self.assertEqual(store.serialize(), "sid=newest; lang=en")

    def test_value_containing_equals_sign(self):
        store = SessionStore()
        store.record(make_response(set_cookies=["token=abc==; path=/"]))
        self.assertEqual(store.as_dict()["token"], "abc==")

    def test_redirect_history_is_recorded_first(self):
        hop = make_response(302, set_cookies=["wordpress_logged_in=hop", "sid=1"])
        final = make_response(200, set_cookies=["sid=2"], history=[hop])
        store = SessionStore()
        store.record(final)
        self.assertEqual(store.as_dict(), {"wordpress_logged_in": "hop", "sid": "2"})

    def test_response_without_cookies_leaves_store_untouched(self):
        store = SessionStore()
        store.record(make_response(set_cookies=["a=1"]))
        store.record(make_response(headers={"Content-Type": "text/html"}))
        self.assertEqual(store.serialize(), "a=1")

    def test_empty_name_is_skipped(self):
        store = SessionStore()
        store.record(make_response(set_cookies=["=orphan; path=/"]))
        self.assertFalse(store)


class TestSerialize(unittest.TestCase):
    def test_empty_store(self):
        store = SessionStore()
        self.assertEqual(store.serialize(), "")
        self.assertFalse(store)

    def test_values_are_opaque(self):
        store = SessionStore()
        store.record(make_response(set_cookies=['odd="quoted value"']))
        self.assertEqual(store.serialize(), 'odd="quoted value"')

    def test_stores_are_isolated(self):
        first, second = SessionStore(), SessionStore()
        first.record(make_response(set_cookies=["a=1"]))
        self.assertEqual(second.serialize(), "")


if __name__ == "__main__":
    unittest.main()
