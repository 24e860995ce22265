"""Configuration constants for the WordPress AJAX probe."""

import os

VERSION = "1.0.0"

# Defaults can also be supplied via WP_AJAX_URL / WP_AJAX_AUTH env vars
DEFAULT_URL = os.environ.get("WP_AJAX_URL", "")
DEFAULT_AUTH_FILE = os.environ.get("WP_AJAX_AUTH") or None
DEFAULT_AUTH_HINT = "temp/auth.json"
DEFAULT_DATA = "{}"
DEFAULT_METHOD = "POST"
DEFAULT_FORMAT = "human"
OUTPUT_FORMATS = ("human", "json")

LOGIN_PATH = "/wp-login.php"
ADMIN_PATH = "/wp-admin/"
AJAX_PATH  = "/wp-admin/admin-ajax.php"

DEFAULT_TIMEOUT_MS = 30000   # per HTTP request
MAX_REDIRECTS      = 5       # exceeding this is a transport error

# Login form fields, submitted exactly as wp-login.php expects them
LOGIN_SUBMIT_FIELD = "wp-submit"
LOGIN_SUBMIT_VALUE = "Log In"

# wp-login.php re-renders the form with <div id="login_error"> on failure
LOGIN_ERROR_MARKER = "login_error"

FULL_NONCE_FIELD = "_wpnonce"
NONCE_FIELD      = "_ajax_nonce"   # reserved key in the AJAX payload

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
AJAX_HEADERS = {
    "Content-Type": FORM_CONTENT_TYPE,
    "X-Requested-With": "XMLHttpRequest",
}

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
