"""Authentication submodule – credentials, form login, nonce extraction."""

from wp_ajax_probe.auth.credentials import Credentials, load_credentials
from wp_ajax_probe.auth.login import login, login_form, is_login_successful
from wp_ajax_probe.auth.nonce import (
    NONCE_STRATEGIES,
    extract_nonce,
    find_nonce,
    inline_script_nonce,
    input_value,
)

__all__ = [
    "Credentials",
    "load_credentials",
    "login",
    "login_form",
    "is_login_successful",
    "NONCE_STRATEGIES",
    "extract_nonce",
    "find_nonce",
    "inline_script_nonce",
    "input_value",
]
