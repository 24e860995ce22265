"""
Command-line interface for the WordPress AJAX probe.

Provides argument parsing and main execution flow.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

import urllib3

from .config import (
    DEFAULT_AUTH_FILE,
    DEFAULT_DATA,
    DEFAULT_FORMAT,
    DEFAULT_METHOD,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_URL,
    OUTPUT_FORMATS,
    VERSION,
)
from .errors import error_report
from .logging_setup import log, setup_logging
from .output import print_error, print_result
from .probe import ProbeOptions, run_probe


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="wp-ajax-probe",
        description="Lightweight WordPress AJAX endpoint testing – logs in, "
                    "picks up a nonce and calls admin-ajax.php once.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  wp-ajax-probe --url https://site.local --action my_ajax_action\n"
            "  wp-ajax-probe --url https://site.local --action my_ajax_action "
            "--data '{\"key\":\"value\"}'\n"
            "  wp-ajax-probe --url https://site.local --action my_ajax_action "
            "--auth temp/auth.json\n\n"
            "The site URL and auth file can also be provided via the "
            "WP_AJAX_URL and WP_AJAX_AUTH env vars."
        ),
    )
    parser.add_argument(
        "-u", "--url", default=DEFAULT_URL or None, required=not DEFAULT_URL,
        help="WordPress site URL",
    )
    parser.add_argument(
        "-a", "--action", required=True,
        help="AJAX action name",
    )
    parser.add_argument(
        "-d", "--data", default=DEFAULT_DATA,
        help=f"JSON data payload (default: {DEFAULT_DATA})",
    )
    parser.add_argument(
        "--auth", dest="auth_file", default=DEFAULT_AUTH_FILE,
        help="Auth file path (JSON with username and password)",
    )
    parser.add_argument(
        "-f", "--format", dest="fmt", choices=OUTPUT_FORMATS, default=DEFAULT_FORMAT,
        help=f"Output format (default: {DEFAULT_FORMAT})",
    )
    parser.add_argument(
        "--nopriv", action="store_true",
        help="Call the logged-out (wp_ajax_nopriv_*) handler anonymously. "
             "Overrides --auth: no credentials are read, no login is attempted "
             "and no cookies or nonce are sent",
    )
    parser.add_argument(
        "-m", "--method", default=DEFAULT_METHOD, type=str.upper,
        help=f"HTTP method (default: {DEFAULT_METHOD})",
    )
    parser.add_argument(
        "-t", "--timeout", dest="timeout_ms", type=_positive_int,
        default=DEFAULT_TIMEOUT_MS,
        help=f"Request timeout in ms (default: {DEFAULT_TIMEOUT_MS})",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification (use for self-signed certs)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Verbose output",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the probe CLI.

    Returns the process exit code: 0 once the AJAX call completed (whatever
    its HTTP status), 1 on any fatal error.
    """
    args = parse_args(argv)

    setup_logging(verbose=args.verbose)
    if args.verbose:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if not args.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    options = ProbeOptions(
        url=args.url,
        action=args.action,
        data=args.data,
        auth_file=args.auth_file,
        method=args.method,
        timeout_ms=args.timeout_ms,
        fmt=args.fmt,
        nopriv=args.nopriv,
        verbose=args.verbose,
        verify_ssl=args.verify_ssl,
    )

    try:
        result = run_probe(options)
    except Exception as exc:
        log.debug("Run failed", exc_info=True)
        print_error(error_report(exc), args.fmt)
        return 1

    print_result(result, args.fmt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
