"""Logging configuration for the WordPress AJAX probe."""

import logging
import sys

import colorlog

log = logging.getLogger("wp-ajax-probe")


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr so stdout stays clean for results."""
    level = logging.DEBUG if verbose else logging.WARNING
    log.setLevel(level)
    log.handlers.clear()
    log.propagate = False

    handler = colorlog.StreamHandler(sys.stderr)
    handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
        datefmt="%H:%M:%S",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "bold_red",
        },
    ))
    log.addHandler(handler)
