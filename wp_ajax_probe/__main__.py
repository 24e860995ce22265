"""
Main entry point for the wp_ajax_probe package.

Allows running the probe as: python -m wp_ajax_probe
"""

import sys

from wp_ajax_probe.cli import main

if __name__ == "__main__":
    sys.exit(main())
