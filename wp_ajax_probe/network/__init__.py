"""Network submodule – HTTP transport."""

from wp_ajax_probe.network.client import build_session, send

__all__ = ["build_session", "send"]
