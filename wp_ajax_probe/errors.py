"""
Error taxonomy for the probe.

Every fatal condition is a ``ProbeError`` subclass carrying a stable
``code`` and a list of remediation suggestions for the operator.
"""

from pathlib import Path

from .config import DEFAULT_AUTH_HINT


class ProbeError(Exception):
    """Base class; also used for uncategorised failures."""

    code = "UNKNOWN_ERROR"

    def suggestions(self) -> list[str]:
        return []


class AuthRequired(ProbeError):
    """The credentials file is missing or unreadable."""

    code = "AUTH_REQUIRED"

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None

    def suggestions(self) -> list[str]:
        location = self.path or DEFAULT_AUTH_HINT
        return [
            f"Create {location} with username and password",
            "Use --auth flag to specify auth file location",
        ]


class AuthFailed(ProbeError):
    """Login was submitted but rejected (or could not be completed)."""

    code = "AUTH_FAILED"

    def suggestions(self) -> list[str]:
        return [
            "Check username and password in auth file",
            "Verify WordPress site URL is correct",
        ]


class ProbeConnectionError(ProbeError):
    """DNS failure, refused connection, or too many redirects."""

    code = "CONNECTION_ERROR"

    def suggestions(self) -> list[str]:
        return [
            "Check if WordPress site is running",
            "Verify site URL is correct",
        ]


class RequestTimeout(ProbeError):
    code = "TIMEOUT"

    def suggestions(self) -> list[str]:
        return [
            "Increase timeout with --timeout flag",
            "Check server performance",
        ]


class InvalidPayload(ProbeError):
    """The --data payload is not a JSON object."""

    def suggestions(self) -> list[str]:
        return ["Pass a JSON object to --data, e.g. '{\"key\": \"value\"}'"]


def error_report(exc: BaseException) -> dict:
    """Build the structured error record emitted on failure."""
    if isinstance(exc, ProbeError):
        code = exc.code
        suggestions = exc.suggestions()
    else:
        code = ProbeError.code
        suggestions = []
    return {
        "success": False,
        "error": {
            "code": code,
            "message": str(exc) or exc.__class__.__name__,
        },
        "suggestions": suggestions,
    }
