"""Loading of the JSON credentials file."""

import json
from dataclasses import dataclass
from pathlib import Path

from ..errors import AuthRequired


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


def load_credentials(source: str | Path) -> Credentials | None:
    """
    Read ``{"username": ..., "password": ...}`` from *source*.

    Returns None when either field is missing or empty, which means the run
    proceeds anonymously.  A missing, unreadable or malformed file raises
    AuthRequired carrying the resolved path.
    """
    path = Path(source).resolve()
    if not path.is_file():
        raise AuthRequired(f"Auth file not found: {path}", path=path)
    try:
        content = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise AuthRequired(f"Failed to load auth file: {exc}", path=path) from exc
    except json.JSONDecodeError as exc:
        raise AuthRequired(f"Failed to load auth file: {path} is not valid JSON ({exc})", path=path) from exc
    if not isinstance(content, dict):
        raise AuthRequired(f"Failed to load auth file: {path} must contain a JSON object", path=path)

    username = content.get("username")
    password = content.get("password")
    if not username or not password:
        return None
    return Credentials(username=str(username), password=str(password))
