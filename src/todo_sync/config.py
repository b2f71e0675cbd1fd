from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_LOADED = False

DEFAULT_API_URL = "http://127.0.0.1:8000"
DEFAULT_HTTP_TIMEOUT_S = 8.0
DEFAULT_PORT = 8000
IN_MEMORY_DB = ":memory:"


def load_env() -> None:
    global _LOADED
    if _LOADED:
        return
    _LOADED = True

    base_dir = Path(__file__).resolve().parent
    # Project root first, then the package directory.
    candidates = [
        Path.cwd() / ".env",
        base_dir.parents[1] / ".env",
        base_dir / ".env",
    ]
    for path in candidates:
        if path.exists():
            # Real environment variables win over .env values.
            load_dotenv(dotenv_path=path, override=False)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    http_timeout_s: float = DEFAULT_HTTP_TIMEOUT_S
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    serve_api: bool = True
    db_path: str = "./data/todos.db"
    enable_test_routes: bool = False
    debug: bool = False

    @property
    def uses_in_memory_db(self) -> bool:
        return self.db_path == IN_MEMORY_DB

    @classmethod
    def from_env(cls) -> "Settings":
        load_env()
        port = _env_int("TODO_PORT", DEFAULT_PORT)
        # Without an explicit URL the client talks to the API served by this process.
        api_url = (os.getenv("TODO_API_URL") or "").strip() or f"http://127.0.0.1:{port}"
        return cls(
            api_url=api_url.rstrip("/"),
            http_timeout_s=_env_float("TODO_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT_S),
            host=(os.getenv("TODO_HOST") or "0.0.0.0").strip(),
            port=port,
            serve_api=_env_flag("TODO_SERVE_API", True),
            db_path=(os.getenv("TODO_DB_PATH") or "./data/todos.db").strip(),
            enable_test_routes=_env_flag("TODO_ENABLE_TEST_ROUTES", False),
            debug=_env_flag("TODO_DEBUG", False),
        )
