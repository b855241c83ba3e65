from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from repo root and the working directory (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")
load_dotenv(Path.cwd() / ".env")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _as_list(value: str) -> list:
    return [item.strip() for item in value.split(",") if item.strip()]


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./kanban.db")
SQL_ECHO = _as_bool(os.getenv("SQL_ECHO", "false"))

# Empty keeps cross-origin requests disabled.
CORS_ORIGINS = _as_list(os.getenv("CORS_ORIGINS", ""))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE") or None

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
RELOAD = _as_bool(os.getenv("RELOAD", "false"))
