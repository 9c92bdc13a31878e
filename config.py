import os

from dotenv import load_dotenv

# Load values from .env file if present
load_dotenv()


def _database_url():
    url = os.environ.get("DATABASE_URL")

    # LOCAL FALLBACK
    if not url:
        url = "sqlite:///job_board.db"

    # Fix postgres:// issue
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def _flag(name, default="false"):
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


def _extensions(raw):
    return {ext.strip().lower().lstrip(".") for ext in raw.split(",") if ext.strip()}


class Config:
    # ================= SECRET KEY =================
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")

    # ================= DATABASE =================
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # ================= SESSION =================
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_SECURE = os.environ.get("RENDER") == "true"
    SESSION_PERMANENT = False

    # ================= RESUME UPLOAD =================
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", "uploads")
    RESUME_EXTENSIONS = _extensions(os.environ.get("RESUME_EXTENSIONS", ""))
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_UPLOAD_MB", "10")) * 1024 * 1024

    # ================= AUTHORIZATION =================
    # Off by default: any employer may triage any application.
    ENFORCE_STATUS_OWNERSHIP = _flag("ENFORCE_STATUS_OWNERSHIP")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
