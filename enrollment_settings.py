"""Enrollment service configuration pulled from environment variables."""
import os


def _bool_env(name: str, default: str = "false") -> bool:
    value = os.getenv(name, default)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _list_env(name: str, default: str) -> tuple:
    raw = os.getenv(name) or default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


PORT = int(os.getenv("PORT", "3000"))
APP_ENV = os.getenv("APP_ENV", "prod").strip() or "prod"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
TRUST_PROXY = _bool_env("TRUST_PROXY", "false")

PROGRAMS = _list_env(
    "ENROLLMENT_PROGRAMS",
    "Desarrollo Web,Ciencia de Datos,Diseño UX/UI,Marketing Digital",
)
MODALITIES = _list_env("ENROLLMENT_MODALITIES", "Presencial,Virtual,Híbrida")

__all__ = [
    "PORT",
    "APP_ENV",
    "LOG_LEVEL",
    "TRUST_PROXY",
    "PROGRAMS",
    "MODALITIES",
]
