from __future__ import annotations
import logging
import os


_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_SOURCE_NAME = "<string>"


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> int:
    name = value_from_env("FATLISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_default_source_name() -> str:
    return value_from_env("FATLISP_SOURCE_NAME", _DEFAULT_SOURCE_NAME)


def configure_logging() -> None:
    # Only an explicit FATLISP_LOG_LEVEL overrides the host's logging setup
    if os.environ.get("FATLISP_LOG_LEVEL"):
        logging.getLogger("fatlisp").setLevel(get_log_level())
