"""Small helpers for dev-mode diagnostics of habit actions."""

from __future__ import annotations

from typing import Any, Mapping

from .config import BaseConfig
from .logging_config import get_logger

logger = get_logger("dev")


def in_dev_mode(config: BaseConfig | None) -> bool:
    """Return True when dev mode logging is enabled."""

    return bool(getattr(config, "DEV_MODE", False)) if config is not None else False


def format_context(context: Mapping[str, Any] | None) -> str:
    """Render ``key=value`` pairs in a stable order."""

    if not context:
        return ""
    return " ".join(f"{key}={context[key]}" for key in sorted(context))


def dev_log(
    config: BaseConfig | None,
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
) -> None:
    """Echo a user action to stdout and the debug log when dev mode is enabled."""

    if not in_dev_mode(config):
        return

    extras = format_context(context)
    line = f"[DEV] {message} ({extras})" if extras else f"[DEV] {message}"
    print(line)
    logger.debug(message, extra={"context": dict(context or {})})
