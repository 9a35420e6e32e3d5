"""Observability module for logging."""

from src.observability.logging import (
    bind_repo_context,
    clear_repo_context,
    configure_logging,
)


__all__ = [
    "bind_repo_context",
    "clear_repo_context",
    "configure_logging",
]
