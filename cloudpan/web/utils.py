"""Utility functions for interacting with the Cloud189 web API."""

import functools

from cloudpan.conf import Settings


@functools.lru_cache
def get_web_url() -> str:
    """Returns the root URL for the Cloud189 web API."""
    return Settings.load().web.web_url


@functools.lru_cache
def get_timeout() -> float:
    """Returns the request timeout, in seconds."""
    return Settings.load().web.timeout_seconds


def format_size(num_bytes: int) -> str:
    """Formats a byte count for display, e.g. ``1536`` -> ``1.50 KB``."""
    if abs(num_bytes) < 1024:
        return f"{num_bytes} B"
    size = float(num_bytes)
    for unit in ("KB", "MB", "GB"):
        size /= 1024
        if abs(size) < 1024:
            return f"{size:.2f} {unit}"
    return f"{size / 1024:.2f} TB"
