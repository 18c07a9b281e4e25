"""Utility helpers for URL resolution and logging."""

from dpkg_builder.utils.url import index_url, is_absolute, resolve_url, url_filename
from dpkg_builder.utils.log import setup_logging, log

__all__ = [
    "index_url",
    "is_absolute",
    "resolve_url",
    "url_filename",
    "setup_logging",
    "log",
]
