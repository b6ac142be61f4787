# src/errors.py

"""Domain exceptions for the scraping service.

Individual field misses are never raised; extractors substitute a
default value instead. Only whole-request failures live here.
"""


class NetworkError(Exception):
    """An upstream fetch failed or returned a non-success status."""

    def __init__(self, message: str, url: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ConfigError(Exception):
    """Static configuration data (the category tree) is missing or corrupt."""
