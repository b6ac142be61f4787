# src/scrapers/base_scraper.py

"""Base class pairing the HTML fetcher with the markup parser."""

import logging
from abc import ABC, abstractmethod

from bs4 import BeautifulSoup
from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.errors import NetworkError
from src.scrapers.schema import ExtractionSchema, load_schema


class BaseScraper(ABC):
    """Fetch pages with browser-like headers and parse them with lxml.

    One attempt per URL: no retries, no backoff and no explicit timeout.
    Any failure surfaces as :class:`NetworkError` and is fatal for the
    request that triggered it.
    """

    def __init__(
        self,
        source_name: str,
        schema: ExtractionSchema | None = None,
    ) -> None:
        self.source_name = source_name
        self.logger = logging.getLogger(
            f"jumia_reseller.{source_name}"
        )
        self.settings = Settings()
        self.schema = schema if schema is not None else load_schema()
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )

    def _build_headers(self) -> dict[str, str]:
        """Headers sent with every page request."""
        return dict(self.settings.DEFAULT_HEADERS)

    def fetch_html(self, url: str) -> str:
        """GET *url* and return the response body.

        Raises:
            NetworkError: on transport failure or a non-2xx status.
        """
        self.logger.info("[%s] Fetching %s", self.source_name, url)
        try:
            resp = self.session.get(url, headers=self._build_headers())
        except Exception as exc:
            self.logger.warning(
                "[%s] Request error for %s: %s",
                self.source_name,
                url,
                exc,
            )
            raise NetworkError(str(exc), url=url) from exc

        if not 200 <= resp.status_code < 300:
            self.logger.warning(
                "[%s] HTTP %d for %s",
                self.source_name,
                resp.status_code,
                url,
            )
            raise NetworkError(
                f"Request failed with status code {resp.status_code}",
                url=url,
                status_code=resp.status_code,
            )
        return str(resp.text)

    @staticmethod
    def parse_html(html: str) -> BeautifulSoup:
        """Parse markup once; malformed input still yields a tree."""
        return BeautifulSoup(html or "", "lxml")

    def get_page(self, url: str) -> BeautifulSoup:
        """Fetch and parse a page."""
        return self.parse_html(self.fetch_html(url))

    @abstractmethod
    def _get_homepage(self) -> str:
        """Return the site's homepage URL."""
        ...
