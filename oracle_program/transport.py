# oracle_program/transport.py
"""
HTTP fetch capability handed to the execution stage.

The host owns the network. The stage only sees an HttpFetcher, so tests
and alternative hosts can substitute their own.

v1 requirements:
- fetch(url, headers) -> HttpResponse(status, body)
- exactly one call per execution, no retries
"""

from dataclasses import dataclass
from typing import Dict, Optional

import requests

from oracle_program.config import HTTP_TIMEOUT
from oracle_program.errors import FetchError


@dataclass
class HttpResponse:
    status: int
    body: bytes

    @property
    def is_ok(self) -> bool:
        return self.status == 200


class HttpFetcher:
    """Abstract fetch interface."""

    def fetch(self, url: str, headers: Optional[Dict[str, str]] = None) -> HttpResponse:
        raise NotImplementedError


class RequestsFetcher(HttpFetcher):
    """Live fetcher backed by requests."""

    def __init__(self, timeout: float = HTTP_TIMEOUT, session=None):
        self.timeout = timeout
        self.session = session or requests

    def fetch(self, url, headers=None):
        try:
            r = self.session.get(url, headers=headers or {}, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"request to {url} failed: {e}") from e
        return HttpResponse(status=r.status_code, body=r.content)
