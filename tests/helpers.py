"""Scripted HTTP fetcher, provider bodies and reveal builders shared by the suites."""

import json
from urllib.parse import urlparse

from oracle_program.codec import encode_u64
from oracle_program.config import Settings
from oracle_program.models import Reveal
from oracle_program.transport import HttpFetcher, HttpResponse

SETTINGS = Settings(
    cmc_api_key="test-cmc-key",
    cmc_base_url="https://pro-api.coinmarketcap.com",
    alphavantage_api_key="test-av-key",
    alphavantage_base_url="https://www.alphavantage.co",
    http_timeout=5,
    variant="ltv",
    ltv_min=50,
    ltv_max=80,
)


class FakeFetcher(HttpFetcher):
    """Answers by host; records every call. Unknown hosts get 'Unknown request'."""

    def __init__(self, routes=None, error=None):
        self.routes = routes or {}
        self.error = error
        self.calls = []

    def fetch(self, url, headers=None):
        self.calls.append((url, headers or {}))
        if self.error is not None:
            raise self.error
        host = urlparse(url).hostname
        if host in self.routes:
            return self.routes[host]
        return HttpResponse(status=200, body=b"Unknown request")


def json_response(payload, status=200):
    return HttpResponse(status=status, body=json.dumps(payload).encode())


def cmc_body(price=50000.0, percent_change_24h=2.5, volume_24h=100000000.0, symbol="WBTC", convert="USDC"):
    usd = {"price": price, "percent_change_24h": percent_change_24h, "volume_24h": volume_24h}
    return {"data": {symbol: {"quote": {convert: usd}}}}


def cmc_fetcher(**quote):
    return FakeFetcher({"pro-api.coinmarketcap.com": json_response(cmc_body(**quote))})


def av_fetcher(price="85.6400"):
    return FakeFetcher({"www.alphavantage.co": json_response({"Global Quote": {"05. price": price}})})


def reveal(value, in_consensus=True):
    return Reveal(exit_code=0, gas_used=0, in_consensus=in_consensus, result=encode_u64(value))


def raw_reveal(result, in_consensus=True):
    return Reveal(exit_code=0, gas_used=0, in_consensus=in_consensus, result=result)
