# feeds/coinmarketcap.py
"""
CoinMarketCap latest-quote feed.

GET {base}/v1/cryptocurrency/quotes/latest?symbol=WBTC&convert=USDC
Header: X-CMC_PRO_API_KEY

Body:
  {"data": {"WBTC": {"quote": {"USDC": {
      "price": 50000.0, "percent_change_24h": 2.5, "volume_24h": 1e8}}}}}
"""

import logging
from urllib.parse import urlencode

from oracle_program.errors import FetchError
from oracle_program.feeds._parse import load_json, number, walk
from oracle_program.models import MarketQuote

SOURCE = "coinmarketcap"

log = logging.getLogger("oracle-program.feeds")


def quote_url(base_url, symbol, convert):
    query = urlencode({"symbol": symbol, "convert": convert})
    return f"{base_url.rstrip('/')}/v1/cryptocurrency/quotes/latest?{query}"


def parse_quote(body: bytes, symbol: str, convert: str) -> MarketQuote:
    data = load_json(body, SOURCE)
    usd = walk(data, ["data", symbol, "quote", convert], SOURCE)
    return MarketQuote(
        price=number(usd, "price", SOURCE),
        percent_change_24h=number(usd, "percent_change_24h", SOURCE),
        volume_24h=number(usd, "volume_24h", SOURCE),
    )


def fetch_quote(fetcher, symbol, convert, base_url, api_key) -> MarketQuote:
    url = quote_url(base_url, symbol, convert)
    log.info(f"Fetching {symbol}/{convert} data from CoinMarketCap")
    r = fetcher.fetch(url, headers={"X-CMC_PRO_API_KEY": api_key})
    if not r.is_ok:
        raise FetchError(
            f"{SOURCE}: HTTP {r.status} - {r.body.decode('utf-8', errors='replace')[:200]}"
        )
    return parse_quote(r.body, symbol, convert)
