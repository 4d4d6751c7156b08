# feeds/alphavantage.py
"""
Alpha Vantage global-quote feed.

GET {base}/query?function=GLOBAL_QUOTE&symbol=BRENT&apikey=KEY

Body:
  {"Global Quote": {"05. price": "85.6400"}}

The price arrives as a decimal string.
"""

import logging
import math
from urllib.parse import urlencode

from oracle_program.errors import DecodeError, FetchError
from oracle_program.feeds._parse import load_json, walk

SOURCE = "alphavantage"

log = logging.getLogger("oracle-program.feeds")


def quote_url(base_url, symbol, api_key):
    query = urlencode({"function": "GLOBAL_QUOTE", "symbol": symbol, "apikey": api_key})
    return f"{base_url.rstrip('/')}/query?{query}"


def parse_price(body: bytes) -> float:
    data = load_json(body, SOURCE)
    raw = walk(data, ["Global Quote", "05. price"], SOURCE)
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise DecodeError(f"{SOURCE}: price is not numeric ({raw!r})")
    try:
        price = float(raw)
    except ValueError as e:
        raise DecodeError(f"{SOURCE}: price is not numeric ({raw!r})") from e
    if not math.isfinite(price) or price < 0:
        raise DecodeError(f"{SOURCE}: price out of range ({raw!r})")
    return price


def fetch_price(fetcher, symbol, base_url, api_key) -> float:
    log.info(f"Fetching {symbol} price from Alpha Vantage")
    r = fetcher.fetch(quote_url(base_url, symbol, api_key))
    if not r.is_ok:
        raise FetchError(
            f"{SOURCE}: HTTP {r.status} - {r.body.decode('utf-8', errors='replace')[:200]}"
        )
    return parse_price(r.body)
