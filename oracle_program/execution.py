# oracle_program/execution.py
"""
Execution stage.

One invocation: read the market identifier from the request payload,
make exactly one price-feed request, and report a single u64.

Variants:
  price  Alpha Vantage global quote, result = round(price * 10^6)
  ltv    CoinMarketCap quote, result = dynamic LTV percentage

Failures never raise past this module: every OracleError becomes
VmResult(exit_code=1) with an empty result.
"""

import logging

from oracle_program.codec import encode_u64, round_half_away
from oracle_program.config import Settings
from oracle_program.errors import DecodeError, OracleError
from oracle_program.feeds import alphavantage, coinmarketcap
from oracle_program.models import VmResult
from oracle_program.scoring import compute_ltv
from oracle_program.transport import RequestsFetcher

PRICE_SCALE = 1_000_000

log = logging.getLogger("oracle-program.execution")


def parse_pair(identifier):
    parts = identifier.split("/")
    if len(parts) != 2 or not all(parts):
        raise DecodeError(f"expected a SYMBOL/CONVERT pair, got {identifier!r}")
    return parts[0].upper(), parts[1].upper()


def run_price(identifier, fetcher, settings) -> int:
    price = alphavantage.fetch_price(
        fetcher, identifier, settings.alphavantage_base_url, settings.alphavantage_api_key
    )
    log.info(f"Fetched {identifier} price: {price}")
    return round_half_away(price * PRICE_SCALE)


def run_ltv(identifier, fetcher, settings) -> int:
    symbol, convert = parse_pair(identifier)
    quote = coinmarketcap.fetch_quote(
        fetcher, symbol, convert, settings.cmc_base_url, settings.cmc_api_key
    )
    log.info(f"Fetched {symbol}/{convert} price: {quote.price}")
    log.info(f"24h percent change: {quote.percent_change_24h}%")
    log.info(f"24h volume: {quote.volume_24h}")

    ltv = compute_ltv(quote, settings.ltv_min, settings.ltv_max)
    parts = ", ".join(f"{k}={v:.2f}%" for k, v in ltv.components().items())
    log.info(f"Calculated dynamic LTV: {ltv.score}% ({parts})")
    return ltv.score


VARIANTS = {
    "price": {"run": run_price, "default": "BRENT"},
    "ltv": {"run": run_ltv, "default": "WBTC/USDC"},
}


def execution_phase(inputs=b"", fetcher=None, variant=None, settings=None) -> VmResult:
    """Run one execution. Raises ValueError only for an unknown variant."""
    settings = settings or Settings.from_env()
    variant = variant or settings.variant
    if variant not in VARIANTS:
        raise ValueError(f"unknown variant {variant!r}, expected one of {sorted(VARIANTS)}")
    cfg = VARIANTS[variant]
    fetcher = fetcher or RequestsFetcher(timeout=settings.http_timeout)

    try:
        identifier = inputs.decode("utf-8").strip() or cfg["default"]
    except UnicodeDecodeError:
        log.error("Execution failed: request payload is not valid UTF-8")
        return VmResult.failure(DecodeError("request payload is not valid UTF-8"))

    try:
        value = cfg["run"](identifier, fetcher, settings)
        report = encode_u64(value)
    except OracleError as e:
        log.error(f"Execution failed ({variant} {identifier}): {e}")
        return VmResult.failure(e)
    return VmResult.success(report)
