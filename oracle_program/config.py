# oracle_program/config.py
"""
Runtime configuration, read from the environment.

Only the execution stage and the entry points read these. The tally stage
takes every input as an explicit argument.
"""

import os
from dataclasses import dataclass

# ── Price feeds ───────────────────────────────────────────────────────────────

CMC_API_KEY = os.environ.get("CMC_API_KEY", "")
CMC_BASE_URL = os.environ.get("CMC_BASE_URL", "https://pro-api.coinmarketcap.com")
ALPHAVANTAGE_API_KEY = os.environ.get("ALPHAVANTAGE_API_KEY", "demo")
ALPHAVANTAGE_BASE_URL = os.environ.get("ALPHAVANTAGE_BASE_URL", "https://www.alphavantage.co")
HTTP_TIMEOUT = float(os.environ.get("HTTP_TIMEOUT", "5"))

# ── Program ───────────────────────────────────────────────────────────────────

ORACLE_VARIANT = os.environ.get("ORACLE_VARIANT", "ltv")
LTV_MIN = int(os.environ.get("LTV_MIN", "50"))
LTV_MAX = int(os.environ.get("LTV_MAX", "80"))

# ── Host surface ──────────────────────────────────────────────────────────────

ORACLE_HOST = os.environ.get("ORACLE_HOST", "127.0.0.1")
ORACLE_PORT = int(os.environ.get("ORACLE_PORT", "9200"))


@dataclass(frozen=True)
class Settings:
    cmc_api_key: str = CMC_API_KEY
    cmc_base_url: str = CMC_BASE_URL
    alphavantage_api_key: str = ALPHAVANTAGE_API_KEY
    alphavantage_base_url: str = ALPHAVANTAGE_BASE_URL
    http_timeout: float = HTTP_TIMEOUT
    variant: str = ORACLE_VARIANT
    ltv_min: int = LTV_MIN
    ltv_max: int = LTV_MAX

    def __post_init__(self):
        # checked once, when configuration is loaded
        if not 0 <= self.ltv_min <= self.ltv_max <= 100:
            raise ValueError(f"invalid LTV bounds [{self.ltv_min}, {self.ltv_max}]: need 0 <= LTV_MIN <= LTV_MAX <= 100")

    @classmethod
    def from_env(cls):
        """Re-read the environment (module constants are fixed at import)."""
        return cls(
            cmc_api_key=os.environ.get("CMC_API_KEY", ""),
            cmc_base_url=os.environ.get("CMC_BASE_URL", "https://pro-api.coinmarketcap.com"),
            alphavantage_api_key=os.environ.get("ALPHAVANTAGE_API_KEY", "demo"),
            alphavantage_base_url=os.environ.get("ALPHAVANTAGE_BASE_URL", "https://www.alphavantage.co"),
            http_timeout=float(os.environ.get("HTTP_TIMEOUT", "5")),
            variant=os.environ.get("ORACLE_VARIANT", "ltv"),
            ltv_min=int(os.environ.get("LTV_MIN", "50")),
            ltv_max=int(os.environ.get("LTV_MAX", "80")),
        )
