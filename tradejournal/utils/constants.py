"""Shared enumerations, constants and defaults."""

from enum import Enum


class TradeSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class TradingSession(str, Enum):
    ASIA = "Asia"
    LONDON = "London"
    NY = "New York"
    NY_CLOSE = "NY Close"


class MarketBias(str, Enum):
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"


class SetupTag(str, Enum):
    """Declaration order is the order used for setup performance."""

    OB = "Order Block"
    FVG = "Fair Value Gap"
    BMS = "Break of Market Structure"
    LIQ = "Liquidity Sweep"
    CHOCH = "Change of Character"
    VEC = "Volume Imbalance"


# Quick-tags offered by the trade form for the "mistake" field
COMMON_MISTAKES = [
    "FOMO Entry",
    "Moved SL Early",
    "Revenge Trading",
    "Overleveraged",
    "Poor HTF Analysis",
    "Early Exit",
    "Counter-trend",
    "Late Entry",
]

SUPPORTED_CURRENCIES = ["USD", "EUR", "GBP", "JPY"]
DEFAULT_CURRENCY = "USD"

# Key-value store entries, one JSON array each
ACCOUNTS_KEY = "qe_accounts"
TRADES_KEY = "qe_trades"
