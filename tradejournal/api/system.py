"""System API: health check and form options."""

from fastapi import APIRouter

from tradejournal.utils.constants import (
    COMMON_MISTAKES,
    SUPPORTED_CURRENCIES,
    MarketBias,
    SetupTag,
    TradeSide,
    TradingSession,
)

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/options")
def form_options():
    """Enumerated values the journal forms offer."""
    return {
        "sides": [s.value for s in TradeSide],
        "sessions": [s.value for s in TradingSession],
        "biases": [b.value for b in MarketBias],
        "setups": [s.value for s in SetupTag],
        "mistakes": COMMON_MISTAKES,
        "currencies": SUPPORTED_CURRENCIES,
    }
