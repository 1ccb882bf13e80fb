"""Pydantic schemas for trades.

``TradeCreate`` is the builder used for user input: it validates the record
and only then yields a complete ``Trade`` via ``build``. ``Trade`` is the
stored record; its planned reward:risk is always recomputed from price levels.
"""

import datetime as dt
import uuid

from pydantic import Field, field_validator, model_validator

from tradejournal.schemas.base import CamelModel
from tradejournal.utils.constants import MarketBias, SetupTag, TradeSide, TradingSession


def planned_rr(entry: float, sl: float, tp: float) -> float:
    """Reward:risk of the planned levels, or 0 when any level is unset or risk is zero."""
    if not entry or not sl or not tp or entry == sl:
        return 0.0
    risk = abs(entry - sl)
    reward = abs(tp - entry)
    return round(reward / risk, 2)


class TradeBase(CamelModel):
    date: dt.date
    symbol: str
    side: TradeSide = TradeSide.BUY
    session: TradingSession = TradingSession.LONDON
    bias: MarketBias = MarketBias.NEUTRAL
    entry: float
    sl: float
    tp: float
    result: float
    result_r: float = 0.0
    setups: list[SetupTag] = Field(default_factory=list)
    notes: str = ""
    mistake: str | None = None

    @field_validator("result_r", mode="before")
    @classmethod
    def _missing_r_is_zero(cls, value):
        return 0.0 if value is None else value

    @field_validator("setups")
    @classmethod
    def _unique_setups(cls, value: list[SetupTag]) -> list[SetupTag]:
        return list(dict.fromkeys(value))


class Trade(TradeBase):
    id: str
    account_id: str
    rr: float = 0.0

    @model_validator(mode="after")
    def _recompute_rr(self):
        self.rr = planned_rr(self.entry, self.sl, self.tp)
        return self


class TradeCreate(TradeBase):
    date: dt.date = Field(default_factory=dt.date.today)
    symbol: str = Field(min_length=1, max_length=32)
    # Falls back to the selected account when omitted
    account_id: str | None = None

    @field_validator("symbol")
    @classmethod
    def _normalise_symbol(cls, value: str) -> str:
        text = value.strip().upper()
        if not text:
            raise ValueError("must not be empty")
        return text

    @field_validator("mistake")
    @classmethod
    def _blank_mistake_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        return text or None

    @model_validator(mode="after")
    def _validate_levels(self):
        if self.entry == self.sl:
            raise ValueError("entry and stop loss must differ")
        return self

    def build(self, account_id: str, trade_id: str | None = None) -> Trade:
        """Produce the stored record, keeping ``trade_id`` when replacing an existing trade."""
        payload = self.model_dump(exclude={"account_id"})
        return Trade(
            id=trade_id or str(uuid.uuid4()),
            account_id=account_id,
            **payload,
        )
