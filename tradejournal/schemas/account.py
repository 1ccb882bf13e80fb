"""Pydantic schemas for trading accounts."""

import re
import uuid

from pydantic import Field, field_validator

from tradejournal.schemas.base import CamelModel
from tradejournal.utils.constants import DEFAULT_CURRENCY

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")


class AccountCreate(CamelModel):
    name: str = Field(min_length=1, max_length=120)
    broker: str = Field(min_length=1, max_length=120)
    initial_balance: float
    currency: str = DEFAULT_CURRENCY

    @field_validator("name", "broker")
    @classmethod
    def _trim_required_text(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("must not be empty")
        return text

    @field_validator("currency")
    @classmethod
    def _validate_currency(cls, value: str) -> str:
        code = value.strip().upper()
        if not _CURRENCY_RE.fullmatch(code):
            raise ValueError("must be a 3-letter currency code")
        return code


class Account(AccountCreate):
    """A capital account. Immutable once created."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
