"""Key-value persistence for accounts and trades.

Each collection is one JSON array stored under a fixed key and replaced whole
on every write. A key that was never written loads as an empty list, and so
does an entry that no longer parses.
"""

import logging
from datetime import datetime, timezone

from pydantic import TypeAdapter, ValidationError
from sqlmodel import Session

from tradejournal.models.store_entry import StoreEntry
from tradejournal.schemas.account import Account
from tradejournal.schemas.trade import Trade
from tradejournal.utils.constants import ACCOUNTS_KEY, TRADES_KEY

logger = logging.getLogger(__name__)

_accounts_adapter = TypeAdapter(list[Account])
_trades_adapter = TypeAdapter(list[Trade])


def _load(session: Session, key: str, adapter: TypeAdapter) -> list:
    entry = session.get(StoreEntry, key)
    if entry is None:
        return []
    try:
        return adapter.validate_json(entry.value)
    except ValidationError as e:
        logger.warning(f"Discarding unreadable store entry '{key}': {e.error_count()} error(s)")
        return []


def _save(session: Session, key: str, adapter: TypeAdapter, items: list):
    value = adapter.dump_json(items, by_alias=True).decode()
    entry = session.get(StoreEntry, key)
    if entry is None:
        entry = StoreEntry(key=key, value=value)
    else:
        entry.value = value
        entry.updated_at = datetime.now(timezone.utc)
    session.add(entry)
    session.commit()
    logger.debug(f"Saved {len(items)} record(s) under '{key}'")


def load_accounts(session: Session) -> list[Account]:
    return _load(session, ACCOUNTS_KEY, _accounts_adapter)


def save_accounts(session: Session, accounts: list[Account]):
    _save(session, ACCOUNTS_KEY, _accounts_adapter, accounts)


def load_trades(session: Session) -> list[Trade]:
    return _load(session, TRADES_KEY, _trades_adapter)


def save_trades(session: Session, trades: list[Trade]):
    _save(session, TRADES_KEY, _trades_adapter, trades)
