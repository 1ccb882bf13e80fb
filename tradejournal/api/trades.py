"""Trade journal API."""

import re
from datetime import date
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from tradejournal.api.deps import get_journal, resolve_account
from tradejournal.schemas.trade import Trade, TradeCreate
from tradejournal.services.journal import ConfirmationRequired, JournalState, TradeNotFound
from tradejournal.utils.constants import SetupTag, TradingSession

router = APIRouter(prefix="/api/trades", tags=["trades"])

_UNSAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9._-]+")


def _content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback name and the UTF-8 name per RFC 5987."""
    fallback = _UNSAFE_FILENAME_RE.sub("_", filename).strip("_") or "trades.csv"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


@router.get("", response_model=list[Trade])
def list_trades(
    account_id: str | None = None,
    symbol: str | None = None,
    session: TradingSession | None = None,
    setup: SetupTag | None = None,
    limit: int = Query(50, ge=1),
    offset: int = Query(0, ge=0),
    journal: JournalState = Depends(get_journal),
):
    account = resolve_account(journal, account_id)
    trades = journal.list_trades(account.id, symbol=symbol, session=session, setup=setup)
    return trades[offset:offset + limit]


@router.post("", response_model=Trade, status_code=201)
def create_trade(data: TradeCreate, journal: JournalState = Depends(get_journal)):
    account = resolve_account(journal, data.account_id)
    return journal.create_trade(data, account.id)


@router.get("/export")
def export_trades(account_id: str | None = None, journal: JournalState = Depends(get_journal)):
    """Download the account's trades as CSV."""
    account = resolve_account(journal, account_id)
    filename = f"trades-{account.name}-{date.today().isoformat()}.csv"
    return Response(
        content=journal.export_csv(account.id),
        media_type="text/csv",
        headers={"Content-Disposition": _content_disposition(filename)},
    )


@router.get("/{trade_id}", response_model=Trade)
def get_trade(trade_id: str, journal: JournalState = Depends(get_journal)):
    trade = journal.get_trade(trade_id)
    if not trade:
        raise HTTPException(status_code=404, detail="Trade not found")
    return trade


@router.put("/{trade_id}", response_model=Trade)
def update_trade(trade_id: str, data: TradeCreate, journal: JournalState = Depends(get_journal)):
    try:
        return journal.update_trade(trade_id, data)
    except TradeNotFound:
        raise HTTPException(status_code=404, detail="Trade not found")


@router.delete("/{trade_id}", status_code=204)
def delete_trade(trade_id: str, confirm: bool = False, journal: JournalState = Depends(get_journal)):
    try:
        journal.delete_trade(trade_id, confirmed=confirm)
    except TradeNotFound:
        raise HTTPException(status_code=404, detail="Trade not found")
    except ConfirmationRequired:
        raise HTTPException(
            status_code=400,
            detail="Delete this trade record? Repeat the request with confirm=true.",
        )
