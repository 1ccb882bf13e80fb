"""Shared API dependencies."""

from fastapi import HTTPException, Request, status

from tradejournal.schemas.account import Account
from tradejournal.services.journal import AccountNotFound, JournalState


def get_journal(request: Request) -> JournalState:
    """Return the journal state created at startup."""
    return request.app.state.journal


def resolve_account(journal: JournalState, account_id: str | None) -> Account:
    """Explicit account, or the selected one when ``account_id`` is omitted."""
    if account_id is None and journal.selected_account_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No account selected",
        )
    try:
        return journal.require_account(account_id)
    except AccountNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
