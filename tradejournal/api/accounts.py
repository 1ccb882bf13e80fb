"""Trading accounts API."""

from fastapi import APIRouter, Depends, HTTPException

from tradejournal.api.deps import get_journal
from tradejournal.schemas.account import Account, AccountCreate
from tradejournal.services.journal import JournalState

router = APIRouter(prefix="/api/accounts", tags=["accounts"])


@router.get("", response_model=list[Account])
def list_accounts(journal: JournalState = Depends(get_journal)):
    return journal.accounts


@router.post("", response_model=Account, status_code=201)
def create_account(data: AccountCreate, journal: JournalState = Depends(get_journal)):
    """Create an account and make it the selected one."""
    return journal.create_account(data)


@router.get("/selected", response_model=Account | None)
def selected_account(journal: JournalState = Depends(get_journal)):
    return journal.selected_account


@router.get("/{account_id}", response_model=Account)
def get_account(account_id: str, journal: JournalState = Depends(get_journal)):
    account = journal.get_account(account_id)
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")
    return account


@router.post("/{account_id}/select", response_model=Account)
def select_account(account_id: str, journal: JournalState = Depends(get_journal)):
    if not journal.get_account(account_id):
        raise HTTPException(status_code=404, detail="Account not found")
    return journal.select_account(account_id)
