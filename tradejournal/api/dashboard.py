"""Dashboard API: performance statistics and equity curve."""

from fastapi import APIRouter, Depends

from tradejournal.api.deps import get_journal, resolve_account
from tradejournal.schemas.stats import DashboardRead
from tradejournal.services.journal import JournalState

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardRead)
def dashboard(account_id: str | None = None, journal: JournalState = Depends(get_journal)):
    """Stats snapshot for one account, the selected one by default."""
    account = resolve_account(journal, account_id)
    return DashboardRead(account=account, stats=journal.stats(account.id))
