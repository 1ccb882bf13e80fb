"""AI coach API."""

from fastapi import APIRouter, Depends, HTTPException

from tradejournal.api.deps import get_journal, resolve_account
from tradejournal.schemas.base import CamelModel
from tradejournal.services.coach import render_analysis_html
from tradejournal.services.journal import AnalysisInProgress, JournalState, NothingToAnalyze

router = APIRouter(prefix="/api/coach", tags=["coach"])


class AnalysisRead(CamelModel):
    is_analyzing: bool = False
    analysis: str | None = None
    html: str | None = None


@router.get("", response_model=AnalysisRead)
def last_analysis(journal: JournalState = Depends(get_journal)):
    text = journal.last_analysis
    return AnalysisRead(
        is_analyzing=journal.is_analyzing,
        analysis=text,
        html=render_analysis_html(text) if text is not None else None,
    )


@router.post("", response_model=AnalysisRead)
async def run_analysis(account_id: str | None = None, journal: JournalState = Depends(get_journal)):
    """Request a fresh coaching review of the account's recent trades."""
    account = resolve_account(journal, account_id)
    try:
        text = await journal.request_analysis(account.id)
    except NothingToAnalyze as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AnalysisInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))
    return AnalysisRead(analysis=text, html=render_analysis_html(text))
