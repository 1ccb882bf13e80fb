"""Application state owner.

``JournalState`` holds the account and trade collections, the selected
account and the AI coach status. Callers change it only through the named
intents below; every mutation writes the affected collection back to the
store before returning.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence

from sqlalchemy.engine import Engine
from sqlmodel import Session

from tradejournal.schemas.account import Account, AccountCreate
from tradejournal.schemas.stats import PerformanceStats
from tradejournal.schemas.trade import Trade, TradeCreate
from tradejournal.services import storage
from tradejournal.services.coach import request_coaching_summary
from tradejournal.services.export import trades_to_csv
from tradejournal.services.stats import compute_performance_stats
from tradejournal.utils.constants import SetupTag, TradingSession

logger = logging.getLogger(__name__)

Coach = Callable[[Sequence[Trade], Account], Awaitable[str]]


class JournalError(Exception):
    """Base class for rejected journal intents."""


class AccountNotFound(JournalError):
    pass


class TradeNotFound(JournalError):
    pass


class ConfirmationRequired(JournalError):
    pass


class AnalysisInProgress(JournalError):
    pass


class NothingToAnalyze(JournalError):
    pass


class JournalState:
    def __init__(self, engine: Engine, coach: Coach = request_coaching_summary):
        self._engine = engine
        self._coach = coach
        self.accounts: list[Account] = []
        self.trades: list[Trade] = []
        self.selected_account_id: str | None = None
        self.is_analyzing = False
        self.last_analysis: str | None = None

    def load(self):
        """Read both collections from the store and select the first account."""
        with Session(self._engine) as session:
            self.accounts = storage.load_accounts(session)
            self.trades = storage.load_trades(session)
        self.selected_account_id = self.accounts[0].id if self.accounts else None
        logger.info(f"Loaded {len(self.accounts)} account(s) and {len(self.trades)} trade(s)")

    def _persist_accounts(self, accounts: list[Account]):
        """Write the collection, then adopt it, so a failed commit leaves memory untouched."""
        with Session(self._engine) as session:
            storage.save_accounts(session, accounts)
        self.accounts = accounts

    def _persist_trades(self, trades: list[Trade]):
        with Session(self._engine) as session:
            storage.save_trades(session, trades)
        self.trades = trades

    # -- queries -------------------------------------------------------------

    def get_account(self, account_id: str) -> Account | None:
        return next((a for a in self.accounts if a.id == account_id), None)

    def require_account(self, account_id: str | None) -> Account:
        """Resolve ``account_id``, falling back to the selected account."""
        target = account_id or self.selected_account_id
        if target is None:
            raise AccountNotFound("No account selected")
        account = self.get_account(target)
        if account is None:
            raise AccountNotFound(f"Account {target} not found")
        return account

    @property
    def selected_account(self) -> Account | None:
        if self.selected_account_id is None:
            return None
        return self.get_account(self.selected_account_id)

    def get_trade(self, trade_id: str) -> Trade | None:
        return next((t for t in self.trades if t.id == trade_id), None)

    def account_trades(self, account_id: str) -> list[Trade]:
        """Trades of one account in stored order."""
        return [t for t in self.trades if t.account_id == account_id]

    def list_trades(
        self,
        account_id: str,
        symbol: str | None = None,
        session: TradingSession | None = None,
        setup: SetupTag | None = None,
    ) -> list[Trade]:
        """Filtered trades of one account, newest date first."""
        trades = self.account_trades(account_id)
        if symbol:
            trades = [t for t in trades if t.symbol == symbol.strip().upper()]
        if session is not None:
            trades = [t for t in trades if t.session == session]
        if setup is not None:
            trades = [t for t in trades if setup in t.setups]
        return sorted(trades, key=lambda t: t.date, reverse=True)

    def stats(self, account_id: str) -> PerformanceStats:
        account = self.require_account(account_id)
        return compute_performance_stats(self.account_trades(account.id), account)

    def export_csv(self, account_id: str) -> str:
        account = self.require_account(account_id)
        return trades_to_csv(self.account_trades(account.id))

    # -- intents -------------------------------------------------------------

    def create_account(self, data: AccountCreate) -> Account:
        account = Account(**data.model_dump())
        self._persist_accounts([*self.accounts, account])
        self.selected_account_id = account.id
        logger.info(f"Created account {account.id} ({account.name})")
        return account

    def select_account(self, account_id: str) -> Account:
        account = self.require_account(account_id)
        self.selected_account_id = account.id
        return account

    def create_trade(self, data: TradeCreate, account_id: str | None = None) -> Trade:
        account = self.require_account(account_id or data.account_id)
        trade = data.build(account.id)
        self._persist_trades([*self.trades, trade])
        logger.info(f"Recorded trade {trade.id} ({trade.symbol}) on account {account.id}")
        return trade

    def update_trade(self, trade_id: str, data: TradeCreate) -> Trade:
        """Overwrite a trade in place, keeping its id, account and position."""
        existing = self.get_trade(trade_id)
        if existing is None:
            raise TradeNotFound(f"Trade {trade_id} not found")
        trade = data.build(existing.account_id, trade_id=existing.id)
        self._persist_trades([trade if t.id == trade_id else t for t in self.trades])
        logger.info(f"Updated trade {trade_id}")
        return trade

    def delete_trade(self, trade_id: str, confirmed: bool = False):
        if self.get_trade(trade_id) is None:
            raise TradeNotFound(f"Trade {trade_id} not found")
        if not confirmed:
            raise ConfirmationRequired("Deleting a trade must be confirmed")
        self._persist_trades([t for t in self.trades if t.id != trade_id])
        logger.info(f"Deleted trade {trade_id}")

    async def request_analysis(self, account_id: str | None = None) -> str:
        """Ask the coach for a review. Only one request may be outstanding."""
        account = self.require_account(account_id)
        trades = self.account_trades(account.id)
        if not trades:
            raise NothingToAnalyze("Log a few trades to unlock AI performance analysis")
        if self.is_analyzing:
            raise AnalysisInProgress("An analysis is already running")

        self.is_analyzing = True
        self.last_analysis = None
        try:
            self.last_analysis = await self._coach(trades, account)
        finally:
            self.is_analyzing = False
        return self.last_analysis
