"""Pydantic schemas for the performance statistics snapshot."""

from pydantic import Field

from tradejournal.schemas.account import Account
from tradejournal.schemas.base import CamelModel
from tradejournal.utils.constants import SetupTag


class EquityPoint(CamelModel):
    label: str
    balance: float


class SetupPerformance(CamelModel):
    setup: SetupTag
    total_r: float


class PerformanceStats(CamelModel):
    win_rate: float
    expectancy: float
    profit_factor: float
    avg_win: float
    avg_loss: float
    total_trades: int
    win_count: int
    loss_count: int
    total_win_amount: float
    total_loss_amount: float
    total_r: float
    balance: float
    equity_curve: list[EquityPoint] = Field(default_factory=list)
    setup_performance: list[SetupPerformance] = Field(default_factory=list)


class DashboardRead(CamelModel):
    account: Account
    stats: PerformanceStats
