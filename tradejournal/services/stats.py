"""Performance statistics derived from one account's trades.

Pure and total: empty input, all-winning and all-losing trade sets all resolve
to finite numbers through the denominator guards below.
"""

import datetime as dt
from collections.abc import Sequence

from tradejournal.schemas.account import Account
from tradejournal.schemas.stats import EquityPoint, PerformanceStats, SetupPerformance
from tradejournal.schemas.trade import Trade
from tradejournal.utils.constants import SetupTag

START_LABEL = "Start"


def format_date_label(day: dt.date) -> str:
    """Short en-US date, e.g. 1/2/2024."""
    return f"{day.month}/{day.day}/{day.year}"


def account_balance(trades: Sequence[Trade], account: Account) -> float:
    return account.initial_balance + sum((t.result for t in trades), 0.0)


def build_equity_curve(trades: Sequence[Trade], account: Account) -> list[EquityPoint]:
    balance = account.initial_balance
    curve = [EquityPoint(label=START_LABEL, balance=balance)]
    # sorted() is stable: trades sharing a date keep their input order
    for trade in sorted(trades, key=lambda t: t.date):
        balance += trade.result
        curve.append(EquityPoint(label=format_date_label(trade.date), balance=balance))
    return curve


def build_setup_performance(trades: Sequence[Trade]) -> list[SetupPerformance]:
    performance = []
    for tag in SetupTag:
        total_r = round(sum((t.result_r or 0.0) for t in trades if tag in t.setups), 2)
        # Unused and net-zero tags are both dropped
        if total_r != 0:
            performance.append(SetupPerformance(setup=tag, total_r=total_r))
    return performance


def compute_performance_stats(trades: Sequence[Trade], account: Account) -> PerformanceStats:
    """Snapshot of win rate, expectancy, profit factor, equity curve and setup R."""
    wins = [t for t in trades if t.result > 0]
    losses = [t for t in trades if t.result <= 0]

    total_wins = sum((t.result for t in wins), 0.0)
    total_losses = abs(sum((t.result for t in losses), 0.0))
    total_r = sum(((t.result_r or 0.0) for t in trades), 0.0)
    count = len(trades) or 1

    return PerformanceStats(
        win_rate=len(wins) / count * 100,
        expectancy=(total_wins - total_losses) / count,
        profit_factor=total_wins if total_losses == 0 else total_wins / total_losses,
        avg_win=total_wins / (len(wins) or 1),
        avg_loss=total_losses / (len(losses) or 1),
        total_trades=len(trades),
        win_count=len(wins),
        loss_count=len(losses),
        total_win_amount=total_wins,
        total_loss_amount=total_losses,
        total_r=total_r,
        balance=account_balance(trades, account),
        equity_curve=build_equity_curve(trades, account),
        setup_performance=build_setup_performance(trades),
    )
