"""Tests for the performance statistics engine."""

from tradejournal.services.stats import compute_performance_stats, format_date_label
from tradejournal.utils.constants import SetupTag


def _balances(stats):
    return [p.balance for p in stats.equity_curve]


# ---------------------------------------------------------------------------
# 1. End-to-end scenarios
# ---------------------------------------------------------------------------

def test_two_trades_sorted_into_equity_curve(account, make_trade):
    trades = [
        make_trade(result=500, result_r=2, date="2024-01-02"),
        make_trade(result=-200, result_r=-1, date="2024-01-01"),
    ]
    stats = compute_performance_stats(trades, account)

    assert _balances(stats) == [10000, 9800, 10300]
    assert [p.label for p in stats.equity_curve] == ["Start", "1/1/2024", "1/2/2024"]
    assert stats.win_rate == 50.0
    assert stats.total_r == 1.0
    assert stats.profit_factor == 2.5
    assert stats.expectancy == 150.0
    assert stats.avg_win == 500
    assert stats.avg_loss == 200
    assert stats.balance == 10300


def test_no_trades(account):
    stats = compute_performance_stats([], account)

    assert stats.win_rate == 0
    assert stats.profit_factor == 0
    assert stats.expectancy == 0
    assert stats.avg_win == 0
    assert stats.avg_loss == 0
    assert stats.total_trades == 0
    assert [(p.label, p.balance) for p in stats.equity_curve] == [("Start", 10000)]
    assert stats.setup_performance == []


def test_breakeven_trade_counts_as_loss(account, make_trade):
    stats = compute_performance_stats([make_trade(result=0)], account)

    assert stats.loss_count == 1
    assert stats.win_count == 0
    assert stats.total_loss_amount == 0
    assert stats.profit_factor == 0
    assert stats.win_rate == 0


# ---------------------------------------------------------------------------
# 2. Properties
# ---------------------------------------------------------------------------

def test_profit_factor_falls_back_to_total_wins_without_losses(account, make_trade):
    trades = [make_trade(result=120), make_trade(result=80)]
    stats = compute_performance_stats(trades, account)
    assert stats.total_loss_amount == 0
    assert stats.profit_factor == stats.total_win_amount == 200


def test_all_losers(account, make_trade):
    trades = [make_trade(result=-50), make_trade(result=-150)]
    stats = compute_performance_stats(trades, account)
    assert stats.win_rate == 0
    assert stats.profit_factor == 0
    assert stats.avg_loss == 100
    assert stats.expectancy == -100


def test_equity_curve_length_and_endpoints(account, make_trade):
    trades = [
        make_trade(result=35.5, date="2024-03-04"),
        make_trade(result=-12.25, date="2024-02-01"),
        make_trade(result=100, date="2024-02-15"),
    ]
    stats = compute_performance_stats(trades, account)

    assert len(stats.equity_curve) == len(trades) + 1
    assert stats.equity_curve[0].balance == account.initial_balance
    assert stats.equity_curve[-1].balance == account.initial_balance + 35.5 - 12.25 + 100
    assert 0 <= stats.win_rate <= 100


def test_same_day_trades_keep_insertion_order(account, make_trade):
    first = make_trade(result=-300, date="2024-05-10")
    second = make_trade(result=1000, date="2024-05-10")
    earlier = make_trade(result=50, date="2024-05-09")
    stats = compute_performance_stats([first, second, earlier], account)

    assert _balances(stats) == [10000, 10050, 9750, 10750]


def test_stats_are_idempotent(account, make_trade):
    trades = [
        make_trade(result=40, result_r=1.5, setups=[SetupTag.OB]),
        make_trade(result=-20, result_r=-1, setups=[SetupTag.FVG]),
    ]
    assert compute_performance_stats(trades, account) == compute_performance_stats(trades, account)


def test_missing_result_r_counts_as_zero(account, make_trade):
    trades = [make_trade(result=10, result_r=None), make_trade(result=10, result_r=2)]
    assert compute_performance_stats(trades, account).total_r == 2


# ---------------------------------------------------------------------------
# 3. Setup performance
# ---------------------------------------------------------------------------

def test_setup_performance_in_declaration_order(account, make_trade):
    trades = [
        make_trade(result=100, result_r=2.004, setups=[SetupTag.LIQ, SetupTag.OB]),
        make_trade(result=-50, result_r=-1, setups=[SetupTag.OB]),
    ]
    stats = compute_performance_stats(trades, account)

    assert [(p.setup, p.total_r) for p in stats.setup_performance] == [
        (SetupTag.OB, 1.0),
        (SetupTag.LIQ, 2.0),
    ]


def test_unused_and_net_zero_setups_are_both_omitted(account, make_trade):
    trades = [
        make_trade(result=100, result_r=1, setups=[SetupTag.FVG]),
        make_trade(result=-100, result_r=-1, setups=[SetupTag.FVG]),
        make_trade(result=30, result_r=0.5, setups=[SetupTag.CHOCH]),
    ]
    tags = {p.setup for p in compute_performance_stats(trades, account).setup_performance}

    # FVG was used but nets to zero; BMS was never used. Neither is reported.
    assert SetupTag.FVG not in tags
    assert SetupTag.BMS not in tags
    assert tags == {SetupTag.CHOCH}


def test_date_label_is_not_zero_padded():
    import datetime as dt

    assert format_date_label(dt.date(2024, 1, 2)) == "1/2/2024"
    assert format_date_label(dt.date(2023, 11, 30)) == "11/30/2023"
