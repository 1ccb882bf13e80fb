"""CSV export of trades."""

import csv
import io
from decimal import Decimal
from collections.abc import Sequence

from tradejournal.schemas.trade import Trade

CSV_HEADER = [
    "Date",
    "Symbol",
    "Side",
    "Session",
    "Bias",
    "Entry",
    "SL",
    "TP",
    "Result",
    "ResultR",
    "Setups",
    "Mistake",
    "Notes",
]


def _number(value: float) -> str:
    """Render 500.0 as 500, 1.0825 unchanged and 1e-05 as 0.00001."""
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _quoted(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def _row(trade: Trade) -> list[str]:
    return [
        trade.date.isoformat(),
        trade.symbol,
        trade.side.value,
        trade.session.value,
        trade.bias.value,
        _number(trade.entry),
        _number(trade.sl),
        _number(trade.tp),
        _number(trade.result),
        _number(trade.result_r),
        "|".join(tag.value for tag in trade.setups),
        trade.mistake or "",
    ]


def trades_to_csv(trades: Sequence[Trade]) -> str:
    """Export trades as CSV with a fixed 13-column header.

    Notes are always quoted; every other field is quoted only when it holds a
    delimiter, quote or line break.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for trade in trades:
        # csv.writer cannot force quoting on one column, so notes are appended pre-quoted
        line = io.StringIO()
        csv.writer(line, lineterminator="").writerow(_row(trade))
        buf.write(f"{line.getvalue()},{_quoted(trade.notes)}\n")
    return buf.getvalue()
