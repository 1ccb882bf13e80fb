"""AI performance coach.

Builds a review prompt from an account's most recent trades and asks the
Anthropic Messages API for a Markdown coaching summary. Failures never reach
the caller: they come back as a fixed human-readable message.
"""

import html
import json
import logging
from collections.abc import Sequence

import anthropic

from tradejournal.config import settings
from tradejournal.schemas.account import Account
from tradejournal.schemas.trade import Trade

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_MESSAGE = "Unable to generate analysis at this time."
FAILURE_MESSAGE = "Failed to connect to AI coach. Please try again later."

PROMPT_TEMPLATE = """As a professional trading performance coach, analyze the following trading history for account "{name}".

Account Metrics:
- Currency: {currency}
- Recent Trades Data: {trades_json}

Please provide a structured performance review (Markdown format):
1. **Psychological & Behavioral Review**: Analyze recurring mistakes or emotional patterns (FOMO, overtrading, poor exit logic) noted in the "mistake" or "notes" fields.
2. **Session & Bias Optimization**: Look at the "session" and "bias" fields. Are they performing better in London vs NY? Is their HTF bias usually correct?
3. **Strategy Effectiveness**: Evaluate which SMC setups (OB, FVG, Liq Sweep) are providing the highest R-multiple returns.
4. **Action Plan**: Provide exactly 3 bullet points for the user to implement in their next 5 trades.

Keep it sharp, professional, and slightly critical if mistakes are repetitive. Use bold text for key insights."""


def summarize_trade(trade: Trade) -> dict:
    return {
        "symbol": trade.symbol,
        "side": trade.side.value,
        "session": trade.session.value,
        "bias": trade.bias.value,
        "result": trade.result,
        "resultR": trade.result_r,
        "tags": [tag.value for tag in trade.setups],
        "mistake": trade.mistake,
        "notes": trade.notes,
    }


def build_prompt(trades: Sequence[Trade], account: Account, recent: int | None = None) -> str:
    """Embed the last ``recent`` trades by list position, not by date."""
    limit = settings.coach_recent_trades if recent is None else recent
    summary = [summarize_trade(t) for t in trades]
    recent_trades = summary[-limit:] if limit > 0 else []
    return PROMPT_TEMPLATE.format(
        name=account.name,
        currency=account.currency,
        trades_json=json.dumps(recent_trades),
    )


async def request_coaching_summary(trades: Sequence[Trade], account: Account) -> str:
    """Return the coach's Markdown review, or a fixed message on any failure."""
    prompt = build_prompt(trades, account)
    try:
        client = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)
        message = await client.messages.create(
            model=settings.coach_model,
            max_tokens=settings.coach_max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        return text or EMPTY_RESPONSE_MESSAGE
    except Exception as e:
        logger.error(f"AI analysis error for account {account.id}: {e}")
        return FAILURE_MESSAGE


def render_analysis_html(text: str) -> str:
    """Escape provider text before turning line breaks into markup."""
    return html.escape(text).replace("\n", "<br/>")
