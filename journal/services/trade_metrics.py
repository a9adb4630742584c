"""Trade validation and financial metrics.

Validates raw trade input (direction vs. stop-loss/take-profit placement,
lifecycle rules around closing, close-reason taxonomy) and derives pip
distances, risk/reward ratio and the pip size used.
All functions are pure computation: no I/O, no database access, no logging.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext

from journal.utils.constants import (
    CLOSE_REASONS,
    DIRECTIONS,
    MANUAL_DESCRIPTION_MAX_LENGTH,
    MANUAL_REASON_MAX_LENGTH,
    MANUAL_REASON_OTHER,
    PIP_SIZE_01_SYMBOLS,
    PIP_SIZE_DEFAULT,
    PIP_SIZE_JPY,
    SYMBOL_MAX_LENGTH,
)

_ZERO = Decimal("0")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TradeValidationError(ValueError):
    """Base class for rejected trade input. `kind` is stable for callers to switch on."""

    kind = "trade_validation_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingRequiredField(TradeValidationError):
    kind = "missing_required_field"


class InvalidFieldValue(TradeValidationError):
    kind = "invalid_field_value"


class InconsistentOrdering(TradeValidationError):
    kind = "inconsistent_ordering"


class InconsistentLifecycleState(TradeValidationError):
    kind = "inconsistent_lifecycle_state"


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TradeInput:
    symbol: str | None
    direction: str | None
    entry_price: Decimal | None
    exit_price: Decimal | None = None
    stop_loss_price: Decimal | None = None
    take_profit_price: Decimal | None = None
    close_reason_override: str | None = None
    manual_reason: str | None = None
    manual_description: str | None = None
    commission_money: Decimal | None = None
    swap_money: Decimal | None = None
    net_pnl_money: Decimal | None = None
    created_at: datetime | None = None
    closed_at: datetime | None = None


@dataclass(frozen=True)
class TradeMetrics:
    sl_pips: Decimal | None
    tp_pips: Decimal | None
    rr_ratio: Decimal | None
    pip_size_used: Decimal


@dataclass(frozen=True)
class ValidatedTrade:
    """Normalized trade fields plus derived metrics, ready to persist as-is."""

    symbol: str
    direction: str
    entry_price: Decimal
    exit_price: Decimal | None
    stop_loss_price: Decimal | None
    take_profit_price: Decimal | None
    close_reason_override: str | None
    manual_reason: str | None
    manual_description: str | None
    commission_money: Decimal | None
    swap_money: Decimal | None
    net_pnl_money: Decimal | None
    created_at: datetime
    closed_at: datetime | None
    metrics: TradeMetrics

    @property
    def is_closed(self) -> bool:
        return self.closed_at is not None

    def as_record(self) -> dict:
        """Flat column mapping: trade fields with the metrics inlined."""
        record = asdict(self)
        record.update(record.pop("metrics"))
        return record


# ---------------------------------------------------------------------------
# Decimal helpers
# ---------------------------------------------------------------------------

def _divide(numerator: Decimal, denominator: Decimal, places: int) -> Decimal:
    """numerator / denominator rounded half-up to `places` decimal places."""
    with localcontext() as ctx:
        ctx.prec = 50
        ctx.rounding = ROUND_HALF_UP
        return (numerator / denominator).quantize(Decimal(1).scaleb(-places))


def _round(value: Decimal, places: int) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

def pip_size_for_symbol(symbol: str) -> Decimal:
    """0.01 for JPY crosses and gold, 0.0001 for everything else."""
    normalized = symbol.strip().upper()
    if normalized.endswith("JPY") or normalized in PIP_SIZE_01_SYMBOLS:
        return PIP_SIZE_JPY
    return PIP_SIZE_DEFAULT


def _pips(distance: Decimal, pip_size: Decimal) -> Decimal:
    return _round(_divide(abs(distance), pip_size, 4), 1)


def compute_metrics(
    symbol: str,
    direction: str,
    entry_price: Decimal,
    stop_loss_price: Decimal | None,
    take_profit_price: Decimal | None,
) -> TradeMetrics:
    """Derive pips and R:R from already-validated prices.

    SL and TP pips are computed independently; the ratio needs both bounds.
    """
    direction = _normalize_direction(direction)
    pip_size = pip_size_for_symbol(symbol)

    sl_pips = None
    if stop_loss_price is not None:
        sl_pips = _pips(entry_price - stop_loss_price, pip_size)

    tp_pips = None
    if take_profit_price is not None:
        tp_pips = _pips(take_profit_price - entry_price, pip_size)

    rr_ratio = None
    if stop_loss_price is not None and take_profit_price is not None:
        if direction == "LONG":
            risk = entry_price - stop_loss_price
            reward = take_profit_price - entry_price
        else:
            risk = stop_loss_price - entry_price
            reward = entry_price - take_profit_price
        if risk <= _ZERO or reward <= _ZERO:
            raise InconsistentOrdering(
                "Risk and reward must be positive based on Entry/SL/TP ordering"
            )
        rr_ratio = _round(_divide(reward, risk, 4), 2)

    return TradeMetrics(
        sl_pips=sl_pips,
        tp_pips=tp_pips,
        rr_ratio=rr_ratio,
        pip_size_used=_round(pip_size, 4),
    )


# ---------------------------------------------------------------------------
# Field validation (order matters: the first violation is reported)
# ---------------------------------------------------------------------------

def _normalize_symbol(symbol: str | None) -> str:
    if symbol is None or not symbol.strip():
        raise MissingRequiredField("Symbol is required")
    text = symbol.strip()
    if len(text) > SYMBOL_MAX_LENGTH:
        raise InvalidFieldValue(f"Symbol must be at most {SYMBOL_MAX_LENGTH} characters")
    return text.upper()


def _normalize_direction(direction: str | None) -> str:
    if direction is None or not direction.strip():
        raise MissingRequiredField("Direction is required")
    text = direction.strip().upper()
    if text not in DIRECTIONS:
        raise InvalidFieldValue("Direction must be LONG or SHORT")
    return text


def _check_positive(value: Decimal | None, label: str) -> None:
    if value is not None and value <= _ZERO:
        raise InvalidFieldValue(f"{label} must be positive")


def _check_ordering(
    direction: str,
    entry_price: Decimal,
    stop_loss_price: Decimal | None,
    take_profit_price: Decimal | None,
) -> None:
    if direction == "LONG":
        if stop_loss_price is not None and stop_loss_price >= entry_price:
            raise InconsistentOrdering("For LONG, Stop Loss must be below Entry")
        if take_profit_price is not None and take_profit_price <= entry_price:
            raise InconsistentOrdering("For LONG, Take Profit must be above Entry")
    else:
        if stop_loss_price is not None and stop_loss_price <= entry_price:
            raise InconsistentOrdering("For SHORT, Stop Loss must be above Entry")
        if take_profit_price is not None and take_profit_price >= entry_price:
            raise InconsistentOrdering("For SHORT, Take Profit must be below Entry")

    if stop_loss_price is None or take_profit_price is None:
        return
    if direction == "LONG":
        if not stop_loss_price < entry_price < take_profit_price:
            raise InconsistentOrdering(
                "For LONG, Stop Loss must be below Entry and Take Profit above Entry"
            )
    elif not take_profit_price < entry_price < stop_loss_price:
        raise InconsistentOrdering(
            "For SHORT, Stop Loss must be above Entry and Take Profit below Entry"
        )


def _normalize_close_reason(reason: str | None) -> str | None:
    if reason is None or not reason.strip():
        return None
    text = reason.strip().upper()
    if text not in CLOSE_REASONS:
        raise InvalidFieldValue(f"Close reason must be one of: {', '.join(CLOSE_REASONS)}")
    return text


def _normalize_manual_details(
    close_reason: str | None,
    manual_reason: str | None,
    manual_description: str | None,
) -> tuple[str | None, str | None]:
    """Manual sub-fields survive only under a MANUAL close reason."""
    if close_reason != "MANUAL":
        return None, None

    reason = (manual_reason or "").strip()
    if not reason:
        raise MissingRequiredField("Manual reason is required when close reason is MANUAL")
    if len(reason) > MANUAL_REASON_MAX_LENGTH:
        raise InvalidFieldValue(
            f"Manual reason must be at most {MANUAL_REASON_MAX_LENGTH} characters"
        )

    if reason.upper() != MANUAL_REASON_OTHER:
        return reason, None

    description = (manual_description or "").strip()
    if not description:
        raise MissingRequiredField("Manual description is required when manual reason is OTHER")
    if len(description) > MANUAL_DESCRIPTION_MAX_LENGTH:
        raise InvalidFieldValue(
            f"Manual description must be at most {MANUAL_DESCRIPTION_MAX_LENGTH} characters"
        )
    return reason, description


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def validate_and_compute(
    trade_input: TradeInput,
    prior_created_at: datetime | None = None,
) -> ValidatedTrade:
    """Validate a trade and derive its metrics.

    `prior_created_at` is the creation time already persisted for the trade
    (or "now" on create); a caller-supplied `created_at` takes precedence.
    Raises a TradeValidationError subclass on the first rule violated.
    """
    symbol = _normalize_symbol(trade_input.symbol)
    direction = _normalize_direction(trade_input.direction)

    entry_price = trade_input.entry_price
    if entry_price is None:
        raise MissingRequiredField("Entry price is required")
    _check_positive(entry_price, "Entry price")

    # Lifecycle: an open trade carries no exit price
    exit_price = trade_input.exit_price
    if trade_input.closed_at is None:
        exit_price = None
    elif exit_price is None or exit_price <= _ZERO:
        raise InconsistentLifecycleState("Exit price is required when closing a trade")

    stop_loss_price = trade_input.stop_loss_price
    take_profit_price = trade_input.take_profit_price
    _check_positive(stop_loss_price, "Stop loss price")
    _check_positive(take_profit_price, "Take profit price")
    _check_ordering(direction, entry_price, stop_loss_price, take_profit_price)

    commission = trade_input.commission_money
    if commission is not None and commission < _ZERO:
        raise InvalidFieldValue("Commission must be zero or positive")

    close_reason = _normalize_close_reason(trade_input.close_reason_override)
    manual_reason, manual_description = _normalize_manual_details(
        close_reason, trade_input.manual_reason, trade_input.manual_description
    )

    created_at = trade_input.created_at or prior_created_at
    if created_at is None:
        raise MissingRequiredField("Created time is required")

    metrics = compute_metrics(symbol, direction, entry_price, stop_loss_price, take_profit_price)

    return ValidatedTrade(
        symbol=symbol,
        direction=direction,
        entry_price=entry_price,
        exit_price=exit_price,
        stop_loss_price=stop_loss_price,
        take_profit_price=take_profit_price,
        close_reason_override=close_reason,
        manual_reason=manual_reason,
        manual_description=manual_description,
        commission_money=commission,
        swap_money=trade_input.swap_money,
        net_pnl_money=trade_input.net_pnl_money,
        created_at=created_at,
        closed_at=trade_input.closed_at,
        metrics=metrics,
    )
