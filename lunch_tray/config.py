"""Runtime configuration defaults for pricing and debug logging."""

from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation

TAX_RATE = Decimal("0.08")
CURRENCY_SYMBOL = "$"
DEBUG_LOG_PATH = "/tmp/lunch-tray-debug.log"

_TAX_RATE_ENV = "LUNCH_TRAY_TAX_RATE"
_DEBUG_LOG_ENV = "LUNCH_TRAY_DEBUG_LOG"


def resolve_tax_rate() -> Decimal:
    """
    Resolve the sales tax rate applied at checkout.

    Resolution order:
    1. LUNCH_TRAY_TAX_RATE (if set), e.g. "0.0725"
    2. TAX_RATE
    """
    raw = os.environ.get(_TAX_RATE_ENV, "").strip()
    if not raw:
        return TAX_RATE

    try:
        rate = Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"{_TAX_RATE_ENV} must be a decimal number, got {raw!r}") from None

    if not rate.is_finite() or rate < 0:
        raise ValueError(f"{_TAX_RATE_ENV} must be a non-negative decimal, got {raw!r}")
    return rate


def resolve_debug_log_path() -> str:
    """Return the debug log path, honoring LUNCH_TRAY_DEBUG_LOG."""
    return os.environ.get(_DEBUG_LOG_ENV, "").strip() or DEBUG_LOG_PATH
