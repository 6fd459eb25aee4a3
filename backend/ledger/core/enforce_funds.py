"""Funds Enforcement — affordability and deposit-cap rules.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Money arguments are Decimal; comparisons are exact
    - price == balance is affordable (balance may land on exactly 0)
    - deposit cap = debt * ratio; with no debt the cap is 0 and every deposit is refused

Design Decisions:
    - The zero-debt refusal is kept as-is: a client cannot pre-fund an account
      that owes nothing
    - Cap is quantized to cents so error messages never show sub-cent amounts
"""

from decimal import Decimal

from ledger.core.domain_types import to_money
from ledger.core.errors import (
    DepositCapExceededError, ErrorContext, InsufficientFundsError,
)


def check_affordable(
    price: Decimal, balance: Decimal, context: ErrorContext | None = None,
) -> InsufficientFundsError | None:
    """Client must hold at least the job price."""
    if price > balance:
        return InsufficientFundsError(price, balance, context)
    return None


def deposit_cap(debt: Decimal, ratio: Decimal) -> Decimal:
    """Maximum single deposit allowed for a client owing `debt`."""
    return to_money(debt * ratio)


def check_deposit_within_cap(
    amount: Decimal,
    debt: Decimal,
    ratio: Decimal,
    context: ErrorContext | None = None,
) -> DepositCapExceededError | None:
    """Deposit may not exceed `ratio` times the outstanding unpaid debt."""
    if amount > debt * ratio:
        return DepositCapExceededError(amount, deposit_cap(debt, ratio), context)
    return None
