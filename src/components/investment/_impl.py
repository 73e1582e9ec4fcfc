"""
Investment projection - future value of regular monthly contributions.

Functional Core - pure calculation, no I/O.

Contributions are made at the start of each month and interest compounds
monthly at annual_interest_rate / 12, so the result is the future value of
an annuity due:

    FV = PMT * (((1 + r) ** n - 1) / r) * (1 + r)

With a zero rate the closed form divides by zero and FV is simply PMT * n.
A growth factor too large for a float comes back as inf; the shell rejects
projections that are not finite.
"""

from __future__ import annotations

import math

from .models import InvestmentResult, InvestmentValidationError

MONTHS_PER_YEAR = 12

INVALID_PARAMETERS = InvestmentValidationError(
    code="invalid_parameters",
    message="Invalid investment parameters",
)


def validate_investment_parameters(
    monthly_investment: float,
    number_of_months: int,
    annual_interest_rate: float,
) -> list[InvestmentValidationError]:
    """Any failed precondition yields the same single error. NaN and inf fail."""
    valid = (
        math.isfinite(monthly_investment)
        and math.isfinite(annual_interest_rate)
        and monthly_investment > 0
        and number_of_months > 0
        and annual_interest_rate >= 0
    )
    if not valid:
        return [INVALID_PARAMETERS]
    return []


def future_value_annuity_due(
    payment: float, periods: int, rate_per_period: float
) -> float:
    if rate_per_period == 0:
        return payment * periods

    try:
        growth = (1 + rate_per_period) ** periods
    except OverflowError:
        return math.inf
    return payment * (((growth - 1) / rate_per_period) * (1 + rate_per_period))


def project_investment(
    monthly_investment: float,
    number_of_months: int,
    annual_interest_rate: float,
) -> InvestmentResult:
    """Compute the projection. Assumes parameters are already validated."""
    monthly_rate = annual_interest_rate / MONTHS_PER_YEAR

    final_value = future_value_annuity_due(
        monthly_investment, number_of_months, monthly_rate
    )
    total_invested = monthly_investment * number_of_months

    return InvestmentResult(
        monthly_investment=monthly_investment,
        number_of_months=number_of_months,
        annual_interest_rate=annual_interest_rate,
        total_invested=total_invested,
        total_interest=final_value - total_invested,
        final_value=final_value,
    )
