"""
Investment component - Investment return calculator.

Shell Layer - validates input and wraps the result.
"""

from __future__ import annotations

import logging
import math

from ._impl import INVALID_PARAMETERS, project_investment, validate_investment_parameters
from .models import CalculateInvestmentInput, InvestmentOutput

logger = logging.getLogger(__name__)


def run_calculate(input_data: CalculateInvestmentInput) -> InvestmentOutput:
    """Project the value of a monthly investment plan."""
    errors = validate_investment_parameters(
        input_data.monthly_investment,
        input_data.number_of_months,
        input_data.annual_interest_rate,
    )
    if errors:
        logger.debug("Rejected investment parameters: %s", input_data)
        return InvestmentOutput(result=None, errors=tuple(errors), success=False)

    result = project_investment(
        input_data.monthly_investment,
        input_data.number_of_months,
        input_data.annual_interest_rate,
    )
    if not (math.isfinite(result.final_value) and math.isfinite(result.total_invested)):
        logger.debug("Projection overflowed for %s", input_data)
        return InvestmentOutput(result=None, errors=(INVALID_PARAMETERS,), success=False)
    return InvestmentOutput(result=result, errors=(), success=True)


def run(input_data: CalculateInvestmentInput) -> InvestmentOutput:
    """Main entry point for the investment component."""
    return run_calculate(input_data)
