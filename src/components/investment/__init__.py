"""
Investment component - Compound-interest projection for monthly contributions.
"""

from ._impl import (
    future_value_annuity_due,
    project_investment,
    validate_investment_parameters,
)
from .component import run, run_calculate
from .models import (
    CalculateInvestmentInput,
    InvestmentOutput,
    InvestmentResult,
    InvestmentValidationError,
)

__all__ = [
    # Entry points
    "run",
    "run_calculate",
    # Models
    "CalculateInvestmentInput",
    "InvestmentOutput",
    "InvestmentResult",
    "InvestmentValidationError",
    # Core
    "future_value_annuity_due",
    "project_investment",
    "validate_investment_parameters",
]
