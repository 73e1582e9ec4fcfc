"""
Investment component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InvestmentValidationError:
    """Investment validation error. Carries no field detail."""

    code: str
    message: str


@dataclass(frozen=True)
class CalculateInvestmentInput:
    """Monthly contribution plan. The rate is annual, e.g. 0.1 for 10%."""

    monthly_investment: float
    number_of_months: int
    annual_interest_rate: float


@dataclass(frozen=True)
class InvestmentResult:
    """Projection result; echoes the inputs."""

    monthly_investment: float
    number_of_months: int
    annual_interest_rate: float
    total_invested: float
    total_interest: float
    final_value: float


@dataclass(frozen=True)
class InvestmentOutput:
    """Output from calculate operation."""

    result: InvestmentResult | None
    errors: tuple[InvestmentValidationError, ...]
    success: bool
