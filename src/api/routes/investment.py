"""Route for the investment return calculator."""

from fastapi import APIRouter, HTTPException, status

from src.api.schemas import InvestmentRequest, InvestmentResponse
from src.components.investment import CalculateInvestmentInput, run_calculate

router = APIRouter()


@router.post(
    "/investment/calculate",
    response_model=InvestmentResponse,
    operation_id="CalculateInvestment",
)
def calculate_investment(data: InvestmentRequest) -> InvestmentResponse:
    """Project the future value of fixed monthly investments."""
    input_data = CalculateInvestmentInput(
        monthly_investment=data.monthly_investment,
        number_of_months=data.number_of_months,
        annual_interest_rate=data.annual_interest_rate,
    )
    result = run_calculate(input_data)

    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)

    assert result.result is not None
    return InvestmentResponse.from_result(result.result)
