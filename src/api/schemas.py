from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from src.components.investment import InvestmentResult
from src.domain.entities import Product

# Prices stay exact in the domain but go over the wire as JSON numbers.
JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Products ---
class ProductRequest(CamelModel):
    # JSON null is accepted for the optional text fields and read as empty.
    id: str | None = None
    name: str = ""
    description: str | None = ""
    price: Decimal = Decimal("0")
    category: str | None = ""


class ProductPatchRequest(CamelModel):
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    category: str | None = None


class ProductResponse(CamelModel):
    id: str
    name: str
    description: str
    price: JsonDecimal
    category: str

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
        )


# --- Investment ---
class InvestmentRequest(CamelModel):
    # Missing fields default to zero; the calculator rejects a zero amount
    # or month count, while a zero rate is valid.
    monthly_investment: float = 0.0
    number_of_months: int = 0
    annual_interest_rate: float = 0.0


class InvestmentResponse(CamelModel):
    monthly_investment: float
    number_of_months: int
    annual_interest_rate: float
    total_invested: float
    total_interest: float
    final_value: float

    @classmethod
    def from_result(cls, result: InvestmentResult) -> "InvestmentResponse":
        return cls(
            monthly_investment=result.monthly_investment,
            number_of_months=result.number_of_months,
            annual_interest_rate=result.annual_interest_rate,
            total_invested=result.total_invested,
            total_interest=result.total_interest,
            final_value=result.final_value,
        )
