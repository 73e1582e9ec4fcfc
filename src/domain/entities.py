from decimal import Decimal

from pydantic import BaseModel

# --- Catalog ---


class Product(BaseModel):
    id: str = ""
    name: str = ""
    description: str = ""
    price: Decimal = Decimal("0")
    category: str = ""
