from typing import List
from pydantic import BaseModel, ConfigDict, Field


class LineItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_name: str = Field(alias="productName")
    quantity: int
    product_description: str = Field(alias="productDescription")


class PaymentRecord(BaseModel):
    """Un paiement réussi, dénormalisé (acheteur + articles) pour le rapport."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    amount: int
    currency: str
    status: str
    created: str
    buyer_email: str = Field(alias="buyerEmail")
    buyer_name: str = Field(alias="buyerName")
    buyer_phone: str = Field(alias="buyerPhone")
    items_bought: List[LineItem] = Field(default_factory=list, alias="itemsBought")

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)
