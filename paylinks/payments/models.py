"""
Schémas d'entrée/sortie de la création de lien de paiement.
Les noms JSON sont en camelCase (alias), les attributs Python en snake_case.
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaymentLinkRequest(BaseModel):
    """
    Body:
    { "productName": "T-shirt", "productDescription": "Coton bio",
      "unitAmount": 1500, "currency": "eur", "quantity": 2 }
    - unitAmount / quantity acceptent des chaînes entières ("1500") et sont convertis en int.
    - quantity absent ou null => 1.
    """
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    product_name: str = Field(alias="productName", min_length=1)
    product_description: Optional[str] = Field(default=None, alias="productDescription")
    unit_amount: int = Field(alias="unitAmount", gt=0)
    currency: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=1)

    @field_validator("product_description")
    @classmethod
    def blank_description_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @field_validator("currency")
    @classmethod
    def lower_currency(cls, v: str) -> str:
        return v.lower()

    @field_validator("quantity", mode="before")
    @classmethod
    def default_quantity(cls, v: Any) -> Any:
        if v is None or v == "":
            return 1
        return v


class PaymentLinkResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    payment_link_id: str = Field(alias="paymentLinkId")
    url: str

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)
