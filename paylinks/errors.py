"""
Erreurs métier du service.
- ProviderError: échec remonté par Stripe (création ou lecture), mappé en HTTP 500.
- MissingAssociationError: paiement réussi sans session Checkout retrouvable (non fatal).
"""
from typing import Optional


class ProviderError(Exception):
    """Échec d'un appel au fournisseur de paiement, porte le message Stripe."""

    def __init__(self, message: str, *, operation: Optional[str] = None, mode: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.mode = mode


class MissingAssociationError(LookupError):
    def __init__(self, payment_intent_id: str):
        super().__init__(f"No checkout session found for payment intent {payment_intent_id}")
        self.payment_intent_id = payment_intent_id
