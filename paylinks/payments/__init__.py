"""
Module 'payments' (feature-first): point d'entrée public.
Réunit le schéma de requête, le client Stripe par mode et le cas d'usage de création de lien.
"""

from .models import PaymentLinkRequest, PaymentLinkResult
from .stripe_client import StripeProvider, build_providers
from .service import create_payment_link

__all__ = [
    # schémas
    "PaymentLinkRequest",
    "PaymentLinkResult",
    # stripe
    "StripeProvider",
    "build_providers",
    # cas d'usage
    "create_payment_link",
]
