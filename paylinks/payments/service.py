"""
Cas d'usage 'payments': création d'un lien de paiement partageable.
Enchaîne strictement produit -> prix -> lien; le premier échec Stripe interrompt la suite.
"""
import logging

from paylinks.config import PAYMENT_LINK_AUTOMATIC_TAX, PAYMENT_LINK_COLLECT_PHONE
from .models import PaymentLinkRequest, PaymentLinkResult
from .stripe_client import StripeProvider

logger = logging.getLogger(__name__)


def create_payment_link(
    provider: StripeProvider,
    request: PaymentLinkRequest,
    *,
    automatic_tax: bool = PAYMENT_LINK_AUTOMATIC_TAX,
    collect_phone: bool = PAYMENT_LINK_COLLECT_PHONE,
) -> PaymentLinkResult:
    """
    Crée produit, prix (taxe exclusive) puis lien de paiement.
    - request est déjà validé (PaymentLinkRequest).
    - Lève ProviderError si une étape échoue; les étapes suivantes ne sont pas tentées.
    Retour: uniquement l'id du lien et son URL publique.
    """
    product = provider.create_product(request.product_name, request.product_description)
    price = provider.create_price(
        product_id=product["id"],
        unit_amount=request.unit_amount,
        currency=request.currency,
        tax_behavior="exclusive",
    )
    link = provider.create_payment_link(
        line_items=[{"price": price["id"], "quantity": request.quantity}],
        automatic_tax=automatic_tax,
        collect_phone=collect_phone,
    )
    logger.info(
        "payments.link created id=%s mode=%s amount=%s currency=%s quantity=%s",
        link["id"], provider.mode, request.unit_amount, request.currency, request.quantity,
    )
    return PaymentLinkResult(payment_link_id=link["id"], url=link["url"])
