from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from paylinks.payments import service
from paylinks.payments.dependencies import get_live_provider, get_test_provider
from paylinks.payments.models import PaymentLinkRequest
from paylinks.payments.stripe_client import StripeProvider

router = APIRouter(prefix="/api/v1", tags=["Payments"])

_responses = {
    400: {"description": "Validation failed: {message, errors: [{field, message}]}"},
    500: {"description": "Stripe error: {error}"},
}


def _create_link(payload: PaymentLinkRequest, provider: StripeProvider) -> JSONResponse:
    result = service.create_payment_link(provider, payload)
    return JSONResponse(status_code=201, content=result.to_response())


@router.post("/create-payment-link", status_code=201, responses=_responses)
def create_payment_link(payload: PaymentLinkRequest, provider: StripeProvider = Depends(get_live_provider)):
    """
    Crée un produit, son prix puis un lien de paiement (identifiants live).
    Retour 201: { "paymentLinkId": "plink_...", "url": "https://buy.stripe.com/..." }
    """
    return _create_link(payload, provider)


@router.post("/test/create-payment-link", status_code=201, responses=_responses)
def create_payment_link_test(payload: PaymentLinkRequest, provider: StripeProvider = Depends(get_test_provider)):
    """Variante identique sur les identifiants de test."""
    return _create_link(payload, provider)
