from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from paylinks.payments.dependencies import get_live_provider, get_test_provider
from paylinks.payments.stripe_client import StripeProvider
from paylinks.reports import service

router = APIRouter(prefix="/api/v1", tags=["Reports"])

_responses = {500: {"description": "Stripe error while listing payment intents: {error}"}}


async def _report(provider: StripeProvider) -> JSONResponse:
    records = await service.list_successful_payments(provider)
    return JSONResponse({"successfulPayments": [r.to_response() for r in records]})


@router.get("/successful-payments", responses=_responses)
async def successful_payments(provider: StripeProvider = Depends(get_live_provider)):
    """
    Paiements réussis (100 derniers intents) avec acheteur et articles.
    Les paiements sans session Checkout retrouvable sont écartés.
    """
    return await _report(provider)


@router.get("/test/successful-payments", responses=_responses)
async def successful_payments_test(provider: StripeProvider = Depends(get_test_provider)):
    return await _report(provider)
