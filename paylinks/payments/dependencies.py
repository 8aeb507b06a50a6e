"""
Injection des clients Stripe par mode.
Les instances sont construites une seule fois au démarrage (lifespan) et rangées dans app.state.providers;
les tests remplacent ces dépendances via app.dependency_overrides.
"""
from fastapi import HTTPException, Request

from paylinks.config import LIVE_MODE, TEST_MODE
from .stripe_client import StripeProvider


def _provider_for(request: Request, mode: str) -> StripeProvider:
    providers = getattr(request.app.state, "providers", None) or {}
    provider = providers.get(mode)
    if provider is None:
        raise HTTPException(status_code=500, detail=f"Stripe provider '{mode}' not initialised")
    return provider


def get_live_provider(request: Request) -> StripeProvider:
    return _provider_for(request, LIVE_MODE)


def get_test_provider(request: Request) -> StripeProvider:
    return _provider_for(request, TEST_MODE)
