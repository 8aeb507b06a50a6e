"""
Lifespan FastAPI: initialisation des ressources partagées.
- Construit un StripeProvider par mode (live / test), une seule fois, dans app.state.providers.
- Une clé manquante n'empêche pas le démarrage: le mode concerné répondra 500 avec l'erreur Stripe.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from paylinks.payments.stripe_client import build_providers

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("uvicorn.error")
    providers = getattr(app.state, "providers", None)
    if not providers:
        providers = build_providers()
        app.state.providers = providers

    for mode, provider in providers.items():
        if provider.configured:
            logger.info("Stripe provider ready mode=%s", mode)
        else:
            logger.warning("Stripe provider mode=%s has no secret key; its endpoints will fail", mode)

    yield
