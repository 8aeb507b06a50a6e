"""
Factory d'application utilisée par les entrypoints (paylinks.app, paylinks.asgi).
Ordonne les étapes d'initialisation de manière lisible et testable.
"""
from typing import Dict, Optional
from fastapi import FastAPI

from paylinks.payments.stripe_client import StripeProvider
from .exceptions import register_exception_handlers
from .lifespan import lifespan
from .log_config import configure_logging
from .middlewares import register_basic_middlewares, register_no_cache_middleware, register_security_middleware
from .routers import register_routers

def create_app(providers: Optional[Dict[str, StripeProvider]] = None) -> FastAPI:
    """
    Construit l'app FastAPI avec le lifespan et enregistre:
      - logs, middlewares (CORS, hosts, sécurité, no-cache)
      - gestionnaires d'exceptions et routers (API v1, health)
    providers: clients Stripe par mode déjà construits (sinon créés au démarrage depuis la config).
    """
    configure_logging()
    app = FastAPI(
        title="Payment Links API",
        version="1.0.0",
        description="Création de liens de paiement Stripe et rapport des paiements réussis.",
        lifespan=lifespan,
    )
    if providers is not None:
        app.state.providers = providers
    register_basic_middlewares(app)
    register_security_middleware(app)
    register_no_cache_middleware(app)
    register_exception_handlers(app)
    register_routers(app)
    return app
