"""
Registre central des routers.
- API v1: liens de paiement, rapport des paiements réussis (chacun en live et /test)
- Health: /health, /health/stripe
"""
from fastapi import FastAPI
from paylinks.payments import views as payments_views
from paylinks.reports import views as reports_views
from paylinks.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    # API v1
    app.include_router(payments_views.router)
    app.include_router(reports_views.router)
    # Health & monitoring
    app.include_router(health_router)
