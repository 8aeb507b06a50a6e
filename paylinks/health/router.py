from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from paylinks.health.service import health_stripe_info

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root():
    return {"ok": True}

@router.get("/stripe")
def health_stripe(request: Request):
    providers = getattr(request.app.state, "providers", None) or {}
    return JSONResponse(health_stripe_info(providers))
