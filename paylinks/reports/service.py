"""
Cas d'usage 'reports': rapport des paiements réussis.

Étapes:
- liste jusqu'à 100 PaymentIntents (dernière charge incluse) et garde le statut "succeeded";
- pour chaque intent, en parallèle: session Checkout associée, ses line items, puis les produits;
- chaque résolution est isolée: session absente ou erreur Stripe => paiement écarté, pas d'échec global.
Les appels Stripe (SDK synchrone) passent par le threadpool Starlette, bornés par un sémaphore.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from starlette.concurrency import run_in_threadpool

from paylinks.config import (
    PAYMENT_INTENTS_PAGE_SIZE,
    REPORT_EXPAND_CHARGES,
    REPORT_MAX_CONCURRENCY,
)
from paylinks.errors import MissingAssociationError, ProviderError
from paylinks.payments.stripe_client import StripeProvider
from .models import LineItem, PaymentRecord

logger = logging.getLogger(__name__)

SUCCEEDED = "succeeded"
NOT_AVAILABLE = "N/A"
NO_DESCRIPTION = "No description available"


class _BoundedCalls:
    """Exécute les appels Stripe hors de la boucle, au plus max_concurrency à la fois."""

    def __init__(self, max_concurrency: int):
        self._semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def __call__(self, fn, *args, **kwargs):
        async with self._semaphore:
            return await run_in_threadpool(fn, *args, **kwargs)


def to_iso_instant(created: int) -> str:
    """Epoch secondes -> ISO-8601 UTC en millisecondes ("2024-04-24T23:06:40.000Z")."""
    millis = int(created) * 1000
    dt = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def charge_of(intent: Dict[str, Any]) -> Dict[str, Any]:
    """
    Charge associée à l'intent:
    - latest_charge si développée (expand), sinon ignorée (simple id);
    - ancien format d'API: charges.data[0].
    """
    latest = intent.get("latest_charge")
    if isinstance(latest, dict):
        return latest
    legacy = (intent.get("charges") or {}).get("data") or []
    return legacy[0] if legacy else {}


def buyer_details(session: Dict[str, Any], charge: Dict[str, Any]) -> Tuple[str, str, str]:
    # Téléphone: uniquement saisi côté Checkout, pas de repli sur la charge
    details = session.get("customer_details") or {}
    billing = (charge or {}).get("billing_details") or {}
    email = details.get("email") or billing.get("email") or NOT_AVAILABLE
    name = details.get("name") or billing.get("name") or NOT_AVAILABLE
    phone = details.get("phone") or NOT_AVAILABLE
    return email, name, phone


def _product_id(line_item: Dict[str, Any]) -> str:
    product = (line_item.get("price") or {}).get("product")
    if isinstance(product, dict):
        return product["id"]
    if not product:
        raise ProviderError(f"Line item {line_item.get('id')} has no product", operation="line_item")
    return product


async def _resolve_line_item(provider: StripeProvider, call: _BoundedCalls, line_item: Dict[str, Any]) -> LineItem:
    product = await call(provider.retrieve_product, _product_id(line_item))
    return LineItem(
        product_name=product.get("name") or line_item.get("description") or "",
        quantity=int(line_item.get("quantity") or 0),
        product_description=product.get("description") or NO_DESCRIPTION,
    )


async def resolve_payment_record(provider: StripeProvider, call: _BoundedCalls, intent: Dict[str, Any]) -> PaymentRecord:
    """
    Construit le PaymentRecord d'un intent réussi.
    Lève MissingAssociationError si aucune session Checkout n'est liée, ProviderError si Stripe échoue.
    """
    intent_id = intent["id"]
    sessions = await call(provider.list_checkout_sessions, payment_intent=intent_id, limit=1)
    found = sessions.get("data") or []
    if not found:
        raise MissingAssociationError(intent_id)

    session = await call(provider.retrieve_checkout_session, found[0]["id"], expand=["line_items"])
    email, name, phone = buyer_details(session, charge_of(intent))

    line_items = (session.get("line_items") or {}).get("data") or []
    items = await asyncio.gather(*(_resolve_line_item(provider, call, li) for li in line_items))

    return PaymentRecord(
        id=intent_id,
        amount=intent.get("amount"),
        currency=intent.get("currency"),
        status=intent.get("status"),
        created=to_iso_instant(intent.get("created")),
        buyer_email=email,
        buyer_name=name,
        buyer_phone=phone,
        items_bought=list(items),
    )


async def _resolve_or_drop(provider: StripeProvider, call: _BoundedCalls, intent: Dict[str, Any]) -> Optional[PaymentRecord]:
    intent_id = intent.get("id")
    try:
        return await resolve_payment_record(provider, call, intent)
    except MissingAssociationError:
        # Possible sous-déclaration si la session est créée en différé: on trace l'intent écarté
        logger.info("reports.drop intent=%s mode=%s reason=no_checkout_session", intent_id, provider.mode)
    except ProviderError as e:
        logger.warning("reports.drop intent=%s mode=%s reason=provider_error error=%s", intent_id, provider.mode, e.message)
    except Exception:
        logger.exception("reports.drop intent=%s mode=%s reason=unexpected", intent_id, provider.mode)
    return None


async def list_successful_payments(
    provider: StripeProvider,
    *,
    page_size: int = PAYMENT_INTENTS_PAGE_SIZE,
    expand_charges: bool = REPORT_EXPAND_CHARGES,
    max_concurrency: int = REPORT_MAX_CONCURRENCY,
) -> List[PaymentRecord]:
    """
    Retour: les PaymentRecord résolus, dans l'ordre de listing Stripe.
    Lève ProviderError uniquement si le listing initial des intents échoue.
    """
    call = _BoundedCalls(max_concurrency)
    expand = ["data.latest_charge"] if expand_charges else None
    intents = await call(provider.list_payment_intents, limit=page_size, expand=expand)

    succeeded = [i for i in (intents.get("data") or []) if i.get("status") == SUCCEEDED]
    resolved = await asyncio.gather(*(_resolve_or_drop(provider, call, i) for i in succeeded))
    records = [r for r in resolved if r is not None]

    logger.info(
        "reports.successful_payments mode=%s listed=%s succeeded=%s records=%s",
        provider.mode, len(intents.get("data") or []), len(succeeded), len(records),
    )
    return records
