"""
Adaptateur Stripe: un client explicite par mode d'identifiants (live / test).
- Aucun état global: la clé est passée à chaque appel (api_key=...), jamais via stripe.api_key.
- Toute stripe.StripeError est convertie en ProviderError (message Stripe conservé).
- Les réponses sont rendues en dict/list Python simples: les objets du SDK ne sont plus des dict.
"""
import stripe
from typing import Any, Dict, List, Optional

from paylinks.config import STRIPE_API_VERSION, STRIPE_KEYS
from paylinks.errors import ProviderError


def _error_message(e: Exception) -> str:
    # user_message est le texte lisible fourni par Stripe (absent sur les erreurs réseau)
    return getattr(e, "user_message", None) or str(e) or e.__class__.__name__


def to_plain(value: Any) -> Any:
    """StripeObject / ListObject (éventuellement imbriqués) -> dict et list Python."""
    if isinstance(value, stripe.StripeObject):
        value = value.to_dict()
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_plain(v) for v in value]
    return value


class StripeProvider:
    """
    Client fournisseur de paiement pour un mode donné.
    Les méthodes sont synchrones (SDK Stripe); les appelants async passent par un threadpool.
    Retour: dict / list Python simples (voir to_plain).
    """

    def __init__(self, api_key: str, mode: str, api_version: Optional[str] = STRIPE_API_VERSION):
        self.api_key = api_key
        self.mode = mode
        self.api_version = api_version

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"api_key": self.api_key}
        if self.api_version:
            options["stripe_version"] = self.api_version
        return options

    def _call(self, operation: str, fn, *args, **params):
        try:
            result = fn(*args, **params, **self._options())
        except stripe.StripeError as e:
            raise ProviderError(_error_message(e), operation=operation, mode=self.mode) from e
        return to_plain(result)

    # --- Création (lien de paiement) ---

    def create_product(self, name: str, description: Optional[str] = None):
        params: Dict[str, Any] = {"name": name}
        if description:
            params["description"] = description
        return self._call("create_product", stripe.Product.create, **params)

    def create_price(self, *, product_id: str, unit_amount: int, currency: str, tax_behavior: str = "exclusive"):
        return self._call(
            "create_price",
            stripe.Price.create,
            product=product_id,
            unit_amount=unit_amount,
            currency=currency,
            tax_behavior=tax_behavior,
        )

    def create_payment_link(
        self,
        *,
        line_items: List[Dict[str, Any]],
        automatic_tax: bool = True,
        collect_phone: bool = True,
    ):
        params: Dict[str, Any] = {"line_items": line_items}
        if automatic_tax:
            params["automatic_tax"] = {"enabled": True}
        if collect_phone:
            params["phone_number_collection"] = {"enabled": True}
        return self._call("create_payment_link", stripe.PaymentLink.create, **params)

    # --- Lecture (rapport) ---

    def list_payment_intents(self, *, limit: int, expand: Optional[List[str]] = None):
        params: Dict[str, Any] = {"limit": limit}
        if expand:
            params["expand"] = expand
        return self._call("list_payment_intents", stripe.PaymentIntent.list, **params)

    def list_checkout_sessions(self, *, payment_intent: str, limit: int = 1):
        return self._call(
            "list_checkout_sessions",
            stripe.checkout.Session.list,
            payment_intent=payment_intent,
            limit=limit,
        )

    def retrieve_checkout_session(self, session_id: str, *, expand: Optional[List[str]] = None):
        params: Dict[str, Any] = {}
        if expand:
            params["expand"] = expand
        return self._call("retrieve_checkout_session", stripe.checkout.Session.retrieve, session_id, **params)

    def retrieve_product(self, product_id: str):
        return self._call("retrieve_product", stripe.Product.retrieve, product_id)


def build_providers(keys: Optional[Dict[str, str]] = None) -> Dict[str, StripeProvider]:
    """
    Construit un StripeProvider par mode (une seule instance par mode, au démarrage).
    Une clé absente n'empêche pas le démarrage: les appels échoueront côté SDK (No API key provided).
    """
    keys = STRIPE_KEYS if keys is None else keys
    return {mode: StripeProvider(api_key=key, mode=mode) for mode, key in keys.items()}
