from typing import Any, Dict

from paylinks.payments.stripe_client import StripeProvider


def _key_kind(api_key: str) -> str:
    # sk_live_ / sk_test_ / rk_live_ (clé restreinte) ...
    if not api_key:
        return "missing"
    parts = api_key.split("_")
    return "_".join(parts[:2]) if len(parts) >= 3 else "unknown"


def health_stripe_info(providers: Dict[str, StripeProvider]) -> Dict[str, Any]:
    """État de configuration Stripe par mode, sans appel réseau et sans exposer les clés."""
    return {
        mode: {
            "configured": provider.configured,
            "key_kind": _key_kind(provider.api_key),
            "api_version": provider.api_version,
        }
        for mode, provider in providers.items()
    }
