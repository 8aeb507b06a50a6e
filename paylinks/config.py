# paylinks.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Chemin du projet puis chargement explicite du .env racine
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

"""
Configuration centrale du service.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env), sans écraser l'environnement réel
- Normalise et expose les clés Stripe par mode (live / test)
- Expose les réglages HTTP (CORS, hosts), les options des liens de paiement et du rapport
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _env_flag(name: str, default: str = "true") -> bool:
    return _clean_env(os.getenv(name, default)).lower() in ("1", "true", "yes", "on")

def _env_int(name: str, default: int) -> int:
    raw = _clean_env(os.getenv(name) or "")
    try:
        return int(raw) if raw else default
    except ValueError:
        return default

# Stripe: une clé secrète par mode d'identifiants
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")
STRIPE_TEST_SECRET_KEY = _clean_env(os.getenv("STRIPE_TEST_SECRET_KEY") or "")
# Version d'API épinglée (optionnelle, sinon celle du compte)
STRIPE_API_VERSION = _clean_env(os.getenv("STRIPE_API_VERSION") or "") or None

LIVE_MODE = "live"
TEST_MODE = "test"
STRIPE_KEYS = {
    LIVE_MODE: STRIPE_SECRET_KEY,
    TEST_MODE: STRIPE_TEST_SECRET_KEY,
}

# Liens de paiement: options activées « là où Stripe les supporte »
PAYMENT_LINK_AUTOMATIC_TAX = _env_flag("PAYMENT_LINK_AUTOMATIC_TAX")
PAYMENT_LINK_COLLECT_PHONE = _env_flag("PAYMENT_LINK_COLLECT_PHONE")

# Rapport des paiements réussis
PAYMENT_INTENTS_PAGE_SIZE = 100
REPORT_EXPAND_CHARGES = _env_flag("REPORT_EXPAND_CHARGES")
REPORT_MAX_CONCURRENCY = max(1, _env_int("REPORT_MAX_CONCURRENCY", 8))

# CORS / hosts
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()]

# Process / logs
LOG_LEVEL = _clean_env(os.getenv("LOG_LEVEL") or "info").lower()
PORT = _env_int("PORT", 3000)
