# module paylinks.app
"""
Instance unique de l'application, construite par la factory (paylinks.app_setup.factory).
Les clients Stripe par mode sont créés au démarrage (lifespan) depuis la configuration.
"""
from paylinks.app_setup.factory import create_app

app = create_app()
