"""
ASGI entrypoint: expose `app` pour les process managers / déploiements.

- En production, un process manager (ex: gunicorn -k uvicorn.workers.UvicornWorker) importe `paylinks.asgi:app`.
- Toute la configuration FastAPI (routes, middlewares, exceptions) est centralisée dans paylinks.app_setup.
"""

from paylinks.app import app

if __name__ == "__main__":
    # Exécution directe utile en développement local (uvicorn standalone).
    import uvicorn
    from paylinks.config import PORT
    uvicorn.run(
        "paylinks.asgi:app",
        host="0.0.0.0",
        port=PORT,
        reload=True,
    )
