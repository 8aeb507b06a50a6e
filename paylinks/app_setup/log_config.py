import logging

from paylinks.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Attache un handler au logger 'paylinks' (uvicorn ne configure que ses propres loggers).
    Idempotent: un second appel ne duplique pas le handler.
    """
    logger = logging.getLogger("paylinks")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
