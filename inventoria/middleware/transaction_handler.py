from functools import wraps
import logging

logger = logging.getLogger(__name__)


def transactional(func):
    """
    Décorateur qui sérialise une opération de service sur le classeur
    Usage: @transactional sur les méthodes d'un service possédant self.store
    """

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        with self.store.lock:
            try:
                result = func(self, *args, **kwargs)
                logger.debug(f"Operation completed in {func.__name__}")
                return result
            except Exception as e:
                logger.error(f"Operation failed in {func.__name__}: {e}")
                raise

    return wrapper
