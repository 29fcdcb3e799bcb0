"""
Pipeline behaviors (middleware) for the mediator.

Registered order in the container: Logging -> Validation -> SimulationLock -> Handler
"""
import logging
from typing import Any

from ...domain.shared.exceptions import DomainException
from ...pymediatr import PipelineBehavior

logger = logging.getLogger(__name__)


class LoggingBehavior(PipelineBehavior):
    """
    Logs command/query failures.

    Expected domain rejections (not enough gold, unknown route, ...) are
    logged at WARNING; anything else at ERROR with the traceback. Exceptions
    are always re-raised.
    """

    async def handle(self, request: Any, next_handler):
        request_name = type(request).__name__

        try:
            return await next_handler()
        except DomainException as e:
            logger.warning(f"{request_name} rejected ({e.kind}): {e}")
            raise
        except Exception as e:
            logger.error(f"Failed executing {request_name}: {e}", exc_info=True)
            raise


class ValidationBehavior(PipelineBehavior):
    """Calls request.validate() before the handler when the request defines it."""

    async def handle(self, request: Any, next_handler):
        if hasattr(request, 'validate') and callable(getattr(request, 'validate')):
            request.validate()

        return await next_handler()


class SimulationLockBehavior(PipelineBehavior):
    """
    Runs each request while holding the simulation lock.

    The event scheduler takes the same lock before regenerating markets, so a
    trade or dispatch always completes against the snapshot it started from.
    """

    def __init__(self, state):
        self._state = state

    async def handle(self, request: Any, next_handler):
        async with self._state.lock:
            return await next_handler()
