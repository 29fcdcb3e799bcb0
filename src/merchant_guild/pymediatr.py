"""
Small CQRS mediator used by the guild application layer.

Commands (trade, dispatch, hire, reset) and queries (player, cities, goods,
news) are plain frozen dataclasses. Each one is routed through a chain of
pipeline behaviors before reaching the handler registered for its type.
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Any, Callable, Dict, List

TRequest = TypeVar('TRequest')
TResponse = TypeVar('TResponse')


class Request(Generic[TResponse], ABC):
    """
    Base class for commands and queries.

    Subclasses should be frozen dataclasses. The type parameter names the
    response the handler produces.

    Example:
        @dataclass(frozen=True)
        class GetPlayerQuery(Request[PlayerView]):
            pass
    """
    pass


class RequestHandler(Generic[TRequest, TResponse], ABC):
    """Handles exactly one request type through its async handle() method."""

    @abstractmethod
    async def handle(self, request: TRequest) -> TResponse:
        """Apply the command or answer the query; domain rejections propagate as exceptions."""


class PipelineBehavior(ABC):
    """
    Middleware wrapped around every handler invocation.

    A behavior may inspect the request, call next_handler() to continue the
    pipeline, post-process the response or react to exceptions.
    """

    @abstractmethod
    async def handle(self, request: Any, next_handler: Callable):
        pass


class Mediator:
    """
    Routes requests through the registered behaviors to their handler.

    Handlers are registered as factories so that each request gets a fresh
    handler bound to the current repositories.
    """

    def __init__(self):
        self._handlers: Dict[type, Callable[[], RequestHandler]] = {}
        self._behaviors: List[PipelineBehavior] = []

    def register_handler(self, request_type: type, handler_factory: Callable[[], RequestHandler]):
        """Bind a request class to a zero-argument factory building its handler."""
        self._handlers[request_type] = handler_factory

    def register_behavior(self, behavior: PipelineBehavior):
        """Append a behavior; behaviors run in registration order."""
        self._behaviors.append(behavior)

    def has_handler(self, request_type: type) -> bool:
        return request_type in self._handlers

    async def send_async(self, request: Request[TResponse]) -> TResponse:
        """
        Dispatch a command or query.

        Raises:
            ValueError: If nothing is registered for type(request)
            DomainException: Whatever the handler or a behavior rejects with
        """
        factory = self._handlers.get(type(request))
        if factory is None:
            raise ValueError(f"{type(request).__name__} has no registered handler")

        async def invoke_handler():
            return await factory().handle(request)

        # Wrap from the innermost behavior outwards so the first registered runs first
        pipeline = invoke_handler
        for behavior in reversed(self._behaviors):
            pipeline = (lambda b, n: lambda: b.handle(request, n))(behavior, pipeline)

        return await pipeline()
