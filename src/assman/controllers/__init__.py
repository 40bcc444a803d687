"""Controller base type and the built-in controllers."""

from assman.controllers.base import Controller
from assman.controllers.builtin import ErrorController, NotFoundResult, PageController, PageResult
from assman.routing.registry import HandlerRegistry

__all__ = [
    "Controller",
    "ErrorController",
    "NotFoundResult",
    "PageController",
    "PageResult",
    "default_registry",
]


def default_registry(namespace: str = "assman") -> HandlerRegistry:
    """A registry holding ``PageController`` and ``ErrorController``.

    Left unfrozen so applications can add their own controllers.
    """
    registry = HandlerRegistry(namespace)
    registry.register(PageController)
    registry.register(ErrorController)
    return registry
