"""Assman — manager request dispatch.

Maps the ``class`` and ``method`` request fields onto registered
controllers, picking a ``get`` or ``post`` method from what the request
carries, and falls back to a not-found controller for unknown classes.

Basic usage::

    from assman import Dispatcher, RoutingRequest
    from assman.controllers import Controller, default_registry

    registry = default_registry()

    @registry.controller
    class ProductController(Controller):
        def getFind(self, body):
            ...

    dispatcher = Dispatcher(registry)
    request = RoutingRequest(params={"class": "product", "method": "find"})
    result = dispatcher.handle(request)
"""

__version__ = "0.1.0"
__all__ = [
    "AssmanError",
    "ConfigurationError",
    "DispatchConfig",
    "Dispatcher",
    "HandlerRegistry",
    "InvalidRequestShape",
    "ManagerConfig",
    "Options",
    "RoutingDecision",
    "RoutingRequest",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import assman`` fast while providing a clean top-level API.
    """
    if name == "Dispatcher":
        from assman.dispatch import Dispatcher

        return Dispatcher

    if name == "ManagerConfig":
        from assman.config import ManagerConfig

        return ManagerConfig

    if name == "Options":
        from assman.options import Options

        return Options

    if name == "RoutingRequest":
        from assman.routing.request import RoutingRequest

        return RoutingRequest

    if name in ("DispatchConfig", "RoutingDecision"):
        from assman.routing import decision as _decision

        return getattr(_decision, name)

    if name == "HandlerRegistry":
        from assman.routing.registry import HandlerRegistry

        return HandlerRegistry

    if name in ("AssmanError", "ConfigurationError", "InvalidRequestShape"):
        from assman import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
