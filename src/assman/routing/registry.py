"""Controller registry.

Controllers are registered by name during startup and the registry is
frozen before the first dispatch. Lookup is an exact match on the
canonical identifier ``<namespace>.<Name>``; there is no reflective class
loading, so an identifier that was never registered simply does not
resolve.
"""

from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from assman.errors import ConfigurationError, HandlerNotFound

# Factory signature: (env, dispatch_config) -> controller instance
ControllerFactory = Callable[[Any, Any], Any]

T = TypeVar("T")


class HandlerRegistry:
    """Startup-time mapping of canonical controller names to factories.

    Usage::

        registry = HandlerRegistry("assman")
        registry.register(ProductController)           # assman.ProductController
        registry.register(make_report, name="ReportController")
        registry.freeze()
        "assman.ProductController" in registry         # True
    """

    __slots__ = ("_factories", "_frozen", "namespace")

    def __init__(self, namespace: str = "assman") -> None:
        if not namespace or "." in namespace:
            msg = f"Invalid controller namespace: {namespace!r}"
            raise ConfigurationError(msg)
        self.namespace = namespace
        self._factories: dict[str, ControllerFactory] = {}
        self._frozen = False

    def identifier(self, name: str) -> str:
        """Qualify a bare controller name with this registry's namespace."""
        return f"{self.namespace}.{name}"

    def register(self, factory: ControllerFactory, name: str | None = None) -> str:
        """Register *factory* and return its canonical identifier.

        *name* defaults to the factory's ``__name__``. Must be called
        before ``freeze()``.
        """
        if self._frozen:
            msg = "Cannot register controllers after the registry is frozen."
            raise RuntimeError(msg)

        name = name or getattr(factory, "__name__", None)
        if not name:
            msg = f"Cannot derive a controller name from {factory!r}; pass name="
            raise ConfigurationError(msg)

        identifier = self.identifier(name)
        if identifier in self._factories:
            msg = f"Controller {identifier!r} is already registered"
            raise ConfigurationError(msg)

        self._factories[identifier] = factory
        return identifier

    def controller(self, cls: type[T]) -> type[T]:
        """Class decorator form of ``register``."""
        self.register(cls)
        return cls

    def freeze(self) -> None:
        """Freeze the registry. No more controllers can be registered."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def names(self) -> list[str]:
        """All registered identifiers, sorted."""
        return sorted(self._factories)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self._factories)

    def get(self, identifier: str) -> ControllerFactory | None:
        return self._factories.get(identifier)

    def create(self, identifier: str, env: Any, config: Any) -> Any:
        """Build the controller registered as *identifier*.

        Raises:
            HandlerNotFound: If nothing is registered under *identifier*.
        """
        factory = self._factories.get(identifier)
        if factory is None:
            raise HandlerNotFound(identifier)
        return factory(env, config)
