"""Controller name resolution and the not-found fallback.

``class`` tokens are case-normalized once, here, so ``PRODUCT``,
``product`` and ``Product`` all name ``ProductController`` no matter how
case-sensitive the lookup environment is.
"""

import logging

from assman.config import ManagerConfig
from assman.errors import HandlerNotFound
from assman.logsink import LogSink, emit
from assman.routing.decision import RoutingDecision
from assman.routing.registry import HandlerRegistry


def normalize_class(class_token: str) -> str:
    """``pRoDuCt`` -> ``Product``: lower-case, then upper-case the first character."""
    lowered = class_token.lower()
    return lowered[:1].upper() + lowered[1:]


def canonical_name(
    class_token: str,
    namespace: str = "assman",
    suffix: str = "Controller",
) -> str:
    """Build the identifier a ``class`` token maps to.

    ``canonical_name("product")`` -> ``"assman.ProductController"``.
    """
    return f"{namespace}.{normalize_class(class_token)}{suffix}"


def lookup_handler(class_token: str, registry: HandlerRegistry, suffix: str = "Controller") -> str:
    """Return the registered identifier for *class_token*.

    Raises:
        HandlerNotFound: If no controller is registered under it.
    """
    identifier = canonical_name(class_token, registry.namespace, suffix)
    if identifier not in registry:
        raise HandlerNotFound(identifier)
    return identifier


def resolve_handler(
    class_token: str,
    registry: HandlerRegistry,
    sink: LogSink | None = None,
    suffix: str = "Controller",
) -> str | None:
    """Resolve *class_token* to a registered identifier, or ``None``.

    A miss is an expected outcome, not an error: it is logged at error
    level through *sink* and reported as ``None``.
    """
    try:
        return lookup_handler(class_token, registry, suffix)
    except HandlerNotFound as exc:
        emit(sink, logging.ERROR, str(exc))
        return None


def fallback_decision(verb: str, config: ManagerConfig | None = None) -> RoutingDecision:
    """The not-found route: always ``ErrorController.get404``.

    The requested method is never carried over to the fallback controller.
    """
    config = config or ManagerConfig()
    return RoutingDecision(
        handler=config.fallback_handler,
        method=config.fallback_method,
        verb=verb,
        fallback=True,
    )
