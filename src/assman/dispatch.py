"""Dispatch entry point.

Runs extraction, verb classification, controller resolution (with the
not-found fallback), and configuration assembly in that order, then
builds the controller. The order is fixed: the body is cleaned before
the controller lookup, so every outcome sees the same cleaned body.

Usage::

    from assman.controllers import default_registry
    from assman.dispatch import Dispatcher

    registry = default_registry()
    registry.register(ProductController)
    dispatcher = Dispatcher(registry, Options.from_env(os.environ))

    request = RoutingRequest(params={"class": "product", "method": "find"})
    controller = dispatcher.dispatch(request, env)   # ProductController, getFind
"""

import json
import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from assman.config import ManagerConfig
from assman.errors import ConfigurationError
from assman.logsink import LoggerSink, LogSink, emit
from assman.options import Options
from assman.routing.assemble import UrlBuilder, assemble_config, controller_url
from assman.routing.decision import DispatchConfig, RoutingDecision
from assman.routing.extract import extract_descriptor
from assman.routing.registry import HandlerRegistry
from assman.routing.request import RoutingRequest
from assman.routing.resolver import fallback_decision, resolve_handler
from assman.routing.verb import classify_verb, method_identifier


@dataclass(frozen=True, slots=True)
class Resolution:
    """Everything a dispatch decided, before the controller is built."""

    decision: RoutingDecision
    config: DispatchConfig
    body: Mapping[str, Any]


def dump_config(config: DispatchConfig) -> str:
    """Stable text form of *config* for the audit log."""
    return json.dumps(config.as_dict(), sort_keys=True)


class Dispatcher:
    """Resolve routing requests against a controller registry.

    Holds only read-only state after the first dispatch: the registry is
    frozen then, and the option store is immutable.
    """

    __slots__ = ("_freeze_lock", "_url_builder", "config", "options", "registry", "sink")

    def __init__(
        self,
        registry: HandlerRegistry,
        options: Options | None = None,
        config: ManagerConfig | None = None,
        sink: LogSink | None = None,
        url_builder: UrlBuilder | None = None,
    ) -> None:
        self.registry = registry
        self.options = options if options is not None else Options()
        self.config = config or ManagerConfig(namespace=registry.namespace)
        self.sink = sink if sink is not None else LoggerSink()
        self._url_builder = url_builder or controller_url
        self._freeze_lock = threading.Lock()

        if self.config.namespace != registry.namespace:
            msg = (
                f"ManagerConfig namespace {self.config.namespace!r} does not match "
                f"registry namespace {registry.namespace!r}"
            )
            raise ConfigurationError(msg)

    def with_sink(self, sink: LogSink) -> "Dispatcher":
        """A dispatcher sharing this one's registry and options, logging to *sink*."""
        return Dispatcher(self.registry, self.options, self.config, sink, self._url_builder)

    def _ensure_frozen(self) -> None:
        fallback = self.config.fallback_handler
        if fallback not in self.registry:
            msg = f"Fallback controller {fallback!r} is not registered"
            raise ConfigurationError(msg)
        if self.registry.frozen:
            return
        with self._freeze_lock:
            if not self.registry.frozen:
                self.registry.freeze()

    def resolve(self, request: RoutingRequest) -> Resolution:
        """Decide controller, method, and configuration for *request*.

        Raises:
            InvalidRequestShape: If ``class`` or ``method`` is composite.
        """
        self._ensure_frozen()

        descriptor = extract_descriptor(request, self.config)
        classified = classify_verb(request.body, request.files, self.config.reserved_body_keys)

        identifier = resolve_handler(
            descriptor.class_token,
            self.registry,
            self.sink,
            self.config.controller_suffix,
        )
        if identifier is None:
            decision = fallback_decision(classified.verb, self.config)
        else:
            decision = RoutingDecision(
                handler=identifier,
                method=method_identifier(classified.verb, descriptor.method_token),
                verb=classified.verb,
            )

        dispatch_config = assemble_config(decision, self.options, self.config, self._url_builder)
        emit(
            self.sink,
            logging.INFO,
            f"Instantiating {decision.handler} with config {dump_config(dispatch_config)}",
        )
        return Resolution(decision=decision, config=dispatch_config, body=classified.body)

    def dispatch(self, request: RoutingRequest, env: Any = None) -> Any:
        """Resolve *request* and build its controller.

        Construction errors raised by the controller propagate unchanged.
        """
        resolution = self.resolve(request)
        return self.registry.create(resolution.decision.handler, env, resolution.config)

    def handle(self, request: RoutingRequest, env: Any = None) -> Any:
        """Resolve, build, and invoke the controller; return its result."""
        resolution = self.resolve(request)
        controller = self.registry.create(resolution.decision.handler, env, resolution.config)
        return controller.invoke(resolution.body)
