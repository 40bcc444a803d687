"""Assman exception hierarchy.

Shared across the extractor, resolver, registry, and dispatcher so every
module raises and catches the same types.
"""


class AssmanError(Exception):
    """Base for all assman-specific errors."""


class ConfigurationError(AssmanError):
    """Raised when the registry or manager configuration is invalid.

    Typically raised at startup while controllers are being registered.
    """


class InvalidRequestShape(AssmanError):  # noqa: N818
    """A routing field carried a composite value instead of a scalar.

    Fatal to dispatch: propagates to the caller and is never routed to
    the not-found controller.
    """

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value_type = type(value).__name__
        super().__init__(f"Invalid data type for {field}: {self.value_type}")


class HandlerNotFound(AssmanError):  # noqa: N818
    """No controller is registered under the canonical identifier.

    Internal to resolution. The resolver recovers from it locally and
    the dispatcher falls back to the not-found controller.
    """

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"class not found: {identifier}")


class HandlerMethodNotFound(AssmanError):  # noqa: N818
    """The resolved controller has no method with the resolved name."""

    def __init__(self, identifier: str, method: str) -> None:
        self.identifier = identifier
        self.method = method
        super().__init__(f"{identifier} has no method {method!r}")
