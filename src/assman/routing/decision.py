"""RoutingDecision and DispatchConfig frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class RoutingDecision:
    """Which controller to build and which of its methods to call.

    ``handler`` is a canonical identifier such as ``assman.ProductController``;
    ``method`` is verb-prefixed, e.g. ``getFind`` or ``postFind``.
    """

    handler: str
    method: str
    verb: str
    fallback: bool = False

    @property
    def target(self) -> str:
        """``Controller.method`` without the namespace, e.g. ``ErrorController.get404``."""
        return f"{self.handler.rpartition('.')[2]}.{self.method}"


@dataclass(frozen=True, slots=True)
class DispatchConfig:
    """Configuration bundle handed to a controller's constructor."""

    method: str
    controller_url: str
    core_path: str
    assets_url: str
    extra: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def __getitem__(self, key: str) -> Any:
        return self.as_dict()[key]

    def as_dict(self) -> dict[str, Any]:
        """Flat ``dict`` view: the four routing keys plus any extras."""
        return {
            **self.extra,
            "method": self.method,
            "controller_url": self.controller_url,
            "core_path": self.core_path,
            "assets_url": self.assets_url,
        }
