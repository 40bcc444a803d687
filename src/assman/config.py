"""Manager configuration.

ManagerConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups for routing constants.
"""

from dataclasses import dataclass

# Keys stripped from every submitted body before verb classification:
# the manager auth token and the internal routing marker.
RESERVED_BODY_KEYS: tuple[str, ...] = ("HTTP_MODAUTH", "_assman")


@dataclass(frozen=True, slots=True)
class ManagerConfig:
    """Routing constants and environment defaults. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ManagerConfig(namespace="gallery", core_root="/srv/core/")
    """

    # Controller namespace: identifiers look like "assman.ProductController"
    namespace: str = "assman"
    controller_suffix: str = "Controller"

    # Request defaults
    default_class: str = "Page"
    default_method: str = "index"

    # Not-found fallback
    fallback_class: str = "Error"
    fallback_method: str = "get404"

    # Body bookkeeping
    reserved_body_keys: tuple[str, ...] = RESERVED_BODY_KEYS

    # Environment defaults (used when the option store has no value)
    core_root: str = "core/"
    assets_root: str = "/assets/"
    manager_url: str = "/manager/"
    action: str = "index"

    # Additional option keys copied into DispatchConfig.extra when set
    extra_options: tuple[str, ...] = ()

    @property
    def fallback_handler(self) -> str:
        """Canonical identifier of the not-found controller."""
        return f"{self.namespace}.{self.fallback_class}{self.controller_suffix}"

    def option_key(self, name: str) -> str:
        """Namespaced option key, e.g. ``assman.core_path``."""
        return f"{self.namespace}.{name}"
