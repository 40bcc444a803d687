"""DispatchConfig assembly.

Merges a routing decision with environment state from the option store.
Every lookup has a default, so an empty store still yields a complete
configuration.
"""

from collections.abc import Callable

from assman.config import ManagerConfig
from assman.options import Options
from assman.routing.decision import DispatchConfig, RoutingDecision

# Builds the controller base URL from the option store
UrlBuilder = Callable[[Options, ManagerConfig], str]


def controller_url(options: Options, config: ManagerConfig) -> str:
    """Default URL builder: ``<manager_url>?a=<action>``.

    ``manager_url`` and ``<namespace>.action`` options override the
    ``ManagerConfig`` defaults.
    """
    base = options.get_option("manager_url", config.manager_url)
    action = options.get_option(config.option_key("action"), config.action)
    return f"{base}?a={action}"


def default_core_path(options: Options, config: ManagerConfig) -> str:
    root = options.get_option("core_path", config.core_root)
    return f"{root}components/{config.namespace}/"


def default_assets_url(options: Options, config: ManagerConfig) -> str:
    root = options.get_option("assets_url", config.assets_root)
    return f"{root}components/{config.namespace}/"


def assemble_config(
    decision: RoutingDecision,
    options: Options | None = None,
    config: ManagerConfig | None = None,
    url_builder: UrlBuilder | None = None,
) -> DispatchConfig:
    """Build the ``DispatchConfig`` a controller is constructed with.

    Without *url_builder*, ``controller_url`` builds the controller URL.
    """
    url_builder = url_builder or controller_url
    options = options if options is not None else Options()
    config = config or ManagerConfig()

    core_path = options.get_option(
        config.option_key("core_path"), default_core_path(options, config)
    )
    assets_url = options.get_option(
        config.option_key("assets_url"), default_assets_url(options, config)
    )
    extra = {key: options[key] for key in config.extra_options if key in options}

    return DispatchConfig(
        method=decision.method,
        controller_url=url_builder(options, config),
        core_path=core_path,
        assets_url=assets_url,
        extra=extra,
    )
