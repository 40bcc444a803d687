"""Tests for assman.routing.assemble — DispatchConfig assembly."""

import pytest

from assman.config import ManagerConfig
from assman.options import Options
from assman.routing.assemble import assemble_config, controller_url
from assman.routing.decision import DispatchConfig, RoutingDecision

DECISION = RoutingDecision(handler="assman.ProductController", method="getFind", verb="get")


class TestDefaults:
    def test_all_unset(self) -> None:
        cfg = assemble_config(DECISION)
        assert cfg == DispatchConfig(
            method="getFind",
            controller_url="/manager/?a=index",
            core_path="core/components/assman/",
            assets_url="/assets/components/assman/",
        )

    def test_roots_from_global_options(self) -> None:
        opts = Options({"core_path": "/srv/core/", "assets_url": "/static/"})
        cfg = assemble_config(DECISION, opts)
        assert cfg.core_path == "/srv/core/components/assman/"
        assert cfg.assets_url == "/static/components/assman/"

    def test_namespaced_options_win(self) -> None:
        opts = Options(
            {
                "core_path": "/srv/core/",
                "assman.core_path": "/opt/assman/",
                "assman.assets_url": "https://cdn.example.com/assman/",
            }
        )
        cfg = assemble_config(DECISION, opts)
        assert cfg.core_path == "/opt/assman/"
        assert cfg.assets_url == "https://cdn.example.com/assman/"

    def test_namespace_in_defaults(self) -> None:
        cfg = assemble_config(DECISION, Options(), ManagerConfig(namespace="gallery"))
        assert cfg.core_path == "core/components/gallery/"


class TestControllerUrl:
    def test_default(self) -> None:
        assert controller_url(Options(), ManagerConfig()) == "/manager/?a=index"

    def test_options(self) -> None:
        opts = Options({"manager_url": "/mgr/index.php", "assman.action": "42"})
        assert controller_url(opts, ManagerConfig()) == "/mgr/index.php?a=42"

    def test_custom_builder(self) -> None:
        cfg = assemble_config(DECISION, url_builder=lambda opts, conf: "/custom")
        assert cfg.controller_url == "/custom"

    def test_none_builder_uses_default(self) -> None:
        cfg = assemble_config(DECISION, url_builder=None)
        assert cfg.controller_url == "/manager/?a=index"


class TestExtra:
    def test_only_set_extras_copied(self) -> None:
        opts = Options({"assman.thumbnail_width": "240"})
        conf = ManagerConfig(extra_options=("assman.thumbnail_width", "assman.missing"))
        cfg = assemble_config(DECISION, opts, conf)
        assert dict(cfg.extra) == {"assman.thumbnail_width": "240"}
        assert cfg.as_dict()["assman.thumbnail_width"] == "240"


class TestDispatchConfig:
    def test_as_dict(self) -> None:
        cfg = assemble_config(DECISION)
        assert cfg.as_dict() == {
            "method": "getFind",
            "controller_url": "/manager/?a=index",
            "core_path": "core/components/assman/",
            "assets_url": "/assets/components/assman/",
        }

    def test_getitem(self) -> None:
        cfg = assemble_config(DECISION)
        assert cfg["method"] == "getFind"

    def test_frozen(self) -> None:
        cfg = assemble_config(DECISION)
        with pytest.raises(AttributeError):
            cfg.method = "postFind"  # type: ignore[misc]

    def test_extra_read_only(self) -> None:
        cfg = DispatchConfig("getIndex", "/u", "/c", "/a", extra={"k": "v"})
        with pytest.raises(TypeError):
            cfg.extra["k"] = "w"  # type: ignore[index]

    def test_routing_keys_not_overridden_by_extra(self) -> None:
        cfg = DispatchConfig("getIndex", "/u", "/c", "/a", extra={"method": "evil"})
        assert cfg.as_dict()["method"] == "getIndex"
