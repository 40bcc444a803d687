"""Tests for assman.routing.registry — startup-time controller registry."""

import pytest

from assman.controllers import Controller, ErrorController, PageController, default_registry
from assman.errors import ConfigurationError, HandlerNotFound
from assman.routing.registry import HandlerRegistry


class WidgetController(Controller):
    pass


class TestRegister:
    def test_register_uses_class_name(self) -> None:
        reg = HandlerRegistry()
        identifier = reg.register(WidgetController)
        assert identifier == "assman.WidgetController"
        assert "assman.WidgetController" in reg

    def test_register_explicit_name(self) -> None:
        reg = HandlerRegistry()
        reg.register(lambda env, cfg: ("built", env, cfg), name="ReportController")
        assert "assman.ReportController" in reg

    def test_lambda_without_name_rejected(self) -> None:
        reg = HandlerRegistry()
        factory = lambda env, cfg: None  # noqa: E731
        factory.__name__ = ""
        with pytest.raises(ConfigurationError):
            reg.register(factory)

    def test_duplicate_rejected(self) -> None:
        reg = HandlerRegistry()
        reg.register(WidgetController)
        with pytest.raises(ConfigurationError, match="already registered"):
            reg.register(WidgetController)

    def test_decorator(self) -> None:
        reg = HandlerRegistry()

        @reg.controller
        class GalleryController(Controller):
            pass

        assert "assman.GalleryController" in reg
        assert reg.get("assman.GalleryController") is GalleryController

    def test_custom_namespace(self) -> None:
        reg = HandlerRegistry("gallery")
        reg.register(WidgetController)
        assert reg.names == ["gallery.WidgetController"]

    @pytest.mark.parametrize("namespace", ["", "a.b"])
    def test_invalid_namespace(self, namespace: str) -> None:
        with pytest.raises(ConfigurationError):
            HandlerRegistry(namespace)


class TestFreeze:
    def test_register_after_freeze_raises(self) -> None:
        reg = HandlerRegistry()
        reg.freeze()
        assert reg.frozen is True
        with pytest.raises(RuntimeError, match="frozen"):
            reg.register(WidgetController)

    def test_lookup_after_freeze(self) -> None:
        reg = HandlerRegistry()
        reg.register(WidgetController)
        reg.freeze()
        assert "assman.WidgetController" in reg


class TestLookup:
    def test_exact_match_only(self) -> None:
        reg = HandlerRegistry()
        reg.register(WidgetController)
        assert "assman.widgetcontroller" not in reg
        assert "WidgetController" not in reg

    def test_names_sorted(self) -> None:
        reg = default_registry()
        reg.register(WidgetController)
        assert reg.names == [
            "assman.ErrorController",
            "assman.PageController",
            "assman.WidgetController",
        ]
        assert list(reg) == reg.names
        assert len(reg) == 3

    def test_get_missing(self) -> None:
        assert HandlerRegistry().get("assman.NopeController") is None

    def test_create(self) -> None:
        reg = default_registry()
        controller = reg.create("assman.PageController", "env", "cfg")
        assert isinstance(controller, PageController)
        assert controller.env == "env"
        assert controller.config == "cfg"

    def test_create_missing(self) -> None:
        with pytest.raises(HandlerNotFound):
            HandlerRegistry().create("assman.NopeController", None, None)


class TestDefaultRegistry:
    def test_builtins(self) -> None:
        reg = default_registry()
        assert reg.get("assman.PageController") is PageController
        assert reg.get("assman.ErrorController") is ErrorController
        assert reg.frozen is False
