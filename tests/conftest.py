"""Shared fixtures: a registry with a sample controller and a recording dispatcher."""

from collections.abc import Mapping
from typing import Any

import pytest

from assman.controllers import Controller, default_registry
from assman.dispatch import Dispatcher
from assman.logsink import RecordingSink
from assman.options import Options
from assman.routing.registry import HandlerRegistry


class ProductController(Controller):
    def getFind(self, body: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:  # noqa: N802
        return ("getFind", dict(body))

    def postFind(self, body: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:  # noqa: N802
        return ("postFind", dict(body))

    def getIndex(self, body: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:  # noqa: N802
        return ("getIndex", dict(body))


@pytest.fixture
def registry() -> HandlerRegistry:
    reg = default_registry()
    reg.register(ProductController)
    return reg


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def dispatcher(registry: HandlerRegistry, sink: RecordingSink) -> Dispatcher:
    return Dispatcher(registry, Options(), sink=sink)
