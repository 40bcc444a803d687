"""Built-in controllers: the default landing page and the not-found handler."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from assman.controllers.base import Controller


@dataclass(frozen=True, slots=True)
class PageResult:
    """What ``PageController`` hands back for rendering."""

    page: str
    controller_url: str
    assets_url: str


@dataclass(frozen=True, slots=True)
class NotFoundResult:
    """What ``ErrorController.get404`` hands back.

    The dispatcher treats a not-found route as a normal dispatch; the
    status lives here, in the result.
    """

    status: int = 404
    detail: str = "Not Found"


class PageController(Controller):
    """Default controller for requests without a ``class`` field."""

    def getIndex(self, body: Mapping[str, Any]) -> PageResult:  # noqa: N802
        return PageResult(
            page="index",
            controller_url=self.config.controller_url,
            assets_url=self.config.assets_url,
        )


class ErrorController(Controller):
    """Fallback controller for unknown ``class`` values."""

    def get404(self, body: Mapping[str, Any]) -> NotFoundResult:
        return NotFoundResult()
