"""Controller base type.

A controller is built with the caller's environment handle and the
``DispatchConfig`` for one request. ``invoke()`` then calls the method
named by ``config.method`` with the cleaned body.
"""

from collections.abc import Mapping
from typing import Any

from assman.errors import HandlerMethodNotFound
from assman.routing.decision import DispatchConfig


class Controller:
    """Base for manager controllers.

    Subclasses define verb-prefixed methods that take the body mapping::

        class ProductController(Controller):
            def getFind(self, body):
                ...

            def postFind(self, body):
                ...
    """

    def __init__(self, env: Any, config: DispatchConfig) -> None:
        self.env = env
        self.config = config

    @property
    def method(self) -> str:
        return self.config.method

    def invoke(self, body: Mapping[str, Any]) -> Any:
        """Call the resolved method with *body*.

        Raises:
            HandlerMethodNotFound: If the controller lacks the method, or
                the name is private.
        """
        name = self.config.method
        handler = None if name.startswith("_") else getattr(self, name, None)
        if not callable(handler):
            raise HandlerMethodNotFound(type(self).__name__, name)
        return handler(body)
