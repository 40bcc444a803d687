"""Asset manager — a small dispatcher with two controllers.

Demonstrates class/method routing, body-driven get/post selection, and the
not-found fallback.

Inspect:
    cd examples/asset_manager
    assman controllers app
    assman route app --class product --method find --field name=chair
"""

import os

from assman import Dispatcher, Options
from assman.controllers import Controller, default_registry

PRODUCTS = {"1": "chair", "2": "table"}

registry = default_registry()


@registry.controller
class ProductController(Controller):
    def getFind(self, body):  # noqa: N802
        return {"status": "success", "data": sorted(PRODUCTS.values())}

    def postFind(self, body):  # noqa: N802
        name = body.get("name", "")
        matches = [v for v in PRODUCTS.values() if name in v]
        return {"status": "success", "data": matches}


@registry.controller
class AssetController(Controller):
    def postUpload(self, body):  # noqa: N802
        return {"status": "success", "data": {"core_path": self.config.core_path}}


dispatcher = Dispatcher(registry, Options.from_env(os.environ))
