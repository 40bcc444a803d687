"""Dispatcher import resolution — ``"module:attribute"`` strings to Dispatchers.

Shared by ``assman controllers`` and ``assman route``.
"""

import importlib
import os
import sys

from assman.dispatch import Dispatcher


def resolve_dispatcher(import_string: str) -> Dispatcher:
    """Resolve an import string to a Dispatcher instance.

    Accepts ``"module:attribute"``. When the attribute is omitted it
    defaults to ``"dispatcher"``. A callable that is not a Dispatcher is
    treated as a factory and called with no arguments.

    The working directory is put on ``sys.path`` first, so
    ``assman route app`` finds an ``app.py`` next to the caller.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a Dispatcher.
    """
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "dispatcher"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Dispatcher):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Dispatcher):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not an assman Dispatcher"
        raise TypeError(msg)

    return obj
